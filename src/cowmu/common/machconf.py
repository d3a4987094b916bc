TAPE_SIZE = 3000
CELL_MODULUS = 0x100
