# Numbered in the order the COW language reference lists them
LOOP_END = 0x00       # moo  -> jump back to the matching MOO
PTR_DEC = 0x01        # mOo  -> P - 1
PTR_INC = 0x02        # moO  -> P + 1
EXEC_CUR = 0x03       # mOO  -> execute M[P] as an instruction (unsupported)
RW_COND = 0x04        # Moo  -> if M[P] .eq 0 read else write
VAL_DEC = 0x05        # MOo  -> M[P] - 1
VAL_INC = 0x06        # MoO  -> M[P] + 1
LOOP_START = 0x07     # MOO  -> if M[P] .eq 0 skip past the matching moo
VAL_ZERO = 0x08       # OOO  -> 0 -> M[P]
REG_TOGGLE = 0x09     # MMM  -> M[P] -> R, or R -> M[P] and clear R
WRITE = 0x0A          # OOM  -> M[P] -> out
READ = 0x0B           # oom  -> in -> M[P]

MNEMONICS = {
    'moo': LOOP_END,
    'mOo': PTR_DEC,
    'moO': PTR_INC,
    'mOO': EXEC_CUR,
    'Moo': RW_COND,
    'MOo': VAL_DEC,
    'MoO': VAL_INC,
    'MOO': LOOP_START,
    'OOO': VAL_ZERO,
    'MMM': REG_TOGGLE,
    'OOM': WRITE,
    'oom': READ
}

NAMES = {op: mnemonic for mnemonic, op in MNEMONICS.items()}
