import logging as lg
from typing import BinaryIO, Sequence

import cowmu.common.ops as ops
from cowmu.common.machconf import TAPE_SIZE, CELL_MODULUS
from cowmu.common.errors import BoundsError, InputExhausted, UnsupportedOperation
from cowmu.lang.parser import Instruction, Loop


class Machine():
    tape: bytearray  # Memory cells
    pointer: int  # Current cell
    register: int | None  # Scratch byte, None when empty

    def __init__(self, instream: BinaryIO, outstream: BinaryIO, tape_size: int = TAPE_SIZE):
        self.instream = instream    # Ref. to program input
        self.outstream = outstream  # Ref. to program output

        self.tape = bytearray(tape_size)
        self.pointer = 0
        self.register = None

    # - Helpers - #

    def debug_dump(self):
        register = '-' if self.register is None else f'{self.register:X}'
        lg.debug(f'P:{self.pointer} M[P]:{self.cell:X} R:{register}')

    @property
    def cell(self) -> int:
        return self.tape[self.pointer]

    @cell.setter
    def cell(self, val: int):
        self.tape[self.pointer] = val % CELL_MODULUS

    def move(self, offset: int):
        target = self.pointer + offset

        if target < 0 or target >= len(self.tape):
            raise BoundsError(target, len(self.tape))

        self.pointer = target

    def read_byte(self):
        buf = self.instream.read(1)

        if not buf:
            raise InputExhausted()

        self.cell = buf[0]

    def write_byte(self):
        self.outstream.write(bytes((self.cell,)))
        self.outstream.flush()

    # - Operations - #

    def ptr_dec(self):
        self.move(-1)

    def ptr_inc(self):
        self.move(1)

    def exec_cur(self):
        raise UnsupportedOperation(ops.NAMES[ops.EXEC_CUR])

    def rw_cond(self):
        if self.cell == 0:
            self.read_byte()
        else:
            self.write_byte()

    def val_dec(self):
        self.cell = self.cell - 1

    def val_inc(self):
        self.cell = self.cell + 1

    def val_zero(self):
        self.cell = 0

    def reg_toggle(self):
        if self.register is None:
            self.register = self.cell
        else:
            self.cell = self.register
            self.register = None

    def write(self):
        self.write_byte()

    def read(self):
        self.read_byte()

    HANDLERS = {
        ops.PTR_DEC: ptr_dec,
        ops.PTR_INC: ptr_inc,
        ops.EXEC_CUR: exec_cur,
        ops.RW_COND: rw_cond,
        ops.VAL_DEC: val_dec,
        ops.VAL_INC: val_inc,
        ops.VAL_ZERO: val_zero,
        ops.REG_TOGGLE: reg_toggle,
        ops.WRITE: write,
        ops.READ: read
    }

    # -- Implementation -- #

    def exec_instruction(self, op: int):
        handler = self.HANDLERS[op]
        handler(self)

    def run(self, program: Sequence[Instruction]):
        # Frame: [body, next index, is loop body]
        frames: list[list] = [[program, 0, False]]

        while frames:
            frame = frames[-1]
            body, index, is_loop = frame

            if index == len(body):
                # Guard is re-read after every pass over a loop body
                if is_loop and self.cell != 0:
                    frame[1] = 0
                else:
                    frames.pop()

                continue

            frame[1] = index + 1
            instr = body[index]

            if isinstance(instr, Loop):
                if self.cell != 0:
                    frames.append([instr.body, 0, True])
            else:
                self.exec_instruction(instr)
