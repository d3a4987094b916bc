import logging as lg
from dataclasses import dataclass
from typing import Iterable, Iterator

import cowmu.common.ops as ops
from cowmu.common.errors import StructuralError
from cowmu.lang.lexer import tokenize


@dataclass(frozen=True)
class Loop:
    body: tuple['Instruction', ...]


Instruction = int | Loop
Program = tuple[Instruction, ...]


def parse(opcodes: Iterable[int]) -> Program:
    ''' Builds the instruction tree, one open sequence per unclosed MOO '''

    open_seqs: list[list[Instruction]] = [[]]

    for op in opcodes:
        if op == ops.LOOP_START:
            open_seqs.append([])

        elif op == ops.LOOP_END:
            if len(open_seqs) == 1:
                raise StructuralError('loop end with no matching loop start')

            body = open_seqs.pop()
            open_seqs[-1].append(Loop(tuple(body)))

        else:
            open_seqs[-1].append(op)

    if len(open_seqs) > 1:
        raise StructuralError(
            f'loop start with no matching loop end ({len(open_seqs) - 1} left open)'
        )

    return tuple(open_seqs[0])


def compile_string(source: str) -> Program:
    program = parse(tokenize(source))
    lg.debug(f'Parsed {len(program)} top-level instructions')
    return program


def flatten(program: Iterable[Instruction]) -> Iterator[int]:
    pending = [iter(program)]

    while pending:
        for instr in pending[-1]:
            if isinstance(instr, Loop):
                pending.append(iter(instr.body))
                break

            yield instr

        else:
            pending.pop()
