import sys
from pathlib import Path
import logging as lg
from typing import Iterable, Iterator

import click

import cowmu.common.ops as ops
from cowmu.common.errors import StructuralError
import cowmu.lang.lexer as lexer
import cowmu.lang.parser as parser
from cowmu.runtime.interpreter import EXIT_READ_ERROR, EXIT_STRUCTURE_ERROR
from cowmu.lang.parser import Instruction, Loop


def format_tree(program: Iterable[Instruction]) -> Iterator[str]:
    pending = [iter(program)]

    while pending:
        indent = '  ' * (len(pending) - 1)

        for instr in pending[-1]:
            if isinstance(instr, Loop):
                yield f'{indent}{ops.NAMES[ops.LOOP_START]}'
                pending.append(iter(instr.body))
                break

            yield f'{indent}{ops.NAMES[instr]}'

        else:
            pending.pop()

            if pending:
                yield f'{"  " * (len(pending) - 1)}{ops.NAMES[ops.LOOP_END]}'


@click.command()
@click.option('--tree', is_flag=True, help='Print the loop structure instead of the flat opcode list')
@click.argument('source_filename', type=Path)
def dump(tree: bool, source_filename: Path):
    lg.basicConfig(level=lg.INFO)

    try:
        source = source_filename.read_text(encoding='utf-8', errors='replace')

    except OSError as e:
        lg.error(f'Unable to read {source_filename}: {e}')
        sys.exit(EXIT_READ_ERROR)

    if not tree:
        for op in lexer.tokenize(source):
            click.echo(ops.NAMES[op])

        return

    try:
        program = parser.compile_string(source)

    except StructuralError as e:
        lg.error(f'Malformed program: {e}')
        sys.exit(EXIT_STRUCTURE_ERROR)

    for line in format_tree(program):
        click.echo(line)


if __name__ == '__main__':
    dump()
