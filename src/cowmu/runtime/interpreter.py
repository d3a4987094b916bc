import sys
from pathlib import Path
import logging as lg
import traceback
from typing import BinaryIO

import click

from cowmu.common.machconf import TAPE_SIZE
from cowmu.common.errors import StructuralError, CowRuntimeError
import cowmu.lang.parser as parser
from cowmu.runtime.machine import Machine


EXIT_OK = 0
EXIT_READ_ERROR = 1
EXIT_STRUCTURE_ERROR = 2
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


class RunSettings:
    verbose: bool
    tape_size: int

    def __init__(self):
        self.verbose = False
        self.tape_size = TAPE_SIZE

    def update(self, verbose: bool | None = None, tape_size: int | None = None):
        if verbose is not None:
            self.verbose = verbose

        if tape_size is not None:
            self.tape_size = tape_size

        return self


def execute(
    source: str,
    instream: BinaryIO,
    outstream: BinaryIO,
    settings: RunSettings | None = None
) -> Machine:
    if settings is None:
        settings = RunSettings()

    # Structural errors surface here, before the tape exists
    program = parser.compile_string(source)
    machine = Machine(instream, outstream, settings.tape_size)

    try:
        machine.run(program)

    finally:
        machine.debug_dump()

    return machine


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option(
    '-t', '--tape-size',
    type=click.IntRange(min=1),
    default=TAPE_SIZE,
    show_default=True,
    help='Number of memory cells'
)
@click.argument('source_filename', type=Path)
def run(verbose: bool, tape_size: int, source_filename: Path):
    settings = RunSettings().update(verbose=verbose, tape_size=tape_size)

    lg.basicConfig(level=lg.DEBUG if settings.verbose else lg.INFO)
    lg.debug("COWMU")

    try:
        source = source_filename.read_text(encoding='utf-8', errors='replace')

    except OSError as e:
        lg.error(f'Unable to read {source_filename}: {e}')
        sys.exit(EXIT_READ_ERROR)

    stdin = sys.stdin.buffer
    stdout = sys.stdout.buffer

    try:
        execute(source, stdin, stdout, settings)
        sys.exit(EXIT_OK)

    except StructuralError as e:
        lg.error(f'Malformed program: {e}')
        sys.exit(EXIT_STRUCTURE_ERROR)

    except CowRuntimeError as e:
        lg.error(f'Execution halted on error: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.error(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
