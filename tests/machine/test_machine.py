import io

import pytest

import cowmu.common.ops as ops
import cowmu.lang.parser as parser
from cowmu.lang.parser import Loop
from cowmu.runtime.machine import Machine
from cowmu.common.errors import BoundsError, InputExhausted, UnsupportedOperation

from fixtures import with_machine, with_output  # noqa: F401


def test_initial_state(with_machine):  # noqa: F811
    assert len(with_machine.tape) == 3000
    assert not any(with_machine.tape)
    assert with_machine.pointer == 0
    assert with_machine.register is None


def test_write_three(with_machine, with_output):  # noqa: F811
    with_machine.run(parser.compile_string('MoO MoO MoO OOM'))
    assert with_output.getvalue() == b'\x03'


def test_inc_wraps(with_machine):  # noqa: F811
    with_machine.tape[0] = 17
    with_machine.run((ops.VAL_INC,) * 256)
    assert with_machine.tape[0] == 17

    with_machine.tape[0] = 255
    with_machine.run((ops.VAL_INC,))
    assert with_machine.tape[0] == 0


def test_dec_wraps(with_machine):  # noqa: F811
    with_machine.run((ops.VAL_DEC,))
    assert with_machine.tape[0] == 255

    with_machine.run((ops.VAL_DEC,) * 255)
    assert with_machine.tape[0] == 0


def test_dec_inverts_inc(with_machine):  # noqa: F811
    with_machine.tape[0] = 200
    with_machine.run((ops.VAL_INC,) * 100 + (ops.VAL_DEC,) * 100)
    assert with_machine.tape[0] == 200


def test_zero(with_machine):  # noqa: F811
    with_machine.tape[0] = 99
    with_machine.run((ops.VAL_ZERO,))
    assert with_machine.tape[0] == 0


def test_pointer_moves(with_machine):  # noqa: F811
    with_machine.run(parser.compile_string('moO moO MoO mOo MoO MoO'))
    assert with_machine.pointer == 1
    assert with_machine.tape[:3] == bytearray([0, 2, 1])


def test_pointer_below_zero(with_machine):  # noqa: F811
    with pytest.raises(BoundsError):
        with_machine.run((ops.PTR_DEC,))

    assert with_machine.pointer == 0


def test_pointer_past_end(with_output):  # noqa: F811
    machine = Machine(io.BytesIO(), with_output, tape_size=2)
    machine.run((ops.PTR_INC,))

    with pytest.raises(BoundsError) as e:
        machine.run((ops.PTR_INC,))

    assert e.value.pointer == 2
    assert machine.pointer == 1


def test_register_copies(with_machine, with_output):  # noqa: F811
    with_machine.run(parser.compile_string('MoO MoO MMM moO MMM OOM'))
    assert with_output.getvalue() == b'\x02'
    assert with_machine.register is None


def test_register_toggle_twice(with_machine):  # noqa: F811
    with_machine.tape[0] = 42
    with_machine.run((ops.REG_TOGGLE,))
    assert with_machine.register == 42

    with_machine.run((ops.REG_TOGGLE,))
    assert with_machine.tape[0] == 42
    assert with_machine.register is None


def test_read_byte(with_output):  # noqa: F811
    machine = Machine(io.BytesIO(b'\xfeA'), with_output)
    machine.run((ops.READ, ops.PTR_INC, ops.READ))
    assert machine.tape[:2] == bytearray(b'\xfeA')


def test_read_exhausted(with_machine):  # noqa: F811
    with pytest.raises(InputExhausted):
        with_machine.run((ops.READ,))


def test_rw_cond_reads_on_zero(with_output):  # noqa: F811
    machine = Machine(io.BytesIO(b'\x07'), with_output)
    machine.run((ops.RW_COND,))
    assert machine.tape[0] == 7
    assert with_output.getvalue() == b''


def test_rw_cond_writes_on_nonzero(with_machine, with_output):  # noqa: F811
    with_machine.tape[0] = 200
    with_machine.run((ops.RW_COND,))
    assert with_output.getvalue() == bytes([200])


def test_rw_cond_read_exhausted(with_machine):  # noqa: F811
    with pytest.raises(InputExhausted):
        with_machine.run((ops.RW_COND,))


def test_exec_current_unsupported(with_machine):  # noqa: F811
    with pytest.raises(UnsupportedOperation, match='mOO'):
        with_machine.run((ops.EXEC_CUR,))


def test_loop_skipped_on_zero(with_machine, with_output):  # noqa: F811
    with_machine.run(parser.compile_string('MOO MoO OOM moo'))
    assert with_machine.tape[0] == 0
    assert with_output.getvalue() == b''


def test_loop_rechecks_guard(with_machine):  # noqa: F811
    with_machine.tape[0] = 5
    with_machine.run((Loop((ops.VAL_DEC, ops.PTR_INC, ops.VAL_INC, ops.PTR_DEC)),))
    assert with_machine.tape[:2] == bytearray([0, 5])


def test_loop_guard_follows_pointer(with_machine):  # noqa: F811
    # Body moves right each pass, loop stops on the first zero cell
    with_machine.tape[0:4] = bytearray([1, 1, 1, 0])
    with_machine.run(parser.compile_string('MOO moO moo'))
    assert with_machine.pointer == 3


def test_deeply_nested_loops(with_machine, with_output):  # noqa: F811
    depth = 1000
    source = 'MoO ' + 'MOO ' * depth + 'OOO ' + 'moo ' * depth + 'MoO MoO OOM'
    with_machine.run(parser.compile_string(source))
    assert with_output.getvalue() == b'\x02'


def test_empty_loop_body_on_zero(with_machine):  # noqa: F811
    with_machine.run((Loop(()), ops.VAL_INC))
    assert with_machine.tape[0] == 1
