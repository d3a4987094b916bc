# type: ignore
import io

import pytest

from cowmu.runtime.machine import Machine


@pytest.fixture
def with_output():
    yield io.BytesIO()


@pytest.fixture
def with_machine(with_output):
    yield Machine(io.BytesIO(), with_output)
