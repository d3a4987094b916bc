class CowError(Exception):
    """Base class for every fatal condition of a COW run."""
    pass


class StructuralError(CowError):
    """Loop markers do not pair up. Raised before anything executes."""
    pass


class CowRuntimeError(CowError):
    pass


class BoundsError(CowRuntimeError):
    def __init__(self, pointer: int, tape_size: int):
        super().__init__(f'pointer moved to {pointer}, outside the tape [0, {tape_size})')
        self.pointer = pointer
        self.tape_size = tape_size


class InputExhausted(CowRuntimeError):
    def __init__(self):
        super().__init__('read requested but no input remains')


class UnsupportedOperation(CowRuntimeError):
    def __init__(self, mnemonic: str):
        super().__init__(f'instruction {mnemonic} is not supported')
        self.mnemonic = mnemonic
