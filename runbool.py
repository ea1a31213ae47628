"""Run Boolfuck code.

Boolfuck is BF on a tape of single bits. The commands are:

    +   flip the bit under the head
    ,   read one bit of input into the bit under the head
    ;   write the bit under the head to the output
    <   move the head left
    >   move the head right
    [   if the bit under the head is 0, jump past the matching ]
    ]   if the bit under the head is 1, jump back to the matching [

Every other character is ignored. Input and output bits are packed into bytes
least significant bit first.
"""

import sys

# - Errors

class BoolfuckError(RuntimeError):
    """Base class for errors that stop a Boolfuck program."""

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position

class InputExhausted(BoolfuckError):
    """A `,` needed more input bits than were given."""

class UnbalancedBrackets(BoolfuckError):
    """A jump reached the edge of the program without finding its partner."""

# - Storage

class Tape:
    """Bit memory addressed by any integer position.

    Cells that were never written read as 0.
    """

    def __init__(self):
        self.right = bytearray()  # positions 0, 1, 2, ...
        self.left = bytearray()  # positions -1, -2, -3, ...

    def _side(self, pos: int):
        if pos >= 0:
            return self.right, pos
        else:
            return self.left, -pos - 1

    def read(self, pos: int) -> bool:
        data, i = self._side(pos)
        return i < len(data) and data[i] != 0

    def write(self, pos: int, bit: bool) -> None:
        data, i = self._side(pos)
        if i >= len(data):
            data += bytes(i + 1 - len(data))
        data[i] = 1 if bit else 0

    def __len__(self):
        return len(self.left) + len(self.right)

class BitReader:
    """Read bits out of a byte string, least significant bit first."""

    def __init__(self, data=b""):
        if isinstance(data, str):
            data = data.encode()
        self.data = bytes(data)
        self.cursor = 0

    def next_bit(self) -> bool:
        i = self.cursor
        if i // 8 >= len(self.data):
            raise InputExhausted(f"input exhausted at bit {i}", i)
        self.cursor += 1
        return (self.data[i // 8] >> (i % 8)) & 1 == 1

class BitWriter:
    """Pack bits into a byte string, least significant bit first."""

    def __init__(self):
        self.data = bytearray(1)
        self.cursor = 0

    def push_bit(self, bit: bool) -> None:
        i = self.cursor
        while i // 8 >= len(self.data):
            self.data.append(0)
        if bit:
            self.data[i // 8] |= 1 << (i % 8)
        self.cursor += 1

    def getvalue(self) -> bytes:
        return bytes(self.data)

# - Jumps

def find_match(program: str, start: int, bracket: str) -> int:
    """Return where a jump from the bracket at `start` lands.

    A `[` lands just past its `]` and a `]` lands on its `[`.

    Raises UnbalancedBrackets if the edge of the program is reached first.
    """
    if bracket == "[":
        target, direction, adjust = "]", 1, 1
    elif bracket == "]":
        target, direction, adjust = "[", -1, 0
    else:
        raise ValueError(f"not a bracket: {bracket!r}")

    i = start
    depth = 0  # Same-type brackets seen that still need closing
    while True:
        if direction < 0 and i <= 0:
            raise UnbalancedBrackets(f"no '[' before ']' at {start}", start)
        if direction > 0 and i + 1 >= len(program):
            raise UnbalancedBrackets(f"no ']' after '[' at {start}", start)
        i += direction
        if program[i] == bracket:
            depth += 1
        elif program[i] == target:
            if depth == 0:
                return i + adjust
            depth -= 1

# - Execution

RUNNING = "running"
HALTED = "halted"
FAILED = "failed"

class Interpreter:
    """One run of a Boolfuck program over a fixed input.

    Use step() to execute one instruction at a time or run() to execute until
    the program ends.
    """

    def __init__(self, program, inp=b""):
        if isinstance(program, (bytes, bytearray)):
            program = bytes(program).decode("latin-1")
        self.program = program
        self.pc = 0
        self.head = 0
        self.steps = 0
        self.tape = Tape()
        self.input = BitReader(inp)
        self.output = BitWriter()
        self.state = RUNNING
        self.error = None

    def step(self) -> bool:
        """Execute one instruction.

        Returns True if an instruction was executed and False once the program
        counter has moved past the end of the program. Errors are raised and
        stay raised on every later call.
        """
        if self.state == FAILED:
            raise self.error
        if self.pc >= len(self.program):
            self.state = HALTED
            return False
        try:
            self._dispatch(self.program[self.pc])
        except BoolfuckError as exc:
            self.state = FAILED
            self.error = exc
            raise
        self.steps += 1
        return True

    def _dispatch(self, instr: str) -> None:
        tape = self.tape
        pc = self.pc + 1

        if instr == "+":
            tape.write(self.head, not tape.read(self.head))

        elif instr == ",":
            tape.write(self.head, self.input.next_bit())

        elif instr == ";":
            self.output.push_bit(tape.read(self.head))

        elif instr == "<":
            self.head -= 1

        elif instr == ">":
            self.head += 1

        elif instr == "[":
            if not tape.read(self.head):
                pc = find_match(self.program, self.pc, "[")

        elif instr == "]":
            if tape.read(self.head):
                pc = find_match(self.program, self.pc, "]")

        self.pc = pc

    def run(self) -> bytes:
        """Run until the program ends and return the output bytes."""
        while self.step():
            pass
        return self.output.getvalue()

def runbool(program, inp=b"") -> bytes:
    """Run `program` over `inp` and return its output bytes."""
    return Interpreter(program, inp).run()

def main(argv=None):
    if argv is None:
        argv = sys.argv
    if not 2 <= len(argv) <= 3:
        print("Usage: python runbool.py <filename> [<inputfile>]", file=sys.stderr)
        return 2

    if argv[1] == "-":
        program = sys.stdin.buffer.read()
    else:
        with open(argv[1], "rb") as file:
            program = file.read()

    data = b""
    if len(argv) == 3:
        with open(argv[2], "rb") as file:
            data = file.read()

    try:
        out = runbool(program, data)
    except BoolfuckError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    sys.stdout.buffer.write(out)
    sys.stdout.flush()
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv))
