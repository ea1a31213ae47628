"""Create Boolfuck code with relative ease.

Various functions are provided that take strings of Boolfuck code and return
a new string.
"""

def goto(delta: int) -> str:
    """Move the head by `delta` cells where right is positive.

    If `delta` is positive, the result is equivalent to `">" * delta`. If
    `delta` is negative, the result is equivalent to `"<" * -delta`.
    """
    if delta >= 0:
        return ">" * delta
    else:
        return "<" * -delta
g = goto

def flip() -> str:
    """Flip the current bit.

    Equivalent to `"+"`.
    """
    return "+"
f = flip

def setzero() -> str:
    """Sets the current bit to 0.

    Equivalent to `"[+]"`.
    """
    return "[+]"

def setone() -> str:
    """Sets the current bit to 1.

    Equivalent to `setzero() + flip()`.
    """
    return setzero() + f()

# Return a single number
def _one(nums) -> int:
    if isinstance(nums, int):
        return nums
    if len(nums) == 1:
        return list(nums)[0]
    raise TypeError("could not get an offset")

# Return a list of numbers
def _many(nums) -> list:
    if isinstance(nums, int):
        return [nums]
    if isinstance(nums, list):
        return nums
    return list(nums)

def _bit(value) -> bool:
    if value not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, not {value!r}")
    return bool(value)

def at(delta: int, code: str) -> str:
    """Runs `code` offset by `delta` cells.

    Equivalent to `goto(delta) + code + goto(-delta)`.
    """
    return "".join(g(d) + code + g(-d) for d in _many(delta))

def assign(bit: int) -> str:
    """Set the current bit to `bit`.

    Raises ValueError unless `bit` is 0 or 1.
    """
    return setone() if _bit(bit) else setzero()
s = assign

def read(delta=0) -> str:
    """Read one input bit into the current/delta cell(s)."""
    return at(delta, ",")

def write(delta=0) -> str:
    """Write the current/delta cell(s) to the output."""
    return at(delta, ";")

def loop(a, b=None) -> str:
    """loop(code) -> run code until current bit is zero
    loop(delta, code) -> run code until delta bit is zero

    Runs `code` until the current/delta bit is zero.

    Equivalent to `"[" + code + "]"`.
    """
    if b is None:
        a, b = 0, a
    delta, code = a, b
    delta = _many(delta)
    return "".join(at(d, "[") + code + at(d, "]") for d in delta)

def ifset(a, b=None) -> str:
    """ifset(then) -> run then if current bit is set
    ifset(delta, then) -> run then if delta bit is set

    Runs `then` once if the current/delta bit is set.

    Note that the current/delta bit is cleared after the code.
    """
    if b is None:
        a, b = 0, a
    delta, then = a, b
    delta = _one(delta)
    return loop(delta, then + at(delta, setzero()))

def init(data: list) -> str:
    """Sets cells according to `data`, assuming they start cleared.

        >>> init([1, 0, 1])
        "+>>+><<<"

    """
    return "".join(("+" if _bit(v) else "") + g(1) for v in data) + g(-len(data))

def print_bytes(data, *, clean: bool = True, trim: bool = False) -> str:
    """Output the bytes `data` using only the current cell.

    The cell is flipped whenever the next bit differs from the previous one,
    so it is left holding the last bit written. If clean is True, the cell is
    cleared first, otherwise it is assumed to be 0.

    If trim is True, zero bits at the end of the last byte are not written
    since the output pads the byte with zeros anyway. The first bit of the
    last byte is always written so that the byte exists.
    """
    if isinstance(data, str):
        data = data.encode()
    # Raises ValueError for values outside 0..255
    data = bytes(data)
    bits = [(byte >> k) & 1 for byte in data for k in range(8)]
    if trim:
        while bits and len(bits) % 8 != 1 and bits[-1] == 0:
            bits.pop()
    result = [setzero()] if clean else []
    current = 0
    for bit in bits:
        if bit != current:
            result.append(f())
            current = bit
        result.append(";")
    return "".join(result)

# - BF translation

# Each BF cell is 9 bits wide: a guard bit followed by 8 data bits, least
# significant first. Every snippet starts and ends on the guard bit.
_BF_CELL = 9
_BF_DEC_TEST = g(_BF_CELL) + "+" + g(-8) + "+[>+]<[<]" + g(_BF_CELL)
_BF = {
    "+": ">[>]+<[+<]" + at(_BF_CELL, setzero()),
    "-": _BF_DEC_TEST + setzero() + g(-_BF_CELL),
    "<": g(-_BF_CELL),
    ">": g(_BF_CELL),
    ",": ">," * 8 + g(-8),
    ".": ">;" * 8 + g(-8),
    "[": _BF_DEC_TEST + "[+" + g(-8) + "[>]+<[+<]",
    "]": _BF_DEC_TEST + "]<[+<]",
}

def from_brainfuck(code: str) -> str:
    """Translate BF code into Boolfuck code.

    BF cells are 8 bits wide and wrap around. Characters that are not BF
    commands are dropped.
    """
    return "".join(_BF.get(char, "") for char in code)
