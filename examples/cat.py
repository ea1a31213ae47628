"""Prints Boolfuck code that does the equivalent of the following Python code:

import sys
data = sys.stdin.buffer.read()
sys.stdout.buffer.write(data[:data.index(0)])

The input must contain a zero byte, otherwise the program runs out of input.

"""

from boolgen import *

def cat():
    return from_brainfuck(",[.,]")

if __name__ == "__main__":
    print(cat())
