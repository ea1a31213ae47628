"""Prints Boolfuck code that does the equivalent of the following Python code:

print("Hello, world!")

"""

from boolgen import *

def hello(text="Hello, world!\n"):
    # The tape starts cleared so the cell needs no cleaning.
    return print_bytes(text, clean=False, trim=True)

if __name__ == "__main__":
    print(hello())
