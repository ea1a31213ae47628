import pytest

from boolgen import *
import runbool

from .cat import cat
from .hello import hello
from .test_runbool import HELLO

def test_goto_at():
    assert g(3) == ">>>"
    assert g(-2) == "<<"
    assert g(0) == ""
    assert at(2, "+") == ">>+<<"
    assert at([1, -1], ";") == ">;<<;>"

def test_assign():
    assert s(0) == "[+]"
    assert s(1) == "[+]+"
    with pytest.raises(ValueError):
        s(2)
    vm = runbool.Interpreter(s(1) + s(1) + ">" + s(0))
    vm.run()
    assert vm.tape.read(0)
    assert not vm.tape.read(1)

def test_init():
    assert init([1, 0, 1]) == "+>>+><<<"
    vm = runbool.Interpreter(init([1, 1, 0, 1]))
    vm.run()
    assert vm.head == 0
    assert [vm.tape.read(i) for i in range(4)] == [True, True, False, True]

def test_loop():
    assert loop("+") == "[+]"
    assert loop(1, "<+>") == ">[<<+>>]<"
    # Walk right over a run of set bits
    vm = runbool.Interpreter(init([1, 1, 1]) + loop(">"))
    vm.run()
    assert vm.head == 3

def test_ifset():
    code = ifset(1, write(2))
    assert runbool.runbool(at(2, f()) + code) == b"\x00"
    vm = runbool.Interpreter(init([0, 1, 1]) + code)
    assert vm.run() == b"\x01"
    assert not vm.tape.read(1)

def test_read_write():
    assert read() == ","
    assert write([0, 1]) == ";>;<"
    assert runbool.runbool((read() + write()) * 8, b"Z") == b"Z"

def test_print_bytes():
    assert print_bytes(b"Hello, world!\n", clean=False, trim=True) == HELLO
    assert hello() == HELLO
    for data in [b"\x00", b"\xff", b"\x80\x01", b"abc", b"\x00\x00\x00"]:
        assert runbool.runbool(print_bytes(data)) == data
        assert runbool.runbool(print_bytes(data, trim=True)) == data
    assert runbool.runbool(print_bytes("é")) == "é".encode()
    with pytest.raises(ValueError):
        print_bytes([256])
    with pytest.raises(ValueError):
        print_bytes([-1])

def test_print_bytes_clean():
    code = f() + print_bytes(b"A")
    assert code.startswith("+[+]")
    assert runbool.runbool(code) == b"A"

def test_print_bytes_trim():
    assert print_bytes(b"\x01", clean=False, trim=True) == "+;"
    assert print_bytes(b"\x00", clean=False, trim=True) == ";"
    assert print_bytes(b"", trim=True) == "[+]"

def test_from_brainfuck_arithmetic():
    assert runbool.runbool(from_brainfuck("+" * 72 + ".")) == b"H"
    assert runbool.runbool(from_brainfuck("-.")) == b"\xff"
    assert runbool.runbool(from_brainfuck("+" * 256 + ".")) == b"\x00"
    assert runbool.runbool(from_brainfuck("++--+.")) == b"\x01"

def test_from_brainfuck_loops():
    assert runbool.runbool(from_brainfuck("++[->+++<]>.")) == b"\x06"
    assert runbool.runbool(from_brainfuck("[.]+.")) == b"\x01"
    assert runbool.runbool(from_brainfuck("<+++[>++<-]>.<.")) == b"\x06\x00"

def test_from_brainfuck_ignores_comments():
    assert from_brainfuck("add one: +") == from_brainfuck("+")
    assert from_brainfuck("#!") == ""

def test_cat():
    assert runbool.runbool(cat(), b"hi\x00") == b"hi"
    assert runbool.runbool(cat(), b"\x00ignored") == b"\x00"
    with pytest.raises(runbool.InputExhausted):
        runbool.runbool(cat(), b"no end")
