"""
Tests for arithmetic, assignment and variable lookup in minirb.
"""
import pytest

from minirb.interpreter import Environment, Interpreter
from minirb.tests.utils import parse_source, run_source


def test_addition_of_variables(capsys):
    run_source("a = 3\nb = 4\nc = a + b\nprint c\n")
    assert capsys.readouterr().out.splitlines() == ['7']


def test_subtraction(capsys):
    run_source("x = 10\ny = x - 4\nprint y\n")
    assert capsys.readouterr().out.splitlines() == ['6']


@pytest.mark.parametrize("a, b", [(0, 1), (5, 12), (2147483647, 9000000000)])
def test_successive_prints(capsys, a, b):
    run_source(f"x = {a}\nprint x\ny = {b}\nprint y\n")
    assert capsys.readouterr().out.splitlines() == [str(a), str(b)]


def test_multiplication_and_division(capsys):
    run_source("x = 2 * 3 - 1\nprint x\nprint 7 / 2\nprint 9 / 3 * 2\n")
    assert capsys.readouterr().out.splitlines() == ['5', '3', '6']


def test_operators_fold_left_to_right(capsys):
    run_source("print 2 + 3 * 4\nprint 20 - 10 / 2\n")
    assert capsys.readouterr().out.splitlines() == ['20', '5']


def test_division_truncates_toward_zero(capsys):
    run_source(
        "print 0 - 7 / 2\n"
        "n = 0 - 7\n"
        "d = 0 - 2\n"
        "print 7 / d\n"
        "print n / d\n"
    )
    assert capsys.readouterr().out.splitlines() == ['-3', '-3', '3']


def test_unassigned_variable_is_zero(capsys):
    run_source("print z\n")
    assert capsys.readouterr().out.splitlines() == ['0']


def test_unassigned_variable_in_expression(capsys):
    run_source("x = y + 5\nprint x\n")
    assert capsys.readouterr().out.splitlines() == ['5']


def test_reassignment_overwrites(capsys):
    interpreter = run_source("x = 1\nx = 2\nprint x\n")
    assert capsys.readouterr().out.splitlines() == ['2']
    assert interpreter.vars == {'x': 2}


def test_self_referencing_assignment(capsys):
    run_source("x = 1\nx = x + x\nx = x + x\nprint x\n")
    assert capsys.readouterr().out.splitlines() == ['4']


def test_lookup_does_not_create_binding():
    interpreter = run_source("print missing\n")
    assert 'missing' not in interpreter.vars


def test_environment_default():
    env = Environment(a=3)
    assert env['a'] == 3
    assert env['b'] == 0
    assert 'b' not in env


def test_environment_can_be_supplied():
    env = Environment(a=40)
    interpreter = Interpreter('<test>', env)
    interpreter.execute(parse_source("b = a + 2"))
    assert env['b'] == 42


def test_interpreters_do_not_share_state():
    first = run_source("x = 1")
    second = run_source("print 0")
    assert first.vars == {'x': 1}
    assert second.vars == {}


def test_no_output_without_print(capsys):
    run_source("x = 1\ny = x + 1\n")
    assert capsys.readouterr().out == ''


def test_long_operator_chain(capsys):
    run_source("print " + " + ".join(["1"] * 3000))
    assert capsys.readouterr().out.splitlines() == ['3000']


def test_long_chain_division_by_zero_message():
    source = "x = " + " - ".join(["1"] * 3000) + " / 0"
    with pytest.raises(ZeroDivisionError, match=r"/ 0\)"):
        run_source(source)
