import pytest

from schemer.errors import NumArgsError, TypeMismatchError, DivisionByZeroError
from schemer.types import Number, TRUE, FALSE


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(mod 7 3)", 1),
        ("(quotient 7 2)", 3),
        ("(- 3 5)", -2),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
        # / and quotient floor, mod takes the sign of the dividend
        ("(/ (- 0 7) 2)", -4),
        ("(mod (- 0 7) 2)", -1),
        ("(mod 7 (- 0 2))", 1),
        ("(mod (- 0 7) (- 0 2))", -1),
        ("(quotient (- 0 7) 2)", -4),
        ("(quotient 7 (- 0 2))", -4),
        ("(quotient (- 0 7) (- 0 2))", 3),
        # numeric coercion of strings and lists
        ('(+ "2" 3)', 5),
        ('(* " 4 " 2)', 8),
        ("(+ '(4 5) 1)", 5),
        ("(+ '((6)) 1)", 7),
        ("(* 99999999999 99999999999)", 99999999999 * 99999999999),
    ]
)
def test_numeric_binops(run, source, expected):
    assert run(source) == Number(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", TRUE),
        ("(= 1 2)", FALSE),
        ("(< 1 2)", TRUE),
        ("(> 1 2)", FALSE),
        ("(/= 1 2)", TRUE),
        ("(>= 2 2)", TRUE),
        ("(<= 3 2)", FALSE),
        ('(= "5" 5)', TRUE),
        ('(string=? "a" "a")', TRUE),
        ('(string<? "abc" "abd")', TRUE),
        ('(string>? "abc" "abd")', FALSE),
        ('(string<=? "b" "b")', TRUE),
        ('(string>=? "a" "b")', FALSE),
        ('(string=? 1 "1")', TRUE),
        ('(string=? #t "#t")', TRUE),
        ("(&& #t #f)", FALSE),
        ("(&& #t #t)", TRUE),
        ("(|| #t #f)", TRUE),
        ("(|| #f #f)", FALSE),
    ]
)
def test_comparisons(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(+ 1)", NumArgsError),
        ("(+)", NumArgsError),
        ("(= 1 2 3)", NumArgsError),
        ("(< 1)", NumArgsError),
        ("(&& #t)", NumArgsError),
        ("(+ 1 #t)", TypeMismatchError),
        ('(+ 1 "x")', TypeMismatchError),
        ('(+ 1 "1_000")', TypeMismatchError),
        ('(+ 1 "12abc")', TypeMismatchError),
        ('(+ 1 "' + "9" * 5000 + '")', TypeMismatchError),
        ("(+ 1 '())", TypeMismatchError),
        ("(+ 1 #\\a)", TypeMismatchError),
        ("(&& 1 #t)", TypeMismatchError),
        ("(string=? 'a \"a\")", TypeMismatchError),
        ("(/ 1 0)", DivisionByZeroError),
        ("(mod 1 0)", DivisionByZeroError),
        ("(quotient 1 0)", DivisionByZeroError),
    ]
)
def test_primitive_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_error_messages(run):
    with pytest.raises(NumArgsError, match="^Expected 2 args; found values 1$"):
        run("(+ 1)")
    with pytest.raises(TypeMismatchError, match="^Invalid type: expected number, found #t$"):
        run("(+ 1 #t)")
    with pytest.raises(TypeMismatchError, match="^Invalid type: expected boolean, found 1$"):
        run("(|| 1 #t)")
