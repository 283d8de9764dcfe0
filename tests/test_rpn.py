"""Tests for fibtools.expr.rpn (expression evaluator)."""
import pytest

from fibtools.engine.sequential import generate_sequence, generate_term
from fibtools.errors import MalformedExpression
from fibtools.expr.rpn import MAX_EXPONENT, CompiledExpression, compile, compile_expression, tokenize
from fibtools.utils.validation import validate_expression_order


# --- tokenize / compile ---

def test_tokenize_whitespace():
    assert tokenize("  a\tb  +\n") == ("a", "b", "+")


def test_compile_alias():
    assert compile is compile_expression


def test_compile_keeps_source_and_tokens():
    f = compile_expression("a b +")
    assert f.source == "a b +"
    assert f.tokens == ("a", "b", "+")
    assert f.required_order() == 2


def test_compile_invalid_token():
    with pytest.raises(MalformedExpression):
        compile_expression("a b %")
    with pytest.raises(MalformedExpression):
        compile_expression("a 1.5 +")
    with pytest.raises(MalformedExpression):
        compile_expression("A b +")


def test_compile_underflow():
    with pytest.raises(MalformedExpression):
        compile_expression("a +")
    with pytest.raises(MalformedExpression):
        compile_expression("+")


def test_compile_leftover_values():
    with pytest.raises(MalformedExpression):
        compile_expression("a b")


def test_compile_empty():
    with pytest.raises(MalformedExpression):
        compile_expression("   ")


def test_compile_with_order_checks_letters():
    with pytest.raises(MalformedExpression):
        compile_expression("a c +", order=2)
    assert compile_expression("a c +", order=3).required_order() == 3


# --- evaluation ---

def test_eval_operand_order():
    assert compile_expression("a b -")((10, 3)) == 7
    assert compile_expression("b a -")((10, 3)) == -7


def test_eval_arithmetic():
    assert compile_expression("a b * 2 +")((4, 5)) == 22
    assert compile_expression("a -3 *")((4,)) == -12


def test_eval_power_exponent_on_top():
    assert compile_expression("a b **")((2, 10)) == 1024
    assert compile_expression("2 3 **")(()) == 8
    assert compile_expression("a 0 **")((99,)) == 1


def test_eval_negative_exponent():
    with pytest.raises(MalformedExpression):
        compile_expression("a b **")((2, -1))


def test_eval_constant_only():
    assert compile_expression("42")((1, 1)) == 42


def test_eval_letter_out_of_range_fails_on_first_evaluation():
    f = compile_expression("x y +")
    with pytest.raises(MalformedExpression):
        generate_term(1, [1, 1], 2, f)


def test_eval_letter_a_is_oldest():
    assert compile_expression("a")((5, 6, 7)) == 5
    assert compile_expression("c")((5, 6, 7)) == 7


# --- with the generator ---

def test_expression_fibonacci_matches_coefficients():
    f = compile_expression("a b +")
    assert generate_sequence(20, [1, 1], 2, f) == generate_sequence(20, [1, 1], 2, [1, 1])


def test_expression_tribonacci():
    f = compile_expression("a b c + +")
    assert generate_sequence(5, [0, 0, 1], 3, f) == [0, 0, 1, 1, 2, 4, 7, 13]


def test_expression_with_modulus():
    f = compile_expression("b b * a +")
    seq = generate_sequence(15, [1, 2], 2, f, 101)
    assert all(0 <= x < 101 for x in seq)


def test_validate_expression_order():
    validate_expression_order("a b +", 2)
    with pytest.raises(MalformedExpression):
        validate_expression_order("a b c + +", 2)


def test_eval_exponent_upper_bound():
    f = compile_expression("a b **")
    assert f((1, MAX_EXPONENT)) == 1
    assert MAX_EXPONENT == 2**32 - 1
    with pytest.raises(MalformedExpression):
        f((2, 2**32))


# --- direct construction ---

def test_compiled_expression_direct_underflow():
    with pytest.raises(MalformedExpression):
        CompiledExpression(source="a +", tokens=("a", "+"))


def test_compiled_expression_direct_bad_token():
    with pytest.raises(MalformedExpression):
        CompiledExpression(source="a q1 +", tokens=("a", "q1", "+"))


def test_compiled_expression_direct_empty():
    with pytest.raises(MalformedExpression):
        CompiledExpression(source="", tokens=())


def test_compiled_expression_direct_valid():
    f = CompiledExpression(source="a b *", tokens=["a", "b", "*"])
    assert f.tokens == ("a", "b", "*")
    assert f((6, 7)) == 42
