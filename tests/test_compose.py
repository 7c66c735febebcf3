import pytest

from purefp.compose import add, call, compose, compose_two, identity, partial


def test_function_composition():
    def plus_two(x):
        return x + 2

    def multiply(x):
        return x * 2

    def divide(x):
        return x // 2

    def subtract(x):
        return x - 1

    intermediate = compose(plus_two, multiply, divide)
    finally_ = compose(intermediate, subtract)
    assert finally_(10) == 11


def test_composition_order():
    assert compose(lambda x: x + 1, lambda x: x * 10)(1) == 20
    assert compose_two(lambda x: x * 10, lambda x: x + 1)(1) == 11


def test_compose_single_function():
    def square(x):
        return x * x

    assert compose(square) is square


def test_compose_empty_raises():
    with pytest.raises(TypeError):
        compose()


def test_monoid_identity_law():
    def foo(a):
        return a + 20

    left = compose(foo, identity)(1)
    right = compose(identity, foo)(1)
    assert left == right == 21


def test_identity():
    value = [1, 2]
    assert identity(value) is value


def test_partial_application():
    def foo(a, b, c, d, mul, off):
        return (a + b * b + c**3 + d**4) * mul - off

    bar = partial(foo, ..., ..., 10, 42, 10, 10)
    assert foo(15, 15, 10, 42, 10, 10) == bar(15, 15)


def test_partial_fills_in_order():
    subtract = partial(lambda a, b, c: a - b - c, ..., 1, ...)
    assert subtract(10, 2) == 7


def test_partial_wrong_count_raises():
    bar = partial(lambda a, b: a + b, ..., 1)
    with pytest.raises(TypeError):
        bar(1, 2)


def test_currying():
    add5 = add(5)
    assert add5(10) == 15


def test_call():
    assert call(lambda x: x + 1)(1) == 2
    assert call(str.upper)("abc") == "ABC"