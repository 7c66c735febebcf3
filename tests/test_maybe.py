import pytest

from purefp.maybe import (
    Maybe,
    NothingError,
    just,
    lookup,
    lookup_path,
    nothing,
    of,
)


def test_functor():
    z = just(1).fmap(lambda x: x + 1).fmap(lambda x: x + 1)
    assert z == just(3)


def test_functor_on_nothing():
    assert nothing().fmap(lambda x: x + 1) == nothing()


def test_applicative():
    assert of(1).ap(just(lambda x: x + 1)) == just(2)


def test_applicative_missing_function():
    assert of(1).ap(nothing()) == nothing()
    assert nothing().ap(just(lambda x: x + 1)) == nothing()


def test_monad():
    assert of(1).chain(lambda x: just(x + 1)) == just(2)


def test_monad_short_circuits():
    assert of(1).chain(lambda x: nothing()) == nothing()
    assert nothing().chain(lambda x: just(x + 1)) == nothing()


def test_comonad():
    assert just(1).extend(lambda m: m.extract() + 1) == just(2)


def test_extend_on_nothing():
    assert nothing().extend(lambda m: m.extract() + 1) == nothing()


def test_extract_nothing_raises():
    with pytest.raises(NothingError):
        nothing().extract()


def test_pointed_functor():
    assert of(1) == just(1)
    assert of(1) == Maybe(1, True)


def test_repr_and_flags():
    assert repr(just(1)) == "Just(1)"
    assert repr(nothing()) == "Nothing"
    assert just(0).is_just
    assert nothing().is_nothing


def test_option_nested_lookup():
    cart = {"item": {"price": 12}}
    assert lookup_path(cart, "item", "price") == just(12)


def test_option_missing_keys():
    cart = {"item": {"price": 12}}
    assert lookup_path(cart, "other", "price") == nothing()
    assert lookup_path(cart, "item", "weight") == nothing()
    assert lookup_path(cart, "item", "price", "currency") == nothing()


def test_lookup():
    assert lookup({"a": 1}, "a") == just(1)
    assert lookup({"a": 1}, "b") == nothing()