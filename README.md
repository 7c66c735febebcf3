# purefp

Small functional-programming building blocks in plain Python, with no
runtime dependencies. It is a library only: there is no command to run.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `purefp.maybe`: the frozen `Maybe` type, built with `just`, `nothing` or `of`.
  It has `fmap`, `ap`, `chain`, `extend` and `extract`, and the properties
  `is_just` and `is_nothing`. `extract` on an empty value raises `NothingError`
  (a `LookupError`). `lookup` reads one key from a mapping, giving `Nothing`
  when the key is absent or the value is not a mapping; `lookup_path` follows
  a chain of keys through nested mappings.
- `purefp.compose`: `compose` (left to right, the first function is applied
  first; with no functions it raises `TypeError`), `compose_two`, `identity`,
  `partial` (use `...` for positions left open; the result takes exactly one
  argument per open position), the curried `add` and `call`.
- `purefp.algebra`: `combine` and `concat` for semigroups on sequences;
  `equals` for setoids (strings compare by content, other sequences by length,
  anything else raises `TypeError`); `fold_left`, `fold_right` and `total` for
  folds; `unfold` and `count_down` for unfolds. `count_down` raises
  `ValueError` for a negative start or a step that would go below zero.
- `purefp.lens`: the `Lens` class with `get` (returns a `Maybe`), `set` and
  `over`, plus `person_name_lens` (for the `Person` dataclass), `first_lens`
  (first element of a sequence; `set` returns a list), and the
  `pair_to_coords` / `coords_to_pair` isomorphism with the `Coords` dataclass.
- `purefp.functions`: small pure functions and higher-order helpers such as
  `keep`, `is_even`, `greater_than_two`, `greet`, `sort_values`, `absolute`,
  `add_to`, `add_one_and_continue`, `increment`, `decrement`, `sum_two`,
  `uppercase` and `hello_world`, and `add_one`, which only accepts values
  above ten (see `contract`) and otherwise raises `ContractError`.

## Examples

```python
from purefp.maybe import just, of, lookup_path

assert just(1).fmap(lambda x: x + 1).fmap(lambda x: x + 1) == just(3)
assert of(1).ap(just(lambda x: x + 1)) == just(2)
assert of(1).chain(lambda x: just(x + 1)) == just(2)

cart = {"item": {"price": 12}}
assert lookup_path(cart, "item", "price") == just(12)
```

```python
from purefp.compose import compose, partial

finally_ = compose(lambda x: x + 2, lambda x: x * 2, lambda x: x // 2, lambda x: x - 1)
assert finally_(10) == 11

add_three = partial(lambda a, b, c: a + b + c, ..., 1, ...)
assert add_three(10, 100) == 111
```

```python
from purefp.algebra import combine, count_down

assert combine([1, 2], [3, 4]) == [1, 2, 3, 4]
assert list(count_down(8, 1)) == [8, 7, 6, 5, 4, 3, 2, 1]
```

```python
from purefp.lens import Person, person_name_lens

lens = person_name_lens()
assert lens.over(Person("Jason"), lambda name: name.extract().upper()) == Person("JASON")
```