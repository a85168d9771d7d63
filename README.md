# rbdates

A small library with two pieces:

- `RedBlackTree` (in `rbdates.redblacktree`) is a self-balancing binary search
  tree. It holds unique values and supports insertion (`add`) and membership
  tests (`find`, or the `in` operator). Adding a value that is already present
  leaves the tree unchanged. `str(tree)` or `tree.render()` draws the tree
  sideways, one node per line, with its colour shown as `(R)` or `(B)`. The
  right subtree is drawn before the left. `copy()` returns an independent tree
  with the same shape, colours and values. The nodes are `TreeNode` objects,
  reachable from `tree.root`.
- `MyDateTime` (in `rbdates.mydatetime`) is a plain day/month/year and
  hour:minute:second value. The defaults are 1 January 1970, 00:00:00.
  - It compares field by field, most significant first: year, month, day,
    hour, minute, second. `compare_to` returns -1, 0 or 1, and all the rich
    comparison operators work. Values are hashable.
  - `increment()` and `decrement()` step one day forward or back in place and
    return the value itself. `post_increment()` and `post_decrement()` step in
    the same way but return a copy of the value as it was before the step.
    Stepping assumes 30-day months.
  - The fields are not validated, so values such as month 24 are kept as
    given.
  - `formatted()` gives the zero-padded `DD-MM-YYYY hh:mm:ss` form, and
    `print()` writes that form to standard output followed by a blank line.
    `str()` gives the unpadded `D.M.YYYY h:m:s` form.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from rbdates.redblacktree import RedBlackTree
from rbdates.mydatetime import MyDateTime

numbers = RedBlackTree()
for n in (5, 15, 7, 13):
    numbers.add(n)

print(numbers)
print(7 in numbers, numbers.find(8))   # True False

dates = RedBlackTree()
dates.add(MyDateTime(19, 12, 2006, 4, 13, 23))
dates.add(MyDateTime(19, 12, 1984, 15, 44, 23))
print(dates)

d = MyDateTime(30, 12, 2006, 0, 0, 0)
d.increment()
print(d.formatted())   # 01-01-2007 00:00:00
```

A tree can store any values that support `<`, `>` and `==`.

## Demo

```
rbdates-demo
```

The demo builds one tree of integers and one tree of dates and prints both
trees. After each tree it prints two lines, in Russian, saying whether a value
is present ("Да" for yes, "Нет" for no). The command takes no options other
than `--help`.

## Limitations

The tree only supports adding values and checking for them. It has no way to
remove values, iterate over them in order, or report its size. `MyDateTime`
does not follow the real calendar: it uses 30-day months and does not check
its fields.