# ftkit

Helpers that behave like the classic C string, character and memory
routines, written as ordinary Python functions, plus a small singly linked
list. It has no third-party dependencies.

Functions that take text treat it as a C string: anything from the first NUL
character (`"\0"`) onward is ignored, unless a function's docstring says
otherwise. Where a C routine would return a pointer into a string, the Python
function returns the rest of the string, or `None` when nothing is found.
Negative counts raise `ValueError`, counts of the wrong type raise
`TypeError`, and reads or writes past the end of a buffer raise `IndexError`.

## Modules

### `ftkit.convert`

- `atoli(text)`: skips leading whitespace and one `+` or `-`, then reads
  decimal digits up to the first non-digit. On overflow of a signed 64-bit
  value it returns `-1` for positive input and `0` for negative input.
- `atoi(text)`: the same, with the result truncated to a signed 32-bit value.
- `itoa(number)`: the decimal text of an `int`.

### `ftkit.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint` accept a
one-character string or a character code and return a `bool` for the ASCII
class. `isallequal(text, c)` tells whether every character of `text` is `c`
(`False` for `None` text or a NUL `c`); `chrcount(text, c)` counts `c`.

### `ftkit.compare`

- `strcmp(s1, s2)` and `strncmp(s1, s2, n)` return the difference of the
  first differing character codes, the end of a string counting as code 0.
  `n=None` compares whole strings.
- `strequ(s1, s2)` and `strnequ(s1, s2, n)` return `bool`, `False` when
  either string is `None`.
- `sort_strings(strings)` returns a new list in `strcmp` order (stable).

### `ftkit.search`

`strchr`, `strchri` (index or `-1`), `strrchr` and
`strnstr(haystack, needle, length)`, which looks for `needle` only within the
first `length` characters.

### `ftkit.build`

`strlen`, `strcat`, `strncat`, `strjoin`, `strnjoin`, `strarcat(parts,
delimiter)`, `strfill(size, c)`, `strmap`, `strmapi`, `striter`, `striteri`,
and:

- `strncpy(src, length)`: a string of exactly `length` characters, padded
  with NULs.
- `strlcat(dst, src, size)`: returns `(result, total)`, the result limited
  to `size - 1` characters and `total` the length the full concatenation
  would have.

### `ftkit.memory`

Operations on `bytearray`/`bytes`: `memset(buffer, value, length)`,
`bzero(buffer, length)`, `memcpy(dst, src, n)`, `memccpy(dst, src, c, n)`
(returns the index just past the copied `c`, or `None`), `memchr(data, c, n)`
(index or `None`), `memcmp(a, b, n)`, `memmove(buffer, dst_offset,
src_offset, length)` for overlapping moves within one buffer, and
`chrswap(buffer, i, j)` to swap two items of any mutable sequence.

### `ftkit.output`

`putchar`, `putstr`, `putendl`, `putnbr` and `putnstr(text, size)` write to
the text stream given as `file`, or to standard output when it is omitted.
`putnstr` writes exactly `size` characters, NULs included.

### `ftkit.linkedlist`

`Node` and `LinkedList(items=None)`:

- `add(content)` inserts at the front, `push(content)` appends.
- `pop()` removes and returns the first item (`IndexError` when empty).
- `at(index)` returns the item at a position (`IndexError` out of range).
- `len()` and iteration are supported.
- `reverse()` reverses in place.
- `sort(compare)` bubble-sorts in place, exchanging neighbours when
  `compare(left, right) > 0`, so equal items keep their order.
- `swap_with_next(index)` exchanges an item with the one after it.
- `copy()` returns a new list of shallow copies of the items;
  `map(func)` returns a new list of `func(item)`.
- `for_each(func)` calls `func` on every item, from the last to the first.
- `clear()` removes every item.

## Example

```python
import sys

from ftkit.convert import atoi, itoa
from ftkit.compare import strcmp
from ftkit.linkedlist import LinkedList
from ftkit.output import putendl

atoi("  -42abc")      # -42
itoa(-7)              # "-7"
strcmp("abc", "abd")  # -1

items = LinkedList([3, 1, 2])
items.sort(lambda a, b: a - b)
list(items)           # [1, 2, 3]

putendl("done", sys.stdout)
```

## What it does not do

This is a library only: it has no command-line program and no formatted
printing function in the style of `printf`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```