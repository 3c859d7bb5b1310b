# ftkit

ftkit is a small library of helpers that keep the behaviour of the classic C
character, string, memory and output routines, including their edge cases and
return values. It uses Python's own types. Positions come back as indices or
`None`, never as pointers. Buffers are `bytearray` objects. Failures raise
exceptions.

## Installation

```
pip install ftkit
```

To run the tests:

```
pip install "ftkit[test]"
pytest
```

## Modules

- `ftkit.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper` and `tolower`. Each one takes an integer code or a one-character
  string. Only ASCII letters and digits count. `toupper` and `tolower` return a
  value of the same type as their argument.
- `ftkit.numbers`: `atoi` skips leading whitespace and accepts one optional sign.
  It reads digits until the first non-digit and returns 0 when it finds no
  digits. `itoa` returns the decimal text of a 32-bit signed integer. It raises
  `OverflowError` outside that range. The module also defines `INT_MIN` and
  `INT_MAX`.
- `ftkit.memory`: `memset`, `bzero`, `memcpy` and `memmove` change a writable
  buffer in place. `memchr` returns the index of a byte, or `None`. `memcmp`
  returns -1, 0 or 1. `calloc(nmemb, size)` returns a zeroed `bytearray` and
  raises `OverflowError` when the size overflows `SIZE_MAX`. A negative count, or
  a count longer than a buffer, raises `ValueError`.
- `ftkit.strings`:
  - `strlen`, `strdup` and `strjoin`.
  - `strlcpy(src, size)` and `strlcat(dst, src, size)` return a pair: the
    resulting text and the length they tried to create.
  - `strchr`, `strrchr` and `strnstr` return an index or `None`. Searching for
    `"\0"` gives the length of the string.
  - `strncmp` returns the difference of the first character codes that differ.
  - `substr`, `strtrim` and `split`. `split` drops empty pieces.
  - `strmapi(s, f)` builds a new string from `f(index, char)`.
    `striteri(buffer, f)` replaces each element of a mutable sequence in place.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write
  to a raw file descriptor with `os.write`. Text is written UTF-8 encoded.
- `ftkit.linked`: `LinkedList` is a singly linked list of `Node` objects, each
  holding `content` and `next`. It can be built from an iterable and supports
  `add_front`, `add_back`, `len()`, iteration, `last()` and `head`. It also has:
  - `clear(delete)`, which passes each content to an optional callback.
  - `iterate(f)`.
  - `map(f, delete)`, which builds a new list. If `f` returns `None`, `map`
    clears the partial list and raises `ValueError`.
- `ftkit.lines`: `LineReader(stream, buffer_size=3)` reads from an integer file
  descriptor or from any object with `read(size)`.
  - It reads in chunks of `buffer_size` and stops as soon as it has a whole line.
  - `read_line()` returns the next line with its newline, or `None` at the end
    of the stream.
  - Iterating over a `LineReader` yields every line. `read_lines(stream,
    buffer_size)` does the same as a generator.

## Examples

```python
import io

from ftkit.numbers import atoi, itoa
from ftkit.strings import split, strchr, strtrim
from ftkit.linked import LinkedList
from ftkit.lines import read_lines

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("--a--bc-", "-")    # ["a", "bc"]
strtrim("xxhixx", "x")    # "hi"
strchr("hello", "l")      # 2

items = LinkedList([1, 2, 3])
items.add_front(0)
len(items)                # 4
list(items)               # [0, 1, 2, 3]

list(read_lines(io.BytesIO(b"one\ntwo\nthree"), 3))
# [b"one\n", b"two\n", b"three"]
```

## What it does not do

ftkit is a library only. It has no command-line program, and it draws or runs
nothing itself.