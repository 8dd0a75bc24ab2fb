# ftlib

ftlib is a small general-purpose utility library with no runtime dependencies.
It is a library only: it has no command-line program.

## Modules

### `ftlib.chars`

ASCII character tests and case mapping: `is_alpha`, `is_digit`, `is_alnum`,
`is_ascii`, `is_print`, `to_upper` and `to_lower`. Each accepts an integer
character code or a one-character string. The tests return a bool. The case
functions return the same kind of value they were given and change only ASCII
letters.

### `ftlib.memory`

Operations on byte buffers:

- `memset(buffer, value, n)` sets the first `n` bytes to `value & 0xFF`.
- `bzero(buffer, n)` zeroes the first `n` bytes.
- `memcpy(dest, src, n)` copies `n` bytes from `src` into `dest`. If both are
  `None`, it returns `None`.
- `memmove(buffer, dest, src, n)` copies `n` bytes from offset `src` to offset
  `dest` inside one buffer. The two regions may overlap.
- `memchr(data, c, n)` returns the index of the first matching byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first pair of bytes that
  differ, or 0.
- `calloc(count, size)` returns a zero-filled `bytearray`.

A negative byte count, or one larger than a buffer, raises `ValueError`.

### `ftlib.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream. The
default stream is standard output. `put_str` and `put_endl` write nothing when
given `None`.

### `ftlib.strings`

String helpers. Each search returns an index, or `None` when nothing is found.

- `strlen`, `strdup`, `strjoin`, `itoa`
- `strlcpy(src, size)` returns `(copied_text, len(src))`.
- `strlcat(dst, src, size)` returns `(text, attempted_length)`.
- `strchr`, `strrchr`: searching for `"\0"` returns the string's length.
- `strncmp(s1, s2, n)`, `strnstr(big, little, length)`
- `atoi(s)` skips leading whitespace, reads one optional sign, then reads
  digits.
- `substr(s, start, length)`, `strtrim(s, charset)`
- `split(s, sep)` drops empty pieces.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(chars, f)` works on a list of characters in place. When `f`
  returns a character, that character replaces the one at the index.

### `ftlib.linked_list`

`LinkedList` is a singly linked list made of `Node` objects, each with a
`content` and a `next` attribute. It has the methods `push_front`, `push_back`
(both return the new node), `last`, `clear(delete=None)`, `for_each` and `map`,
which returns a new list. It also supports `len()` and iteration over the
contents.

### `ftlib.printf`

`format_string(fmt, *args)` handles `%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`,
`%X` and `%%`:

- `%s` of `None` gives `(null)`.
- `%p` of 0 or `None` gives `(nil)`.
- `%d` and `%i` wrap the value to a 32-bit signed integer.
- `%u`, `%x` and `%X` wrap the value to a 32-bit unsigned integer.
- An unknown conversion produces nothing.

`printf(fmt, *args, stream=None)` writes the text and returns its length.

### `ftlib.line_reader`

`LineReader(fd, buffer_size=BUFFER_SIZE)` reads a raw file descriptor through
reads of `buffer_size` bytes. `BUFFER_SIZE` is 42. Call `read_line()` to get the
next line, or iterate over the reader. A line keeps its trailing newline; the
last line lacks one if the input does not end with one. `read_line()` returns
`None` at end of input.

`get_next_line(fd)` keeps a separate reader for each descriptor, so you can read
several descriptors in turn. It drops the reader for a descriptor once that
descriptor reaches end of input.

## Installation

```
pip install .
```

## Examples

```python
from ftlib.strings import split, strtrim, itoa
from ftlib.printf import format_string
from ftlib.linked_list import LinkedList

split("  hello  world ", " ")            # ['hello', 'world']
strtrim("xxhixx", "x")                   # 'hi'
itoa(-42)                                # '-42'
format_string("%d items at %x", 3, 255)  # '3 items at ff'

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda v: v * 10))        # [0, 10, 20, 30]
```

Reading lines from a file descriptor:

```python
import os
from ftlib.line_reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line, end="")
os.close(fd)
```

## Running the tests

```
pip install .[test]
pytest
```