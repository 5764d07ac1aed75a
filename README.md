# cubcaster

Building blocks for reading `.cub` scene files: string and character
helpers, a printf-style formatter, a chunked line reader, byte-buffer
helpers, and helpers that classify the lines and characters of a scene file.
The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Modules

### `cubcaster.cstring`

Character tests and string helpers. A `"\0"` inside a string ends it, and
characters can be given as a one-character string or as an integer code
point.

- `isalpha`, `isdigit`, `isalnum`, `isascii` and `isprint` return `bool`.
- `tolower` and `toupper` change ASCII letters and return the same kind of
  value they were given.
- `atoi(text)` skips leading whitespace, reads one optional sign, and then
  reads decimal digits.
- `itoa(n)` and `strdup(s)`.
- `strlen(s)` returns 0 for `None`.
- `strchr` and `strrchr` return an index or `None`. A search for `"\0"`
  returns the length of the string.
- `strcmp(s1, s2)` and `strncmp(s1, s2, n)` return the difference between
  the first characters that differ.
- `strnstr(big, little, length)` searches the first `length` characters of
  `big` and returns an index or `None`.

```python
from cubcaster.cstring import strnstr, atoi

strnstr("NO ./north.png", "NO", 2)   # 0
atoi("  -42abc")                     # -42
```

### `cubcaster.strtools`

- `split(s, c)` drops empty words.
- `count_words(s, c)`.
- `find_chrs(text, chars)` tries the characters of `chars` in order and
  returns the index of the first one that occurs in `text`.
- `first_word(command)` skips at most one leading space.
- `striteri(s, f)` and `strmapi(s, f)`.
- `strjoin`, `strtrim(s, charset)` and `substr(s, start, length)`.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` work on a notional
  buffer of `size` characters. They return `(contents, length)`.

### `cubcaster.cprintf`

`cformat(fmt, *args)` understands `%%`, `%c`, `%s`, `%u`, `%d`, `%i`, `%x`,
`%X` and `%p`. Any other conversion produces `"0"`, and `%s` of `None`
produces `(null)`.

`printf(fmt, *args, stream=None)` writes the result to standard output, or
to `stream` if one is given, and returns the number of characters written.
`put_char`, `put_str`, `put_endl` and `put_nbr` write single values.
`format_hex(value, upper=False)` and `format_pointer(value)` format numbers
on their own. `format_pointer(0)` returns `(nil)`.

### `cubcaster.linereader`

`LineReader(stream, buffer_size=21)` reads a text stream in chunks.
`read_line()` returns each line with its newline kept, and returns `None`
once the stream is exhausted. A `LineReader` can also be iterated.
`read_lines(path)` yields the lines of a UTF-8 file.

### `cubcaster.textutil`

Helpers for the lines and map characters of a scene file:

- `param_kind(line)` returns a `ParamKind`:
  - `TEXTURE` for lines starting `NO`, `EA`, `WE` or `SO`
  - `COLOR` for lines starting `F` or `C`
  - `NONE` for anything else
- `is_space(c)` and `is_line_empty(line)`.
- `strip_newline(line)`.
- `n_atoi(text, end, start)` reads the digits between `start` and `end`.
- `map_char_kind(c)` returns `TILE_KIND` for `0` and `1`, `SPAWN_KIND` for
  `N`, `E`, `S` and `W`, and `OTHER_KIND` for anything else.
- `change_spaces(rows)` turns whitespace into `0`.

### `cubcaster.membytes`

`memchr`, `memcmp`, `memset`, `bzero` and `calloc` work on `bytes` and
`bytearray` values.

`memcpy(dest, src, n)` stops at the first zero byte in `src`.
`memmove(buf, dest, src, n)` moves a region within one buffer:

- When `dest` is after `src`, it copies all `n` bytes.
- When `dest` is before `src`, it stops at the first zero byte.

A count or offset that is negative, or that reaches past the end of a
buffer, raises `ValueError`.

## What the package does not do

The package provides only the helpers described above. It does not:

- load or validate a whole scene file
- cast rays
- open a window or draw anything
- provide a command to run

## Tests

```
pip install .[test]
pytest
```