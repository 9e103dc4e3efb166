# zedlib

A small toolbox of character, string, number-formatting, path and
directory helpers. Strings are plain Python `str` values. Positions are
character indexes, and functions that edit a string return a new string.

## Installation

```
pip install zedlib
```

To run the test suite, install the test extra:

```
pip install "zedlib[test]"
pytest
```

## Modules

- `zedlib.chars`: character classification and case conversion for Latin,
  Greek and Cyrillic letters. It has `is_upper`, `is_lower`, `is_alpha`,
  `is_alpha_numeric`, `is_white_space`, `to_upper` (with a `camel` option
  for title-case forms such as `ǅ`), `to_lower` (with an `alternate`
  option, `Σ` → `ς`), `numeral_value`, `numeral` and `is_numeric`. It also
  has UTF-8 helpers: `to_utf8`, `len_to_utf8`, `from_utf8`,
  `len_from_utf8`, `is_utf8` and `iter_utf8`. A character can be given as
  a code point or as a one-character string.
- `zedlib.search`: `substr` (a negative count reads backwards), `found_at`,
  `found_end_at`, `find`, `find_after`, `find_before`, `find_last`,
  `count`, `begins_with` and `ends_with`. The find functions return -1
  when nothing is found.
- `zedlib.editing`: `insert`, `remove`, `remove_at`, `truncate`, `replace`,
  `replace_at`, `pad_left`, `pad_right`, `repeat`, `trim_left`,
  `trim_right`, `trim` and `cut_duplicates`. For `remove` and `replace`, an
  occurrence of 0 affects every match, a negative occurrence affects none,
  and N affects only the N-th match.
- `zedlib.charsets`: `upper`, `lower` and `camel`; `filter_ranges`,
  `filter_chars` and `filter_by`; `contains_ranges` and `contains_chars`;
  `cipher` and `cipher_by`.
- `zedlib.splitting.split` and `zedlib.joining.join` / `join_deref`. The
  items given to `join_deref` are zero-argument callables, for example
  `weakref.ref` objects.
- `zedlib.numbers`: `format_integer`, `format_float` and
  `format_precision`, for any base from 2 to 36. Bases outside that range
  are treated as 10.
- `zedlib.paths`: `basename`, `dirname` and `shorten` work on
  slash-separated path strings. A backslash is treated as a slash.
- `zedlib.info.FileInfo`: whether a path exists, its access, modification
  and change times, size, device and mode, and whether it is a directory,
  a symlink or a regular file. Every query returns 0 or `False` for a
  missing path.
- `zedlib.listing`: `list_files(directory, file_type="*", show_all=True)`
  and `list_dirs(directory, show_all=False)` are generators of entry names.

## Examples

```python
from zedlib.charsets import cipher, upper
from zedlib.chars import to_upper
from zedlib.editing import replace, pad_left
from zedlib.splitting import split
from zedlib.joining import join
from zedlib.numbers import format_integer, format_float, format_precision
from zedlib.paths import basename, dirname, shorten

print(cipher("message", "aegms", "12345"))   # 4255132
print(to_upper("ǆ", camel=True))             # ǅ
print(replace("a-b-c", "-", "+", 2))         # a-b+c
print(pad_left("7", "0", 3))                 # 007
print(join(split("1,2,3", ","), " | "))      # 1 | 2 | 3
print(format_integer(255, 16))               # FF
print(format_float(3.14159, 10, 2))          # 3.14
print(format_precision(2.5, 3))              # 2.500
print(basename("/usr/lib/"))                 # lib
print(dirname("/usr/lib/x.so"))              # /usr/lib
print(shorten("C:/a1/b1/../b2/foo.bar"))     # C:/a1/b2/foo.bar
```

This example lists Python files and reads their metadata:

```python
from zedlib.listing import list_files
from zedlib.info import FileInfo

for name in list_files(".", "py", show_all=False):
    info = FileInfo(name)
    print(name, info.size(), info.modified())
```

## What it does not do

zedlib does not include helpers for reading, writing, copying or deleting
files, for reading a file line by line, or for changing the working
directory. Use `pathlib`, `shutil` and `os` for these. It also has no
timers and no lazy integer ranges; `time.perf_counter` and the built-in
`range` cover those needs. The package has no command-line program.