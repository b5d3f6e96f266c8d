# minirt

Building blocks for a small ray tracer, in plain Python with no
third-party dependencies: 8-bit colours, lenient number parsing for scene
files, line-by-line input reading, and a set of text, byte, linked-list
and output helpers.

## What it offers

- `minirt.color`: `Color`, a frozen RGB colour whose channels are ints in
  0..255. `scale(factor)` and `reflected(multiplier)` multiply each channel
  and truncate it to a byte. `add(other)` adds channel by channel and wraps
  modulo 256.
- `minirt.parse`: `parse_double(text)` reads a plain decimal number such as
  `"  -12.75"`. It skips leading spaces and stops at the first character
  that does not fit. It does not read exponents. `parse_int(text)` reads an
  integer the way C's `atoi` does. More than one sign character gives 0, and
  overflow wraps to a 32-bit signed value.
- `minirt.lines`: `LineReader(stream, buffer_size=42)` reads a text or
  binary stream in fixed-size chunks. It gives one line at a time with
  `read_line()` or by iteration, and each line keeps its newline.
  `DescriptorLines(buffer_size=42)` does the same for raw file descriptors
  0..1023, with a separate buffer for each descriptor, through
  `next_line(fd)`.
- `minirt.chars`: ASCII classification and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
- `minirt.search`: work on NUL-terminated text:
  - `c_length`
  - `find_char` and `rfind_char`
  - `compare` and `compare_n`
  - `find_within`
  - `bounded_copy` and `bounded_concat`
  - `int_to_text`
- `minirt.strings`: `duplicate`, `substring`, `join`, `trim`,
  `split_fields`, `map_indexed`, `iter_indexed`.
- `minirt.memory`: byte-buffer helpers:
  - `fill` and `zero`
  - `copy_into`
  - `move_within`, which handles overlapping ranges
  - `find_byte`
  - `compare_bytes`
  - `zeroed`
- `minirt.linked`: `Node` and `LinkedList`. A list supports `push_front`,
  `push_back`, `len()`, iteration, `last`, `clear`, `for_each` and `map`.
- `minirt.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. They
  write to a given text stream, or to standard output if none is given.

## Example

```python
import io

from minirt.color import Color
from minirt.parse import parse_double, parse_int
from minirt.lines import LineReader

red = Color(255, 0, 0)
dimmer = red.scale(0.5)            # Color(r=127, g=0, b=0)

reader = LineReader(io.StringIO("sp 1.5,2.5,0.5 3.3 255,0,0\n"))
for line in reader:
    name, *fields = line.split()
    print(name, parse_double(fields[1]), parse_int("255"))
```

## What it does not do

The package has no vector or ray types, no scene objects, and no
intersection or shading code. It does not render images and has no
command-line program. It provides only the helpers listed above.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```