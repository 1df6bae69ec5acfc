# solong

Map handling for a small tile-based puzzle game in which a character walks a
walled map, picks up every collectible, stays clear of enemies and finishes on
the exit. The package reads and validates such maps and checks that they can
be solved. It also carries a handful of small helpers for text, byte buffers,
linked lists, line-by-line reading and printf-style formatting.

## Installing

```
pip install .
```

There are no runtime dependencies beyond the standard library.

## Map format

A map is a rectangle of these characters, one row per line:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |
| `M`  | enemy        |

`solong.mapcheck.parse_map` accepts a map only if:

- blank lines appear only before or after the map, never inside it;
- every row has the same width;
- every row begins and ends with a wall;
- it holds exactly one `P`, exactly one `E` and at least one `C`;
- it contains no characters other than those above;
- the first and last rows are all walls.

Otherwise it raises `solong.mapcheck.MapError` (a `ValueError`).
`solong.mapcheck.read_map` does the same for a file, and also raises
`MapError` when the file name does not end in `.ber` or the file cannot be
read.

Example:

```
1111111111
1P0C00M0E1
1000C00001
1111111111
```

## Checking a map

```python
from solong.mapcheck import MapError, check_path, read_map

try:
    game_map = read_map("level1.ber")
except MapError as err:
    print("Error:", err)
else:
    if not check_path(game_map):
        print("Error: not every collectible and the exit can be reached")
```

A `GameMap` holds the tiles in `grid` (indexed `grid[y][x]`), the counted
`components`, and offers `width`, `height`, `rows`, `find_player()` (returns
`(x, y)`) and `copy_grid()`.

`check_path` returns `True` when, starting from the player, every collectible
can be reached without crossing walls, enemies or the exit, and the exit can
be reached without crossing walls or enemies. The two searches are also
available on their own as `reachable_collectibles(grid, start)` and
`exit_reachable(grid, start)`. Smaller checks are exposed too: `is_blank`,
`valid_characters`, `is_full_wall`, `has_side_walls` and `check_empty_lines`.

## Other modules

- `solong.linereader.LineReader` reads a file object (text or binary) or an
  OS file descriptor a fixed number of units at a time and returns one line per
  `read_line()` call, newline included, or `None` at the end. It is iterable,
  and `reset()` drops anything read ahead.

  ```python
  import io
  from solong.linereader import LineReader

  list(LineReader(io.StringIO("ab\ncd")))   # ['ab\n', 'cd']
  ```

- `solong.printf` expands `%c %s %p %d %i %u %x %X %%` with
  `format_message(fmt, *args)`, or writes the result with
  `print_message(fmt, *args, stream=None)`, which returns the number of
  characters written. `%d`/`%i` wrap to 32-bit signed and `%u`/`%x`/`%X` to
  32-bit unsigned; a `None` string prints `(null)` and a zero pointer `0x0`.

  ```python
  from solong.printf import format_message

  format_message("%d moves, %x", 42, 255)   # '42 moves, ff'
  ```

- `solong.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), case changes (`to_upper`, `to_lower`), `atoi`,
  `itoa`, and `put_char`, `put_str`, `put_endl`, `put_nbr` that write to a
  stream (standard output by default).
- `solong.strings`: `split`, `strchr`, `strrchr`, `strnstr`, `substr`,
  `strjoin`, `strtrim`, `strmapi`, `striteri`, `strncmp`, and `strlcpy` /
  `strlcat`, which return the new destination together with the length they
  tried to create.
- `solong.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`
  and `memmove` (a copy between two offsets of one buffer) on `bytes`,
  `bytearray` and `memoryview` objects.
- `solong.linkedlist`: `Node` and `LinkedList` with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration.

## What this package does not do

It does not play the game. There is no window, no drawing of tiles or
textures, no keyboard handling, no player movement or move counter, and no
command to start a game: the package stops at loading a map, validating it
and confirming that it can be solved.

## Running the tests

```
pip install .[test]
pytest
```