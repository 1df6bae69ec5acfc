"""Loading and validating game maps.

A map is a rectangle of ``1`` (wall), ``0`` (floor), ``P`` (player),
``C`` (collectible), ``E`` (exit) and ``M`` (enemy), closed by walls on
every side, with exactly one player, exactly one exit and at least one
collectible. Blank lines may come before and after the map but not inside it.
"""

from __future__ import annotations

import copy
from collections import deque
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Iterator, Optional, Union

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
ENEMY = "M"

MAP_SUFFIX = ".ber"
VALID_TILES = frozenset({WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT, ENEMY})

_BLANK_CHARS = frozenset(chr(code) for code in range(9, 14)) | {" "}

Grid = list[list[str]]
Position = tuple[int, int]


class MapError(ValueError):
    """Raised when a map cannot be read or breaks one of the map rules."""


@dataclass
class Components:
    """Counts of the player, exit and collectible tiles seen so far."""

    players: int = 0
    exits: int = 0
    collectibles: int = 0

    def count(self, line: str) -> None:
        """Add the components found in ``line`` to the totals."""
        if not line:
            return
        self.players += line.count(PLAYER)
        self.exits += line.count(EXIT)
        self.collectibles += line.count(COLLECTIBLE)

    def is_valid(self) -> bool:
        """One player, one exit and at least one collectible."""
        return self.players == 1 and self.exits == 1 and self.collectibles > 0


@dataclass
class GameMap:
    """A validated map: a mutable grid of tiles, indexed ``grid[y][x]``."""

    grid: Grid
    components: Components = field(default_factory=Components)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def rows(self) -> list[str]:
        """The grid as one string per row."""
        return ["".join(row) for row in self.grid]

    def find_player(self) -> Position:
        """The ``(x, y)`` position of the player tile (the last one, scanning by rows)."""
        found: Optional[Position] = None
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    found = (x, y)
        if found is None:
            raise MapError("the map has no player")
        return found

    def copy_grid(self) -> Grid:
        """An independent copy of the grid."""
        return copy.deepcopy(self.grid)


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def _before_newline(line: str) -> str:
    return line.split("\n", 1)[0]


def is_blank(line: Optional[str]) -> bool:
    """True for None, the empty string and lines made only of whitespace."""
    if line is None:
        return True
    return all(ch in _BLANK_CHARS for ch in line)


def valid_characters(line: str) -> bool:
    """True if every character before the first newline is a map tile."""
    return all(ch in VALID_TILES for ch in _before_newline(line))


def is_full_wall(line: str) -> bool:
    """True if every character before the first newline is a wall."""
    return all(ch == WALL for ch in _before_newline(line))


def has_side_walls(line: str) -> bool:
    """True if the line, without its trailing newline, starts and ends with a wall."""
    body = _strip_newline(line)
    return bool(body) and body[0] == WALL and body[-1] == WALL


def check_empty_lines(lines: Iterable[str]) -> bool:
    """True unless the lines are none at all or a blank line lies inside the map.

    Blank lines before the first map row and after the last one are allowed.
    """
    iterator = iter(lines)
    first = next(iterator, None)
    if first is None:
        return False
    if not is_blank(first):
        iterator = _prepend(first, iterator)
    else:
        for line in iterator:
            if not is_blank(line):
                iterator = _prepend(line, iterator)
                break
        else:
            return True
    ended = False
    for line in iterator:
        if is_blank(line):
            ended = True
        elif ended:
            return False
    return True


def _prepend(item: str, rest: Iterator[str]) -> Iterator[str]:
    yield item
    yield from rest


def _split_lines(text: str) -> list[str]:
    """Split on newlines only, each line keeping its newline."""
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def parse_map(text: str) -> GameMap:
    """Validate the text of a map and build a :class:`GameMap` from it."""
    lines = _split_lines(text)
    if not check_empty_lines(lines):
        raise MapError("the map is empty or has blank lines inside it")
    rows = [line for line in lines if not is_blank(line)]
    if not rows:
        raise MapError("the map is empty")

    width = len(_strip_newline(rows[0]))
    components = Components()
    for row in rows:
        if len(_strip_newline(row)) != width:
            raise MapError("the map is not rectangular")
        components.count(row)
        if not has_side_walls(row):
            raise MapError("a map row is not closed by walls")
    if not components.is_valid():
        raise MapError(
            "the map needs exactly one player, exactly one exit "
            "and at least one collectible"
        )
    if not all(valid_characters(row) for row in rows):
        raise MapError("the map holds an unknown tile")
    if not is_full_wall(rows[0]) or not is_full_wall(rows[-1]):
        raise MapError("the first and last rows must be walls")

    grid = [list(_strip_newline(row)) for row in rows]
    return GameMap(grid=grid, components=components)


def read_map(path: Union[str, "PathLike[str]"]) -> GameMap:
    """Read and validate a ``.ber`` map file."""
    name = str(path)
    if not name.endswith(MAP_SUFFIX):
        raise MapError(f"map files must end with {MAP_SUFFIX}: {name}")
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(f"cannot read map {name}: {exc}") from exc
    return parse_map(text)


def _tile(grid: Grid, x: int, y: int) -> Optional[str]:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def _neighbours(x: int, y: int) -> Iterator[Position]:
    yield x + 1, y
    yield x - 1, y
    yield x, y + 1
    yield x, y - 1


def reachable_collectibles(grid: Grid, start: Position) -> int:
    """Number of collectibles the player can reach from ``start`` without passing the exit.

    Walls, the exit and enemies block the way. The grid is not changed.
    """
    blocked = {WALL, EXIT, ENEMY}
    found = 0
    seen: set[Position] = set()
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        if (x, y) in seen:
            continue
        tile = _tile(grid, x, y)
        if tile is None or tile in blocked:
            continue
        seen.add((x, y))
        if tile == COLLECTIBLE:
            found += 1
        queue.extend(_neighbours(x, y))
    return found


def exit_reachable(grid: Grid, start: Position) -> bool:
    """True if the exit can be reached from ``start`` avoiding walls and enemies."""
    blocked = {WALL, ENEMY}
    seen: set[Position] = set()
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        if (x, y) in seen:
            continue
        tile = _tile(grid, x, y)
        if tile is None or tile in blocked:
            continue
        if tile == EXIT:
            return True
        seen.add((x, y))
        queue.extend(_neighbours(x, y))
    return False


def check_path(game_map: GameMap) -> bool:
    """True if every collectible and the exit can be reached from the player."""
    start = game_map.find_player()
    grid = game_map.copy_grid()
    if reachable_collectibles(grid, start) != game_map.components.collectibles:
        return False
    return exit_reachable(grid, start)