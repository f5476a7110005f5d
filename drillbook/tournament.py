"""Tournament results tallied into a league table."""

from __future__ import annotations

import io
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TextIO


class MatchFormatError(ValueError):
    """Raised when a match line cannot be understood."""

    def __init__(self, message: str = "Match in wrong format") -> None:
        super().__init__(message)


class _Result(Enum):
    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"

    @property
    def opposite(self) -> _Result:
        return {_Result.WIN: _Result.LOSS, _Result.LOSS: _Result.WIN}.get(self, self)


@dataclass
class _Standing:
    name: str
    matches: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    points: int = 0

    def record(self, result: _Result) -> None:
        self.matches += 1
        if result is _Result.WIN:
            self.wins += 1
            self.points += 3
        elif result is _Result.DRAW:
            self.draws += 1
            self.points += 1
        else:
            self.losses += 1


def _parse(line: str) -> tuple[str, str, _Result]:
    fields = line.split(";")
    if len(fields) != 3:
        raise MatchFormatError()
    home, away, outcome = fields
    try:
        result = _Result(outcome)
    except ValueError:
        raise MatchFormatError() from None
    if home == away:
        raise MatchFormatError()
    return home, away, result


def _lines(source: str | Iterable[str]) -> Iterable[str]:
    if isinstance(source, str):
        source = io.StringIO(source)
    for line in source:
        line = line.removesuffix("\n")
        yield line.removesuffix("\r")


def _row(name: object, *columns: object) -> str:
    return f"{name!s:<30} |" + " |".join(f"{column!s:>3}" for column in columns) + "\n"


def tally(source: str | Iterable[str], out: TextIO) -> None:
    """Read match results from ``source`` and write the league table to ``out``.

    Each line is ``home;away;result`` where result is win, draw or loss for
    the home team. Blank lines and lines starting with ``#`` are skipped.
    Raises MatchFormatError on a malformed line, writing nothing.
    """
    standings: dict[str, _Standing] = {}
    for line in _lines(source):
        if not line or line.startswith("#"):
            continue
        home, away, result = _parse(line)
        standings.setdefault(home, _Standing(home)).record(result)
        standings.setdefault(away, _Standing(away)).record(result.opposite)

    ranked = sorted(standings.values(), key=lambda team: (-team.points, team.name))
    out.write(_row("Team", "MP", "W", "D", "L", "P"))
    for team in ranked:
        out.write(
            _row(team.name, team.matches, team.wins, team.draws, team.losses, team.points)
        )