"""Positional line diff between a snippet and its rewrite."""

from dataclasses import dataclass
from enum import Enum
from itertools import zip_longest


class LineChange(Enum):
  UNCHANGED = "unchanged"
  MODIFIED = "modified"
  ADDED = "added"
  REMOVED = "removed"


@dataclass(frozen=True)
class DiffLine:
  """One row of the side-by-side view, 1-indexed."""

  number: int
  change: LineChange
  original: str
  rewritten: str


def diff_lines(original: str, rewritten: str) -> list[DiffLine]:
  """Compare two texts line by line at the same index.

  There is no alignment: prepending a block shifts every following line,
  so all of them show up as modified. An empty line counts as absent, so a
  blank line opposite content reads as added or removed.
  """
  rows: list[DiffLine] = []
  pairs = zip_longest(original.split("\n"), rewritten.split("\n"), fillvalue="")

  for i, (old, new) in enumerate(pairs, start=1):
    if old == new:
      change = LineChange.UNCHANGED
    elif not new:
      change = LineChange.REMOVED
    elif not old:
      change = LineChange.ADDED
    else:
      change = LineChange.MODIFIED
    rows.append(DiffLine(number=i, change=change, original=old, rewritten=new))

  return rows
