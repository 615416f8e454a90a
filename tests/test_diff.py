"""Tests for the positional line diff."""

from snipcheck.output.diff import LineChange, diff_lines


class TestDiffLines:
  def test_identical_text(self) -> None:
    rows = diff_lines("a\nb", "a\nb")

    assert [r.change for r in rows] == [LineChange.UNCHANGED, LineChange.UNCHANGED]
    assert [r.number for r in rows] == [1, 2]

  def test_modified_line(self) -> None:
    rows = diff_lines("a\nb", "a\nc")

    assert rows[1].change == LineChange.MODIFIED
    assert rows[1].original == "b"
    assert rows[1].rewritten == "c"

  def test_longer_rewrite_adds_lines(self) -> None:
    rows = diff_lines("a", "a\nb\nc")

    assert [r.change for r in rows] == [
      LineChange.UNCHANGED,
      LineChange.ADDED,
      LineChange.ADDED,
    ]

  def test_shorter_rewrite_removes_lines(self) -> None:
    rows = diff_lines("a\nb", "a")

    assert rows[1].change == LineChange.REMOVED
    assert rows[1].rewritten == ""

  def test_prepending_shifts_every_line(self) -> None:
    rows = diff_lines("x\ny", "header\nx\ny")

    assert [r.change for r in rows] == [
      LineChange.MODIFIED,
      LineChange.MODIFIED,
      LineChange.ADDED,
    ]

  def test_blank_line_counts_as_absent(self) -> None:
    rows = diff_lines("a\n\nc", "a\nb\n")

    assert rows[1].change == LineChange.ADDED
    assert rows[2].change == LineChange.REMOVED
