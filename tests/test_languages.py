"""Tests for language detection."""

import pytest
from snipcheck.languages import detect_language, parse_language
from snipcheck.models import Language
from snipcheck.samples import SAMPLES, get_sample


class TestDetectLanguage:
  @pytest.mark.parametrize(
    ("path", "expected"),
    [
      ("app.js", Language.JAVASCRIPT),
      ("component.TSX", Language.TYPESCRIPT),
      ("src/client.py", Language.PYTHON),
      ("main.go", Language.GO),
      ("Main.java", Language.JAVA),
    ],
  )
  def test_known_extensions(self, path: str, expected: Language) -> None:
    assert detect_language(path) == expected

  def test_unknown_extension(self) -> None:
    assert detect_language("notes.txt") is None
    assert detect_language("Makefile") is None


class TestParseLanguage:
  def test_names_and_aliases(self) -> None:
    assert parse_language("TypeScript") == Language.TYPESCRIPT
    assert parse_language("ts") == Language.TYPESCRIPT
    assert parse_language(" py ") == Language.PYTHON

  def test_unknown_language(self) -> None:
    with pytest.raises(ValueError, match="Unknown language 'cobol'"):
      parse_language("cobol")


class TestSamples:
  def test_sample_falls_back_to_javascript(self) -> None:
    assert Language.JAVA not in SAMPLES
    assert get_sample(Language.JAVA) == SAMPLES[Language.JAVASCRIPT]

  def test_samples_are_not_blank(self) -> None:
    for code in SAMPLES.values():
      assert code.strip()
