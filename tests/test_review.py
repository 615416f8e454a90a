"""Tests for review orchestration."""

import logging
from pathlib import Path

import pytest
from snipcheck.config import Settings
from snipcheck.history import HistoryStore
from snipcheck.models import Category, Language
from snipcheck.review import InvalidInputError, ReviewOrchestrator, run_review
from snipcheck.samples import get_sample


class TestReviewOrchestrator:
  @pytest.mark.parametrize("code", ["", "   ", "\n\n\t"])
  def test_rejects_blank_input(self, code: str) -> None:
    with pytest.raises(InvalidInputError):
      ReviewOrchestrator().review(code)

  def test_builds_report(self, leaky_snippet: str) -> None:
    report = ReviewOrchestrator().review(f"\n\n{leaky_snippet}\n  ")

    assert report.source == leaky_snippet
    assert report.language == Language.JAVASCRIPT
    assert report.findings[0].id == "SEC-001"
    assert report.summary.startswith("Found 7 issues")
    assert "apiKey: process.env.MINIMAX_API_KEY" in report.rewritten
    assert report.has_severe_issues

  def test_settings_feed_the_rewrite(self, leaky_snippet: str) -> None:
    settings = Settings(secret_env_var="CHAT_KEY", model="MiniMax-Test")

    report = ReviewOrchestrator(settings).review(leaky_snippet)

    assert "apiKey: process.env.CHAT_KEY" in report.rewritten
    assert "model: 'MiniMax-Test'" in report.rewritten

  def test_settings_categories_apply(self, leaky_snippet: str) -> None:
    settings = Settings(categories={Category.SECURITY: False})

    report = ReviewOrchestrator(settings).review(leaky_snippet)

    assert all(f.category != Category.SECURITY for f in report.findings)
    assert "abcdefghijklmnopqrst1234" in report.rewritten

  def test_explicit_selection_overrides_settings(self, leaky_snippet: str) -> None:
    settings = Settings(categories={Category.SECURITY: False})

    report = ReviewOrchestrator(settings).review(leaky_snippet, enabled={})

    assert report.findings[0].id == "SEC-001"

  def test_typescript_language(self) -> None:
    report = ReviewOrchestrator().review(get_sample(Language.TYPESCRIPT), Language.TYPESCRIPT)

    assert "messages: Array<{ role: string; content: string }>" in report.rewritten

  def test_records_history(self, history_store: HistoryStore, leaky_snippet: str) -> None:
    ReviewOrchestrator(history=history_store).review(leaky_snippet)

    entries = history_store.load()
    assert len(entries) == 1
    assert entries[0].stats.critical == 1

  def test_corrupt_history_does_not_block_review(
    self, tmp_path: Path, leaky_snippet: str, caplog: pytest.LogCaptureFixture
  ) -> None:
    path = tmp_path / "history.json"
    path.write_text("{not json")

    with caplog.at_level(logging.WARNING, logger="snipcheck.review"):
      report = ReviewOrchestrator(history=HistoryStore(path)).review(leaky_snippet)

    assert report.findings[0].id == "SEC-001"
    assert "not saved to history" in caplog.text
    assert path.read_text() == "{not json"

  def test_blank_input_not_recorded(self, history_store: HistoryStore) -> None:
    with pytest.raises(InvalidInputError):
      ReviewOrchestrator(history=history_store).review("  ")

    assert history_store.load() == []


class TestRunReview:
  def test_applies_overrides(self, tmp_path: Path, leaky_snippet: str) -> None:
    config = tmp_path / "snipcheck.yaml"
    config.write_text(f"history_path: {tmp_path / 'history.json'}\n")

    report = run_review(
      leaky_snippet,
      language=Language.GO,
      skip=[Category.PERFORMANCE],
      config_path=config,
    )

    assert report.language == Language.GO
    assert all(f.category != Category.PERFORMANCE for f in report.findings)
    assert len(HistoryStore(tmp_path / "history.json").load()) == 1

  def test_history_can_be_skipped(self, tmp_path: Path, leaky_snippet: str) -> None:
    config = tmp_path / "snipcheck.yaml"
    config.write_text(f"history_path: {tmp_path / 'history.json'}\n")

    run_review(leaky_snippet, config_path=config, record_history=False)

    assert not (tmp_path / "history.json").exists()

  def test_corrupt_history_file(self, tmp_path: Path) -> None:
    history = tmp_path / "history.json"
    history.write_text("{not json")
    config = tmp_path / "snipcheck.yaml"
    config.write_text(f"history_path: {history}\n")

    report = run_review("x = 10", config_path=config)

    assert [f.id for f in report.findings] == ["QUAL-002"]
