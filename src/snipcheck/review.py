"""Core review orchestration."""

import logging
from pathlib import Path

from snipcheck.config import Settings, load_config
from snipcheck.history import HistoryEntry, HistoryError, HistoryStore
from snipcheck.models import Category, CategorySelection, Language, ReviewReport
from snipcheck.rewrite import rewrite
from snipcheck.rules import FindingEngine, summarize

logger = logging.getLogger(__name__)


class InvalidInputError(Exception):
  """Snippet is empty or whitespace only."""


class ReviewOrchestrator:
  """Runs analysis and rewrite for one snippet at a time."""

  def __init__(
    self,
    settings: Settings | None = None,
    history: HistoryStore | None = None,
  ):
    self.settings = settings or Settings()
    self.engine = FindingEngine(self.settings.build_catalog())
    self.history = history

  def review(
    self,
    code: str,
    language: Language | None = None,
    enabled: CategorySelection | None = None,
  ) -> ReviewReport:
    """Analyze a snippet, build the rewrite and record it in history.

    Raises:
      InvalidInputError: If the snippet is blank.
    """
    text = code.strip()
    if not text:
      raise InvalidInputError("Please enter some code to review.")

    language = language or self.settings.language
    enabled = self.settings.categories if enabled is None else enabled

    findings = self.engine.analyze(text, enabled)
    rewritten = rewrite(
      text,
      findings,
      language,
      secret_env_var=self.settings.secret_env_var,
      model=self.settings.model,
    )

    report = ReviewReport(
      source=text,
      language=language,
      findings=findings,
      rewritten=rewritten,
      summary=summarize(findings),
    )
    logger.info("Reviewed %d line(s): %s", text.count("\n") + 1, report.summary)

    if self.history is not None:
      try:
        self.history.record(HistoryEntry.from_report(report))
      except HistoryError as e:
        logger.warning("Review not saved to history: %s", e)

    return report


def run_review(
  code: str,
  language: Language | None = None,
  skip: list[Category] | None = None,
  config_path: Path | None = None,
  record_history: bool = True,
) -> ReviewReport:
  """Run a review with the given options on top of the loaded config."""
  settings = load_config(config_path).model_copy(deep=True)

  if language:
    settings.language = language
  if skip:
    for category in skip:
      settings.categories[category] = False

  history = None
  if record_history and settings.history_enabled:
    history = HistoryStore(settings.history_path, settings.history_limit)

  orchestrator = ReviewOrchestrator(settings, history)
  return orchestrator.review(code)
