"""Pytest fixtures."""

from pathlib import Path

import pytest
from snipcheck.history import HistoryStore
from snipcheck.models import Language, ReviewReport
from snipcheck.rewrite import rewrite
from snipcheck.rules import FindingEngine, default_catalog, summarize


@pytest.fixture
def engine() -> FindingEngine:
  return FindingEngine(default_catalog())


@pytest.fixture
def leaky_snippet() -> str:
  return """const config = {
  api_key: "abcdefghijklmnopqrst1234",
  model: 'MiniMax-M2.1',
  temperature: 0.7
};

async function send(client) {
  const res = await client.post(config);
  return res;
}"""


@pytest.fixture
def sample_report(engine: FindingEngine, leaky_snippet: str) -> ReviewReport:
  findings = engine.analyze(leaky_snippet)
  return ReviewReport(
    source=leaky_snippet,
    language=Language.JAVASCRIPT,
    findings=findings,
    rewritten=rewrite(leaky_snippet, findings),
    summary=summarize(findings),
  )


@pytest.fixture
def history_store(tmp_path: Path) -> HistoryStore:
  return HistoryStore(tmp_path / "history.json", limit=3)
