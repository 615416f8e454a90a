"""Finding engine: runs catalog rules over a snippet and ranks the results."""

import logging
from itertools import islice
from typing import Sequence

from snipcheck.models import CategorySelection, Finding, Rule, Severity
from snipcheck.rules.catalog import RuleCatalog, default_catalog

logger = logging.getLogger(__name__)

# Matches kept per finding; bounds rendering cost, not a count of occurrences
MAX_MATCHES = 3


class FindingEngine:
  """Evaluates enabled catalog rules against raw text.

  The engine holds no per-call state, so one instance can serve any number
  of callers.

  Example:
    engine = FindingEngine()
    findings = engine.analyze(code, {Category.SECURITY: False})
  """

  def __init__(self, catalog: RuleCatalog | None = None):
    self._catalog = catalog if catalog is not None else default_catalog()

  @property
  def catalog(self) -> RuleCatalog:
    return self._catalog

  def analyze(
    self,
    text: str,
    enabled: CategorySelection | None = None,
  ) -> list[Finding]:
    """Run every enabled rule and return findings ordered by severity.

    Args:
      text: Raw snippet. Empty text is valid and yields no findings.
      enabled: Category switches. Missing categories count as enabled.

    Returns:
      Findings sorted by severity rank; ties keep catalog order.
    """
    enabled = enabled or {}
    findings: list[Finding] = []

    for category in self._catalog.categories:
      if not enabled.get(category, True):
        continue
      for rule in self._catalog.rules_for(category):
        finding = _match_rule(rule, text)
        if finding is not None:
          findings.append(finding)

    unique = _dedupe(findings)
    # sorted() is stable, which keeps catalog order within a severity
    ranked = sorted(unique, key=lambda f: f.severity.rank)
    logger.debug("Analysis produced %d finding(s)", len(ranked))
    return ranked


def _match_rule(rule: Rule, text: str) -> Finding | None:
  """Collect up to MAX_MATCHES non-overlapping matches of a rule."""
  matches = tuple(m.group(0) for m in islice(rule.pattern.finditer(text), MAX_MATCHES))
  if not matches:
    return None
  return Finding(rule=rule, matches=matches)


def _dedupe(findings: list[Finding]) -> list[Finding]:
  """Keep the first finding per rule id."""
  seen: set[str] = set()
  unique: list[Finding] = []
  for finding in findings:
    if finding.id in seen:
      continue
    seen.add(finding.id)
    unique.append(finding)
  return unique


def analyze(text: str, enabled: CategorySelection | None = None) -> list[Finding]:
  """Analyze text against the built-in catalog."""
  return FindingEngine().analyze(text, enabled)


def severity_counts(findings: Sequence[Finding]) -> dict[Severity, int]:
  """Count findings per severity; every severity is present in the result."""
  counts = {severity: 0 for severity in Severity}
  for finding in findings:
    counts[finding.severity] += 1
  return counts


def summarize(findings: Sequence[Finding]) -> str:
  """Generate a one-line summary of the findings.

  Returns:
    "No issues found." or e.g. "Found 3 issues: 1 critical, 2 high."
  """
  if not findings:
    return "No issues found."

  counts = severity_counts(findings)
  parts = [f"{count} {severity.value}" for severity, count in counts.items() if count]

  total = len(findings)
  return f"Found {total} issue{'s' if total != 1 else ''}: {', '.join(parts)}."
