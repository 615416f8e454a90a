"""Core domain models for snippet review."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence


class Severity(Enum):
  """Finding severity levels, most urgent first."""

  CRITICAL = "critical"
  HIGH = "high"
  MEDIUM = "medium"
  LOW = "low"

  @property
  def rank(self) -> int:
    """Sort key: 0 for critical up to 3 for low."""
    return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {severity: i for i, severity in enumerate(Severity)}


class Category(Enum):
  """Rule categories, in catalog order."""

  SECURITY = "security"
  PERFORMANCE = "performance"
  CODE_QUALITY = "codeQuality"
  DOMAIN_SPECIFIC = "domainSpecific"


class Language(Enum):
  """Declared source language of a snippet."""

  JAVASCRIPT = "javascript"
  TYPESCRIPT = "typescript"
  PYTHON = "python"
  GO = "go"
  JAVA = "java"


CategorySelection = Mapping[Category, bool]


def all_categories() -> dict[Category, bool]:
  """Selection with every category enabled."""
  return {category: True for category in Category}


@dataclass(frozen=True)
class Rule:
  """A static detector: a pattern plus the metadata shown to the user."""

  id: str
  category: Category
  severity: Severity
  title: str
  description: str
  suggestion: str
  pattern: re.Pattern[str]


@dataclass(frozen=True)
class Finding:
  """A rule that matched during one analysis pass.

  Only the first few matched substrings are kept; the total number of
  occurrences is not recorded.
  """

  rule: Rule
  matches: tuple[str, ...]

  @property
  def id(self) -> str:
    return self.rule.id

  @property
  def severity(self) -> Severity:
    return self.rule.severity

  @property
  def category(self) -> Category:
    return self.rule.category


@dataclass(frozen=True)
class ReviewReport:
  """Result of reviewing one snippet."""

  source: str
  language: Language
  findings: Sequence[Finding]
  rewritten: str
  summary: str

  @property
  def has_severe_issues(self) -> bool:
    """Check if the report contains HIGH or CRITICAL findings."""
    return any(f.severity in (Severity.HIGH, Severity.CRITICAL) for f in self.findings)
