"""Rule catalog: the immutable table of detection rules."""

import logging
import re
from functools import lru_cache
from typing import Iterable, Iterator

from snipcheck.models import Category, Rule, Severity

logger = logging.getLogger(__name__)


class CatalogError(Exception):
  """Rule table is invalid (duplicate id, pattern that does not compile)."""


class RuleCatalog:
  """Rules grouped by category.

  Iteration yields rules in category order, then in the order they were
  given within each category. That order is the tie-breaker when findings
  share a severity, so it must stay stable.

  Example:
    catalog = default_catalog().extended([my_rule])
    for rule in catalog.rules_for(Category.SECURITY):
      ...
  """

  def __init__(self, rules: Iterable[Rule]):
    buckets: dict[Category, list[Rule]] = {category: [] for category in Category}
    by_id: dict[str, Rule] = {}

    for rule in rules:
      if rule.id in by_id:
        raise CatalogError(f"Duplicate rule id: {rule.id}")
      by_id[rule.id] = rule
      buckets[rule.category].append(rule)

    self._buckets = {category: tuple(found) for category, found in buckets.items()}
    self._by_id = by_id

  def __iter__(self) -> Iterator[Rule]:
    for category in Category:
      yield from self._buckets[category]

  def __len__(self) -> int:
    return len(self._by_id)

  def __contains__(self, rule_id: object) -> bool:
    return rule_id in self._by_id

  @property
  def categories(self) -> tuple[Category, ...]:
    return tuple(Category)

  def rules_for(self, category: Category) -> tuple[Rule, ...]:
    """Rules of one category in catalog order."""
    return self._buckets[category]

  def get(self, rule_id: str) -> Rule | None:
    return self._by_id.get(rule_id)

  def extended(self, rules: Iterable[Rule]) -> "RuleCatalog":
    """Return a new catalog with extra rules appended to their categories."""
    return RuleCatalog([*self, *rules])


def compile_rule(
  rule_id: str,
  category: Category,
  severity: Severity,
  title: str,
  pattern: str,
  description: str = "",
  suggestion: str = "",
  ignore_case: bool = True,
) -> Rule:
  """Build a Rule from a pattern string.

  Raises:
    CatalogError: If the pattern is not a valid regular expression.
  """
  # ASCII keeps \w and case folding to the plain Latin alphabet
  flags = re.ASCII | (re.IGNORECASE if ignore_case else 0)
  try:
    compiled = re.compile(pattern, flags)
  except re.error as e:
    raise CatalogError(f"Rule {rule_id} has an invalid pattern: {e}") from e

  return Rule(
    id=rule_id,
    category=category,
    severity=severity,
    title=title,
    description=description,
    suggestion=suggestion,
    pattern=compiled,
  )


@lru_cache(maxsize=1)
def default_catalog() -> RuleCatalog:
  """Build the built-in catalog once per process."""
  # Imported here so the category modules load only when a catalog is needed
  from snipcheck.rules import domain, performance, quality, security

  catalog = RuleCatalog([
    *security.RULES,
    *performance.RULES,
    *quality.RULES,
    *domain.RULES,
  ])
  logger.debug("Loaded %d built-in rules", len(catalog))
  return catalog
