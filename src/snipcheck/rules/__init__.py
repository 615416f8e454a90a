"""Deterministic rule catalog and finding engine."""

from snipcheck.rules.catalog import CatalogError, RuleCatalog, compile_rule, default_catalog
from snipcheck.rules.engine import (
  MAX_MATCHES,
  FindingEngine,
  analyze,
  severity_counts,
  summarize,
)

__all__ = [
  "CatalogError",
  "FindingEngine",
  "MAX_MATCHES",
  "RuleCatalog",
  "analyze",
  "compile_rule",
  "default_catalog",
  "severity_counts",
  "summarize",
]
