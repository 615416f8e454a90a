"""Canned rewrite pipeline for reviewed snippets."""

from snipcheck.rewrite.pipeline import DEFAULT_STEPS, rewrite
from snipcheck.rewrite.steps import (
  RewriteContext,
  RewriteStep,
  add_error_handling,
  add_rate_limiting,
  annotate_message_types,
  substitute_secrets,
)

__all__ = [
  "DEFAULT_STEPS",
  "RewriteContext",
  "RewriteStep",
  "add_error_handling",
  "add_rate_limiting",
  "annotate_message_types",
  "rewrite",
  "substitute_secrets",
]
