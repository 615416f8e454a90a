"""Rewrite pipeline: folds the canned steps over a snippet."""

import logging
from functools import reduce
from typing import Sequence

from snipcheck.models import Finding, Language
from snipcheck.rewrite.steps import (
  RewriteContext,
  RewriteStep,
  add_error_handling,
  add_rate_limiting,
  annotate_message_types,
  substitute_secrets,
)
from snipcheck.rules.domain import CURRENT_MODEL

logger = logging.getLogger(__name__)

# Order matters: later steps check markers in the text earlier steps produced
DEFAULT_STEPS: tuple[RewriteStep, ...] = (
  substitute_secrets,
  annotate_message_types,
  add_error_handling,
  add_rate_limiting,
)


def rewrite(
  original: str,
  findings: Sequence[Finding],
  language: Language = Language.JAVASCRIPT,
  *,
  secret_env_var: str = "MINIMAX_API_KEY",
  model: str = CURRENT_MODEL,
  steps: Sequence[RewriteStep] = DEFAULT_STEPS,
) -> str:
  """Apply every rewrite step in order and return the suggested text.

  This is templated text injection, not a program transformation: the
  output is not guaranteed to be valid code in the declared language.
  Identical arguments always produce identical output.

  Args:
    original: The snippet as submitted.
    findings: Findings from the analysis of ``original``.
    language: Declared language of the snippet.
    secret_env_var: Environment variable named in the secret placeholder.
    model: Model id written into the retry example.
    steps: Steps to fold over the text, in order.

  Returns:
    The rewritten text. Never raises for any input.
  """
  context = RewriteContext.from_findings(
    findings,
    language=language,
    secret_env_var=secret_env_var,
    model=model,
  )

  def apply(text: str, step: RewriteStep) -> str:
    result = step(text, context)
    if result != text:
      logger.debug("Rewrite step %s changed the text", getattr(step, "__name__", step))
    return result

  return reduce(apply, steps, original)
