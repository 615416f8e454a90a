"""Individual rewrite steps.

Each step is a pure function ``(text, context) -> text``. A step either
returns its input unchanged or applies one canned transformation; it never
looks at anything except the running text and the context.
"""

import re
from dataclasses import dataclass
from typing import Callable, Sequence

from snipcheck.models import Finding, Language
from snipcheck.rewrite import templates
from snipcheck.rules.domain import CURRENT_MODEL
from snipcheck.rules.security import API_KEY_PATTERN

MESSAGES_ANY_PATTERN = re.compile(r"messages:\s*any\[\]", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class RewriteContext:
  """Everything a step may look at besides the running text."""

  finding_ids: frozenset[str]
  language: Language = Language.JAVASCRIPT
  secret_env_var: str = "MINIMAX_API_KEY"
  model: str = CURRENT_MODEL

  @classmethod
  def from_findings(
    cls,
    findings: Sequence[Finding],
    language: Language = Language.JAVASCRIPT,
    secret_env_var: str = "MINIMAX_API_KEY",
    model: str = CURRENT_MODEL,
  ) -> "RewriteContext":
    return cls(
      finding_ids=frozenset(f.id for f in findings),
      language=language,
      secret_env_var=secret_env_var,
      model=model,
    )


RewriteStep = Callable[[str, RewriteContext], str]


def substitute_secrets(text: str, context: RewriteContext) -> str:
  """Replace hardcoded API keys with an environment lookup."""
  if "SEC-001" not in context.finding_ids:
    return text
  placeholder = templates.SECRET_PLACEHOLDER.substitute(env_var=context.secret_env_var)
  # Callable replacement so backslashes in the placeholder stay literal
  return API_KEY_PATTERN.sub(lambda _: placeholder, text)


def annotate_message_types(text: str, context: RewriteContext) -> str:
  """Give untyped TypeScript message lists a structural type."""
  if context.language != Language.TYPESCRIPT:
    return text
  return MESSAGES_ANY_PATTERN.sub(templates.MESSAGES_ANY_REPLACEMENT, text)


def add_error_handling(text: str, context: RewriteContext) -> str:
  """Prepend a retry-with-backoff example unless the text already has a try block."""
  if templates.ERROR_HANDLING_MARKER in text:
    return text
  example = templates.render_retry_example(context.secret_env_var, context.model)
  return f"{example}\n\n{text}"


def add_rate_limiting(text: str, context: RewriteContext) -> str:
  """Prepend rate limiting and batching examples unless already present."""
  if templates.RATE_LIMIT_MARKER in text:
    return text
  return f"{templates.render_rate_limit_example()}\n\n{text}"
