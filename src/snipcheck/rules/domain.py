"""Rules specific to clients of the MiniMax chat completion API."""

import re

from snipcheck.models import Category, Rule, Severity

CURRENT_ENDPOINT = "https://api.minimax.chat/v1/text/chatcompletion_v2"
CURRENT_MODEL = "MiniMax-M2.1"

RULES = (
  Rule(
    id="DOM-001",
    category=Category.DOMAIN_SPECIFIC,
    severity=Severity.HIGH,
    title="Wrong API endpoint",
    description="The endpoint host does not match the current API.",
    suggestion=f"Use the current endpoint: {CURRENT_ENDPOINT}",
    pattern=re.compile(r"""api\.minimax\.(?:com|io|net)/[^'"]*""", re.IGNORECASE | re.ASCII),
  ),
  Rule(
    id="DOM-002",
    category=Category.DOMAIN_SPECIFIC,
    severity=Severity.MEDIUM,
    title="Wasteful token usage",
    description="Long prompts could be trimmed to reduce token cost.",
    suggestion="Shorten prompts without losing information.",
    pattern=re.compile(r"""content:\s*['"][^'"]{200,}['"]""", re.IGNORECASE | re.ASCII),
  ),
  Rule(
    id="DOM-003",
    category=Category.DOMAIN_SPECIFIC,
    severity=Severity.MEDIUM,
    title="Untuned temperature",
    description="The temperature setting is not tuned for the use case.",
    suggestion="Use a lower temperature (0.1-0.3) for consistent results.",
    pattern=re.compile(r"temperature:\s*(?:0\.[0-9]+|1\.[0-9]+)", re.IGNORECASE | re.ASCII),
  ),
  Rule(
    id="DOM-004",
    category=Category.DOMAIN_SPECIFIC,
    severity=Severity.HIGH,
    title="Model not pinned",
    description="The model is missing or set to an outdated id.",
    suggestion=f"Use the current model: {CURRENT_MODEL}",
    pattern=re.compile(
      r"""(?:model\s*[:=]\s*['"]?)MiniMax-[^'"\s,}]*""",
      re.IGNORECASE | re.ASCII,
    ),
  ),
)
