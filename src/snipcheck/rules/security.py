"""Security rules: leaked credentials, unescaped HTML, unchecked URLs."""

import re

from snipcheck.models import Category, Rule, Severity

# Shared with the rewrite step that swaps the literal for an env lookup
API_KEY_PATTERN = re.compile(
  r"""(?aix)
  api[_-]?key
  \s*[:=]\s*                          # Assignment operator
  ['"][a-zA-Z0-9_\-]{20,}['"]         # Quoted token, 20+ chars
  """,
)

INNER_HTML_PATTERN = re.compile(
  r"""(?aix)
  function\s+\w+\([^)]*\)\s*\{        # Named function header
  [^}]*                               # Body up to the first closing brace
  (?:innerHTML|dangerouslySetInnerHTML)
  """,
)

LITERAL_FETCH_PATTERN = re.compile(
  r"""fetch\s*\(\s*['"]https?://[^'"]*['"]""",
  re.IGNORECASE | re.ASCII,
)

RULES = (
  Rule(
    id="SEC-001",
    category=Category.SECURITY,
    severity=Severity.CRITICAL,
    title="Hardcoded API key",
    description=(
      "An API key or secret is embedded directly in the source code. "
      "Anyone with access to the code can use it."
    ),
    suggestion="Load secrets from environment variables or a secrets manager.",
    pattern=API_KEY_PATTERN,
  ),
  Rule(
    id="SEC-002",
    category=Category.SECURITY,
    severity=Severity.HIGH,
    title="Missing input validation",
    description=(
      "Markup is written into the page without validation or escaping, "
      "which opens the door to cross-site scripting."
    ),
    suggestion="Validate and escape all user input before rendering it.",
    pattern=INNER_HTML_PATTERN,
  ),
  Rule(
    id="SEC-003",
    category=Category.SECURITY,
    severity=Severity.HIGH,
    title="Unvalidated URL handling",
    description=(
      "External URLs are requested without validation, which can lead to "
      "server-side request forgery."
    ),
    suggestion="Validate external URLs against an allow-list.",
    pattern=LITERAL_FETCH_PATTERN,
  ),
)
