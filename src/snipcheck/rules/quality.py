"""Code quality rules."""

import re

from snipcheck.models import Category, Rule, Severity

RULES = (
  Rule(
    id="QUAL-001",
    category=Category.CODE_QUALITY,
    severity=Severity.MEDIUM,
    title="Missing type information",
    description=(
      "Functions or variables carry no type definitions, which lets type "
      "errors slip through to runtime."
    ),
    suggestion="Use TypeScript or JSDoc annotations for better type safety.",
    pattern=re.compile(
      r"(?:const|let|var)\s+\w+\s*=\s*(?:async\s+)?function",
      re.IGNORECASE | re.ASCII,
    ),
  ),
  Rule(
    id="QUAL-002",
    category=Category.CODE_QUALITY,
    severity=Severity.MEDIUM,
    title="Magic numbers",
    description="Unexplained numeric literals make the code hard to follow.",
    suggestion="Replace magic numbers with named constants.",
    pattern=re.compile(r"(?<![0-9])[0-9]{2,}(?![0-9])", re.ASCII),
  ),
  Rule(
    id="QUAL-003",
    category=Category.CODE_QUALITY,
    severity=Severity.LOW,
    title="Missing documentation",
    description="Important functions have no docstrings or comments.",
    suggestion="Add JSDoc or docstring comments.",
    pattern=re.compile(
      r"(?:function|const|let)\s+\w+\s*\([^)]*\)\s*\{[^}]*(?![*/])",
      re.IGNORECASE | re.ASCII,
    ),
  ),
)
