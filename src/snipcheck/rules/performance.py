"""Performance rules: retries, rate limiting and caching around API calls."""

import re

from snipcheck.models import Category, Rule, Severity

# Flattened form of "(?:await obj.method(...)[^}]*)+": once one await
# matches, further repetitions only extend the tail, so one pass is enough.
AWAIT_WITHOUT_RETRY_PATTERN = re.compile(
  r"""(?aix)
  async\s+function\s+\w+\([^)]*\)\s*\{
  [^}]*
  await\s+\w+\.\w+\([^)]*\)           # Awaited method call
  [^}]*
  """,
)

LOOP_CALL_PATTERN = re.compile(
  r"""(?aix)
  for\s*\([^)]*\)\s*\{
  [^}]*
  (?:await\s+\w+\([^)]*\)|fetch\()
  """,
)

ASYNC_FUNCTION_PATTERN = re.compile(
  r"async\s+function\s+\w+\([^)]*\)\s*\{[^}]*\}",
  re.IGNORECASE | re.ASCII,
)

RULES = (
  Rule(
    id="PERF-001",
    category=Category.PERFORMANCE,
    severity=Severity.HIGH,
    title="Missing retry logic",
    description=(
      "API calls without exponential backoff lose work when the service "
      "has a transient failure."
    ),
    suggestion="Retry failed calls with exponential backoff.",
    pattern=AWAIT_WITHOUT_RETRY_PATTERN,
  ),
  Rule(
    id="PERF-002",
    category=Category.PERFORMANCE,
    severity=Severity.HIGH,
    title="No rate limiting",
    description=(
      "Repeated API calls inside a loop without rate limiting run into "
      "rate limit errors."
    ),
    suggestion="Add rate limiting or process requests in batches.",
    pattern=LOOP_CALL_PATTERN,
  ),
  Rule(
    id="PERF-003",
    category=Category.PERFORMANCE,
    severity=Severity.MEDIUM,
    title="Missing caching",
    description=(
      "Frequent requests are not cached, causing unnecessary API calls "
      "and cost."
    ),
    suggestion="Cache results of frequent or identical requests.",
    pattern=ASYNC_FUNCTION_PATTERN,
  ),
)
