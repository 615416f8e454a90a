"""Canned JavaScript examples prepended by the rewrite pipeline."""

from string import Template

from snipcheck.rules.domain import CURRENT_ENDPOINT


class _Snippet(Template):
  # "$" is taken by JavaScript template literals
  delimiter = "@"


SECRET_PLACEHOLDER = _Snippet("apiKey: process.env.@env_var")

MESSAGES_ANY_REPLACEMENT = "messages: Array<{ role: string; content: string }>"

# Markers whose presence means the snippet already handles the concern
ERROR_HANDLING_MARKER = "try {"
RATE_LIMIT_MARKER = "rateLimit"

MAX_RETRIES = 3
BASE_DELAY_MS = 250
BATCH_SIZE = 10
MIN_CALL_INTERVAL_MS = 1000

RETRY_EXAMPLE = _Snippet("""\
// GOOD - With proper error handling
const callWithRetry = async (messages, options = {}) => {
  const maxRetries = @max_retries;
  const baseDelay = @base_delay;

  for (let attempt = 1; attempt <= maxRetries; attempt++) {
    try {
      const response = await fetch('@endpoint', {
        method: 'POST',
        headers: {
          'Content-Type': 'application/json',
          'Authorization': `Bearer ${process.env.@env_var}`
        },
        body: JSON.stringify({
          model: '@model',
          messages,
          temperature: 0.8,
          ...options
        })
      });

      if (!response.ok) {
        throw new Error(`API Error: ${response.status}`);
      }

      return await response.json();
    } catch (error) {
      if (attempt === maxRetries) {
        throw error;
      }
      const delay = baseDelay * Math.pow(2, attempt - 1) + Math.random() * baseDelay * 0.2;
      await new Promise(resolve => setTimeout(resolve, delay));
    }
  }
};""")

RATE_LIMIT_EXAMPLE = _Snippet("""
// GOOD - Rate limiting implemented
const rateLimit = async (fn, delay) => {
  let lastCall = 0;
  return async (...args) => {
    const now = Date.now();
    if (now - lastCall < delay) {
      await new Promise(resolve => setTimeout(resolve, delay - (now - lastCall)));
    }
    lastCall = Date.now();
    return fn(...args);
  };
};

// GOOD - Batch processing
const processBatch = async (items, batchSize = @batch_size) => {
  const results = [];
  for (let i = 0; i < items.length; i += batchSize) {
    const batch = items.slice(i, i + batchSize);
    const batchResults = await Promise.all(
      batch.map(item => rateLimit(callWithRetry, @min_interval)(item))
    );
    results.push(...batchResults);
  }
  return results;
};""")


def render_retry_example(env_var: str, model: str) -> str:
  return RETRY_EXAMPLE.substitute(
    max_retries=MAX_RETRIES,
    base_delay=BASE_DELAY_MS,
    endpoint=CURRENT_ENDPOINT,
    env_var=env_var,
    model=model,
  )


def render_rate_limit_example() -> str:
  return RATE_LIMIT_EXAMPLE.substitute(
    batch_size=BATCH_SIZE,
    min_interval=MIN_CALL_INTERVAL_MS,
  )
