"""Language detection from file names."""

from pathlib import Path

from snipcheck.models import Language

# Common code file extensions by language
_LANGUAGE_EXTENSIONS: dict[Language, list[str]] = {
  Language.JAVASCRIPT: ["js", "jsx", "mjs", "cjs"],
  Language.TYPESCRIPT: ["ts", "tsx", "mts", "cts"],
  Language.PYTHON: ["py"],
  Language.GO: ["go"],
  Language.JAVA: ["java"],
}

_EXTENSION_LANGUAGES: dict[str, Language] = {
  ext: lang for lang, exts in _LANGUAGE_EXTENSIONS.items() for ext in exts
}


def detect_language(path: str | Path) -> Language | None:
  """Guess the language from a file extension, or None if unknown."""
  suffix = Path(path).suffix.lower().lstrip(".")
  return _EXTENSION_LANGUAGES.get(suffix)


def parse_language(value: str) -> Language:
  """Parse a language name, accepting common extensions as aliases.

  Raises:
    ValueError: If the name is not a supported language.
  """
  name = value.strip().lower()
  try:
    return Language(name)
  except ValueError:
    pass

  if name in _EXTENSION_LANGUAGES:
    return _EXTENSION_LANGUAGES[name]

  supported = ", ".join(lang.value for lang in Language)
  raise ValueError(f"Unknown language '{value}'. Supported: {supported}")
