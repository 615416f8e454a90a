"""CLI interface using Typer."""

import logging
import os
import sys
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from snipcheck import __version__
from snipcheck.config import load_config
from snipcheck.history import HistoryError, HistoryStore
from snipcheck.languages import detect_language, parse_language
from snipcheck.models import Category, Language
from snipcheck.output import get_formatter
from snipcheck.review import InvalidInputError, run_review
from snipcheck.rules import CatalogError
from snipcheck.samples import get_sample

app = typer.Typer(
  name="snipcheck",
  help="Pattern-based review and quick fixes for code snippets",
  no_args_is_help=True,
)

console = Console()


def _is_debug() -> bool:
  return os.environ.get("SNIPCHECK_DEBUG", "").lower() in ("1", "true", "yes")


def _configure_logging(debug: bool) -> None:
  logging.basicConfig(
    level=logging.DEBUG if debug else logging.WARNING,
    format="%(message)s",
    handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    force=True,
  )


def version_callback(value: bool) -> None:
  if value:
    console.print(f"snipcheck {__version__}")
    raise typer.Exit()


@app.callback()
def main(
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Review code snippets against a fixed battery of pattern rules."""


@app.command()
def review(
  file: Optional[str] = typer.Argument(
    None,
    help="File to review; '-' or nothing reads from stdin",
  ),
  language: str = typer.Option(
    None, "--language", "-l", help="Snippet language (javascript, typescript, python, go, java)"
  ),
  sample: str = typer.Option(None, "--sample", help="Review the bundled sample for a language"),
  skip: str = typer.Option(
    None, "--skip", help="Categories to skip: security,performance,codeQuality,domainSpecific"
  ),
  format_type: str = typer.Option(
    "terminal", "--format", help="Output format: terminal, json, markdown"
  ),
  show_rewrite: bool = typer.Option(
    True, "--rewrite/--no-rewrite", help="Show the suggested rewrite"
  ),
  output: Path = typer.Option(None, "--output", "-o", help="Write the rewritten snippet here"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  exit_code: bool = typer.Option(
    False, "--exit-code", help="Exit with 1 when critical or high issues are found"
  ),
  no_history: bool = typer.Option(False, "--no-history", help="Do not record this review"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show full traceback on errors"),
) -> None:
  """Review a code snippet.

  Reads the snippet from FILE, from stdin, or from a bundled sample, then
  prints the findings and the suggested rewrite.
  """
  show_traceback = debug or _is_debug()
  _configure_logging(show_traceback)

  try:
    code, detected = _read_snippet(file, sample)
    lang = parse_language(language) if language else detected
    skipped = _parse_skip(skip) if skip else None
    formatter = get_formatter(format_type, show_rewrite=show_rewrite)

    report = run_review(
      code,
      language=lang,
      skip=skipped,
      config_path=config,
      record_history=not no_history,
    )

    text = formatter.format(report)
    if text:
      typer.echo(text)

    if output:
      output.write_text(report.rewritten + "\n")
      console.print(f"[dim]Rewritten snippet written to {output}[/dim]")

  except InvalidInputError as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except CatalogError as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except HistoryError as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except (OSError, ValueError) as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except Exception as e:
    console.print(f"[red]Error:[/red] {e}")
    if show_traceback:
      console.print("\n[dim]Traceback:[/dim]")
      console.print(traceback.format_exc())
    raise typer.Exit(1) from None

  if exit_code and report.has_severe_issues:
    raise typer.Exit(1)


@app.command()
def rules(
  category: str = typer.Option(None, "--category", help="Only list rules of this category"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
  """List the rules in the catalog, including custom rules from config."""
  try:
    catalog = load_config(config).build_catalog()
    categories = [Category(category)] if category else list(catalog.categories)
  except (CatalogError, OSError, ValueError) as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None

  table = Table(show_header=True, header_style="bold")
  table.add_column("Rule", width=10)
  table.add_column("Category", width=16)
  table.add_column("Severity", width=10)
  table.add_column("Title", min_width=30)

  for cat in categories:
    for rule in catalog.rules_for(cat):
      table.add_row(rule.id, cat.value, rule.severity.value, rule.title)

  console.print(table)


@app.command()
def history(
  clear: bool = typer.Option(False, "--clear", help="Delete all recorded reviews"),
  limit: int = typer.Option(None, "--limit", "-n", help="Show at most this many entries"),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
  """Show or clear past reviews, newest first."""
  try:
    settings = load_config(config)
    store = HistoryStore(settings.history_path, settings.history_limit)
    if clear:
      store.clear()
      console.print("History cleared.")
      return
    entries = store.load()
  except (HistoryError, OSError, ValueError) as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None

  if limit is not None:
    entries = entries[:limit]

  if not entries:
    console.print("[dim]No past reviews.[/dim]")
    return

  table = Table(show_header=True, header_style="bold")
  table.add_column("When", width=20)
  table.add_column("Language", width=11)
  table.add_column("Critical", justify="right")
  table.add_column("High", justify="right")
  table.add_column("Medium", justify="right")
  table.add_column("Low", justify="right")
  table.add_column("Snippet", min_width=30)

  for entry in entries:
    table.add_row(
      entry.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
      entry.language.value,
      str(entry.stats.critical),
      str(entry.stats.high),
      str(entry.stats.medium),
      str(entry.stats.low),
      entry.summary.replace("\n", " "),
    )

  console.print(table)


def _read_snippet(file: str | None, sample: str | None) -> tuple[str, Language | None]:
  """Return the snippet text and the language implied by its source."""
  if sample:
    lang = parse_language(sample)
    return get_sample(lang), lang

  if file is None or file == "-":
    return sys.stdin.read(), None

  path = Path(file)
  return path.read_text(), detect_language(path)


def _parse_skip(skip_str: str) -> list[Category]:
  """Parse skip string into list of Category."""
  categories = []
  for part in skip_str.split(","):
    part = part.strip()
    try:
      categories.append(Category(part))
    except ValueError:
      console.print(f"[yellow]Warning:[/yellow] Unknown category '{part}', ignoring")
  return categories


if __name__ == "__main__":
  app()
