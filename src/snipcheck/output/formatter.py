"""Output formatting for review reports."""

import json
from abc import ABC, abstractmethod

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from snipcheck.models import Finding, ReviewReport, Severity
from snipcheck.output.diff import LineChange, diff_lines
from snipcheck.rules.engine import severity_counts

# Characters of a match shown inline before truncation
MATCH_PREVIEW_LENGTH = 50


def _preview(match: str) -> str:
  if len(match) > MATCH_PREVIEW_LENGTH:
    return match[:MATCH_PREVIEW_LENGTH] + "..."
  return match


class OutputFormatter(ABC):
  """Base output formatter."""

  def __init__(self, show_rewrite: bool = True):
    self.show_rewrite = show_rewrite

  @abstractmethod
  def format(self, report: ReviewReport) -> str:
    """Format review report for output."""
    ...


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  SEVERITY_STYLES = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "blue",
  }

  CHANGE_STYLES = {
    LineChange.MODIFIED: "yellow",
    LineChange.ADDED: "green",
    LineChange.REMOVED: "red",
    LineChange.UNCHANGED: "dim",
  }

  def __init__(self, show_rewrite: bool = True, console: Console | None = None):
    super().__init__(show_rewrite)
    self.console = console or Console()

  def format(self, report: ReviewReport) -> str:
    self._print_summary(report)
    self._print_findings(report)
    if self.show_rewrite and report.findings and report.rewritten != report.source:
      self._print_diff(report)
    return ""

  def _print_summary(self, report: ReviewReport) -> None:
    counts = severity_counts(report.findings)
    stats = "  ".join(
      f"[{self.SEVERITY_STYLES[sev]}]{sev.value}: {counts[sev]}[/]" for sev in Severity
    )
    self.console.print()
    self.console.print(Panel(
      f"{escape(report.summary)}\n{stats}",
      title=f"[bold]Snippet Review[/bold] ({report.language.value})",
      border_style="blue",
    ))

  def _print_findings(self, report: ReviewReport) -> None:
    if not report.findings:
      self.console.print("\n[green]No issues found.[/green]")
      return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Severity", width=10)
    table.add_column("Rule", width=10)
    table.add_column("Issue", min_width=40)

    for finding in report.findings:
      style = self.SEVERITY_STYLES.get(finding.severity, "")
      table.add_row(
        Text(finding.severity.value.upper(), style=style),
        finding.id,
        self._describe(finding),
      )

    self.console.print()
    self.console.print(table)
    self.console.print(f"\n[dim]{len(report.findings)} issue(s) found[/dim]")

  def _describe(self, finding: Finding) -> Group:
    rule = finding.rule
    parts: list[Text] = [
      Text(rule.title, style="bold"),
      Text(rule.description),
    ]
    for match in finding.matches:
      parts.append(Text(_preview(match), style="cyan"))
    if rule.suggestion:
      parts.append(Text(f"Suggestion: {rule.suggestion}", style="dim"))
    return Group(*parts)

  def _print_diff(self, report: ReviewReport) -> None:
    table = Table(show_header=True, header_style="bold", title="Suggested rewrite")
    table.add_column("#", justify="right", width=5)
    table.add_column("Original", overflow="fold")
    table.add_column("Rewritten", overflow="fold")

    for row in diff_lines(report.source, report.rewritten):
      style = self.CHANGE_STYLES[row.change]
      table.add_row(
        str(row.number),
        Text(row.original, style=style),
        Text(row.rewritten, style=style),
      )

    self.console.print()
    self.console.print(table)


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, report: ReviewReport) -> str:
    counts = severity_counts(report.findings)
    data = {
      "summary": report.summary,
      "language": report.language.value,
      "counts": {sev.value: count for sev, count in counts.items()},
      "findings": [
        {
          "id": f.id,
          "category": f.category.value,
          "severity": f.severity.value,
          "title": f.rule.title,
          "description": f.rule.description,
          "suggestion": f.rule.suggestion,
          "matches": list(f.matches),
        }
        for f in report.findings
      ],
    }
    if self.show_rewrite:
      data["rewritten"] = report.rewritten
    return json.dumps(data, indent=2)


class MarkdownFormatter(OutputFormatter):
  """Markdown output formatter."""

  def format(self, report: ReviewReport) -> str:
    lines = [
      "# Snippet Review",
      "",
      f"**Language:** {report.language.value}",
      "",
      "## Summary",
      "",
      report.summary,
      "",
    ]

    if report.findings:
      lines.extend(["## Issues", ""])
      for finding in report.findings:
        severity = finding.severity.value.upper()
        lines.append(f"### [{severity}] {finding.id}: {finding.rule.title}")
        lines.append("")
        lines.append(finding.rule.description)
        if finding.matches:
          lines.append("")
          lines.extend(f"- `{_preview(m)}`" for m in finding.matches)
        if finding.rule.suggestion:
          lines.append("")
          lines.append(f"**Suggestion:** {finding.rule.suggestion}")
        lines.append("")
    else:
      lines.extend(["## Issues", "", "No issues found.", ""])

    if self.show_rewrite and report.findings:
      lines.extend([
        "## Suggested rewrite",
        "",
        f"```{report.language.value}",
        report.rewritten,
        "```",
        "",
      ])

    return "\n".join(lines)


def get_formatter(format_type: str, show_rewrite: bool = True) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "markdown": MarkdownFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class(show_rewrite=show_rewrite)
