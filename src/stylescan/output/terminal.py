"""Rich terminal reporter — sections, severity pills, capped line lists."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from stylescan.findings.formatter import DEFAULT_MAX_SHOWN, format_finding
from stylescan.findings.models import CheckResult

_SEVERITY_STYLE = {
    "high": "bold white on red",
    "medium": "bold black on yellow",
    "low": "bold black on bright_cyan",
}

_SECTIONS = (
    ("readability", "Readability"),
    ("documentation", "Documentation"),
)


def _severity_pill(severity: str) -> Text:
    style = _SEVERITY_STYLE.get(severity, "")
    return Text(f" {severity.upper():<6} ", style=style)


def render(
    result: CheckResult,
    *,
    show_summary: bool = True,
    max_shown: int = DEFAULT_MAX_SHOWN,
    console: Console | None = None,
) -> None:
    """Print check results to the terminal using Rich."""
    console = console or Console()

    console.print(f"[bold]StyleScan[/bold] [dim]{result.file}[/dim]")

    if not result.findings:
        console.print()
        console.print("[bold green]✅ No style problems found.[/bold green]")
        if show_summary:
            _print_summary(console, result)
        return

    for category, title in _SECTIONS:
        findings = result.by_category(category)
        console.print()
        console.print(f"[bold]# {title} #[/bold]")
        for finding in findings:
            line = Text.assemble(
                _severity_pill(finding.severity),
                " ",
                format_finding(finding, max_shown),
            )
            console.print(line)

    if show_summary:
        _print_summary(console, result)

    # Final verdict
    console.print()
    if result.blocked:
        console.print(
            "[bold red]❌ FAILED — style problems at or above the fail threshold.[/bold red]"
        )
    else:
        console.print(
            "[bold yellow]⚠️  Style problems found, all below the fail threshold.[/bold yellow]"
        )


def _print_summary(console: Console, result: CheckResult) -> None:
    console.print()
    console.print(f"[dim]Lines scanned:[/dim]  {result.lines_scanned}")
    console.print(f"[dim]Rules run:[/dim]      {result.rules_run}")
    console.print(f"[dim]Findings:[/dim]       {result.total_findings}")
    console.print(f"[dim]Blocking:[/dim]       {len(result.blocking_findings)}")
    console.print(f"[dim]Flagged lines:[/dim]  {result.flagged_lines}")
    console.print(f"[dim]Duration:[/dim]       {result.check_duration_ms:.0f}ms")
