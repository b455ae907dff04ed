"""StyleScan CLI — Typer application with check, tokens, annotate, and init commands."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from stylescan import __version__

app = typer.Typer(
    name="stylescan",
    help="Check student C++ submissions against the house style.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _annotate_or_exit(file: Path, cfg=None):
    """Read and annotate *file*, exit 2 on failure."""
    from stylescan.config.schema import StyleScanConfig
    from stylescan.scanner.engine import annotate_file
    from stylescan.source.reader import SourceError

    try:
        return annotate_file(file, cfg or StyleScanConfig())
    except SourceError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    file: Path = typer.Argument(..., help="C++ source file to check"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .stylescan.toml"),
    no_function_checks: bool = typer.Option(
        False, "--no-function-checks", "-f", help="Suppress function length and lead-in comment checks"
    ),
    format: Optional[str] = typer.Option(None, "--format", help="Output format: terminal | json | sarif"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    fail_on: Optional[str] = typer.Option(None, "--fail-on", help="Severity threshold: low | medium | high"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Check one source file for style problems."""
    from stylescan.config.loader import ConfigError, load_config
    from stylescan.output import json_report, sarif, terminal
    from stylescan.rules.registry import build_registry
    from stylescan.scanner.engine import CheckError, check as run_check

    base_dir = Path.cwd()

    # --- Load config ---
    try:
        cfg = load_config(base_dir, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in ("terminal", "json", "sarif"):
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if fail_on:
        if fail_on not in ("low", "medium", "high"):
            console.print(f"[bold red]Invalid fail-on level:[/bold red] {fail_on}")
            raise typer.Exit(code=2)
        cfg.scan.fail_on = fail_on  # type: ignore[assignment]
    if no_function_checks:
        cfg.scan.function_checks = False

    # --- Build rules ---
    try:
        registry = build_registry(cfg, base_dir)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    for rule_id in [*cfg.rules.enable, *cfg.rules.disable]:
        if registry.get(rule_id) is None:
            console.print(f"[yellow]⚠[/yellow]  Unknown rule id in config: {rule_id}")

    if verbose or debug:
        readability = len(registry.by_category("readability"))
        documentation = len(registry.by_category("documentation"))
        console.print(
            f"[dim]Rules loaded: {len(registry.enabled_rules())} "
            f"(readability {readability}, documentation {documentation})[/dim]"
        )
        console.print(f"[dim]Config dir: {base_dir}[/dim]")

    # --- Read and annotate ---
    started = time.perf_counter()
    source = _annotate_or_exit(file, cfg)

    if verbose or debug:
        console.print(f"[dim]Lines read: {len(source)}[/dim]")
        names = ", ".join(sorted(source.type_names)) or "none"
        console.print(f"[dim]Declared types: {names}[/dim]")
    if debug:
        elapsed = (time.perf_counter() - started) * 1000
        console.print(f"[dim]Annotation duration: {elapsed:.0f}ms[/dim]")

    # --- Run checks ---
    try:
        result = run_check(source, cfg, registry, path=str(file))
    except CheckError as exc:
        console.print(f"[bold red]Checker error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if debug:
        console.print(f"[dim]Check duration: {result.check_duration_ms:.0f}ms[/dim]")

    # --- Output ---
    report_text: Optional[str] = None

    if cfg.output.format == "terminal":
        terminal.render(
            result,
            show_summary=cfg.output.show_summary,
            max_shown=cfg.output.max_shown,
        )
    elif cfg.output.format == "json":
        report_text = json_report.render(result)
        print(report_text)
    elif cfg.output.format == "sarif":
        report_text = sarif.render(result)
        print(report_text)

    # --- Write to file ---
    if output:
        if report_text is None:
            # Terminal output requested on screen; the file gets JSON
            report_text = json_report.render(result)
        Path(output).write_text(report_text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    # --- Exit code ---
    if result.blocked:
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── tokens ────────────────────────────────────────────────────────────────────


@app.command()
def tokens(
    file: Path = typer.Argument(..., help="Source file to tokenize"),
) -> None:
    """Show every token of every line, one per row (blank row between lines)."""
    from stylescan.source.tokenizer import tokenize

    source = _annotate_or_exit(file)
    for record in source:
        for token in tokenize(record.text):
            print(token)
        print()


# ── annotate ──────────────────────────────────────────────────────────────────


@app.command()
def annotate(
    file: Path = typer.Argument(..., help="Source file to annotate"),
) -> None:
    """Show the comment tag and scope depth derived for each line."""
    source = _annotate_or_exit(file)

    table = Table(title=str(file), title_style="bold", border_style="dim")
    table.add_column("Line", justify="right", style="green")
    table.add_column("Comment", style="cyan")
    table.add_column("Depth", justify="right")
    table.add_column("Text", overflow="fold")

    for record in source:
        table.add_row(
            str(record.index + 1),
            "" if not record.is_comment else record.comment.value,
            str(record.depth),
            record.text.expandtabs(4),
        )

    out = Console()
    out.print(table)
    names = ", ".join(sorted(source.type_names)) or "none"
    out.print(f"[dim]Declared types:[/dim] {names}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .stylescan.toml in the current directory."""
    from stylescan.config.defaults import DEFAULT_TOML
    from stylescan.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"stylescan {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """StyleScan — house-style checks for student C++ submissions."""
