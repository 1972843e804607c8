"""Command line entry points for the article post-processor."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from .config import Config, load_config
from .models import SiteReport, TransformStats
from .site import process_site
from .transform import transform_page

console = Console()
app = typer.Typer(help="Post-process rendered article pages of a static site.")

ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to configuration file or project directory."),
]
VerboseFlag = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log per-page details."),
]


@app.command()
def process(
    site_dir: Annotated[
        Path | None,
        typer.Argument(help="Generated site directory. Defaults to the configured output_dir."),
    ] = None,
    config_path: ConfigPathOption = ".",
    check: Annotated[
        bool,
        typer.Option("--check", help="Report pages that would change without writing them."),
    ] = False,
    verbose: VerboseFlag = False,
) -> None:
    """Rewrite every HTML page below the site directory in place."""
    _configure_logging(verbose)
    config = _load(config_path)

    try:
        report = process_site(config, site_dir, check=check)
    except FileNotFoundError as exc:
        console.print(f"[bold red]Site directory not found[/]: {exc}")
        raise typer.Exit(code=1) from exc

    _print_site_report(report, check)
    if report.failures:
        raise typer.Exit(code=1)


@app.command()
def page(
    input_path: Annotated[
        Path,
        typer.Argument(..., exists=True, dir_okay=False, help="Rendered HTML page to post-process."),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the result here instead of stdout."),
    ] = None,
    config_path: ConfigPathOption = ".",
    verbose: VerboseFlag = False,
) -> None:
    """Post-process a single page."""
    _configure_logging(verbose)
    config = _load(config_path)

    try:
        result = transform_page(input_path.read_bytes().decode("utf-8"), config)
    except FileNotFoundError as exc:
        console.print(f"[bold red]Missing local asset[/]: {exc.filename or exc}")
        raise typer.Exit(code=1) from exc
    except (OSError, ValueError) as exc:
        console.print(f"[bold red]Post-processing failed[/]: {exc}")
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(result.html, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(result.html.encode("utf-8"))
    console.print(f"[bold green]Written[/]: {_display_path(output)} ({_format_stats(result.stats)})")


def _print_site_report(report: SiteReport, check: bool) -> None:
    verb = "would rewrite" if check else "rewrote"
    console.print(
        "[bold green]Pages[/]: "
        f"scanned {report.scanned_files}, {verb} {len(report.rewritten)}, "
        f"unchanged {len(report.unchanged)}"
    )
    console.print(f"[bold green]Rules[/]: {_format_stats(report.stats)}")

    if check:
        for path in report.rewritten:
            console.print(f"[yellow]would change[/] {_display_path(path)}")

    for failure in report.failures:
        console.print(f"[bold red]ERROR[/] {_display_path(failure.path)} - {failure.message}")

    if report.failures:
        console.print(f"[bold red]Summary[/]: {report.failure_count} page(s) failed.")


def _format_stats(stats: TransformStats) -> str:
    return (
        f"{stats.images} image(s) ({stats.images_sized} sized, "
        f"{stats.gif_toggles} gif toggle(s), {stats.figures} figure(s)), "
        f"{stats.headings} heading(s), {stats.embeds_wrapped} embed(s)"
    )


def _display_path(path: Path) -> str:
    try:
        return path.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _load(path: str) -> Config:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
