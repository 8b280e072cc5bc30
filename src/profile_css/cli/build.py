from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from profile_css.cli.report import render_report
from profile_css.config import BuildConfig
from profile_css.core.pipeline import run_build
from profile_css.engine import CssutilsMinifier
from profile_css.errors import ProfileCssError
from profile_css.storage import FileSystemStorage

console = Console()


def build(
    root: Annotated[
        Path,
        typer.Option(envvar="PROFILE_CSS_ROOT", help="Project directory holding css/ and dist/."),
    ] = Path("."),
) -> None:
    """Bundle, minify and validate the profile stylesheet."""
    config = BuildConfig.for_root(root)
    try:
        report = run_build(config, FileSystemStorage(config.root), CssutilsMinifier())
    except ProfileCssError as exc:
        console.print(str(exc), soft_wrap=True, markup=False, style="red")
        raise typer.Exit(1) from exc

    render_report(console, report)
    if report.has_errors:
        raise typer.Exit(1)
