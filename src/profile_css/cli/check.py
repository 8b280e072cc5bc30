from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from profile_css.cli.report import render_issues
from profile_css.config import BuildConfig
from profile_css.core.validate import validate
from profile_css.errors import SourceReadError
from profile_css.storage import FileSystemStorage

console = Console()


def check(
    path: Annotated[Path, typer.Argument(help="Stylesheet to audit, e.g. a published build.")],
) -> None:
    """Run the output audits against an existing stylesheet."""
    try:
        (document,) = FileSystemStorage().read_sources([str(path)])
    except SourceReadError as exc:
        console.print(str(exc), soft_wrap=True, markup=False, style="red")
        raise typer.Exit(1) from exc

    issues = validate(document.text, BuildConfig().rules)
    render_issues(console, issues)
    if any(issue.is_error for issue in issues):
        raise typer.Exit(1)
