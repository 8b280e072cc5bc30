import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from profile_css.cli.build import build
from profile_css.cli.check import check

app = typer.Typer(
    name="profile-css",
    help="profile-css CLI — bundle, minify and audit the profile stylesheet.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("build")(build)
app.command("check")(check)


@app.callback()
def configure_logging(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each pipeline stage.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main() -> None:
    app()
