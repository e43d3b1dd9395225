import logging
import sys
from typing import Annotated

import typer

from bodyfile.cli.check import check
from bodyfile.cli.collect import collect
from bodyfile.cli.timeline import timeline
from bodyfile.cli.watch import watch
from bodyfile.config import load_settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    name="bodyfile",
    help="bodyfile CLI: build, check and sort TSK 3.x body files.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Log progress (-v) or debug output (-vv).")
    ] = 0,
) -> None:
    """Configure logging before any command runs."""
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    else:
        level = load_settings().log_level
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr, force=True)


app.command("collect")(collect)
app.command("check")(check)
app.command("timeline")(timeline)
app.command("watch")(watch)


def main() -> None:
    app()
