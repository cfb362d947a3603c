"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import click
import typer

from finsim.cli.commands.generate import generate
from finsim.utils.logging import get_logger

app = typer.Typer(help="Synthetic financial return series generator", add_completion=False)


app.command()(generate)


log = get_logger(__name__, component="cli")


def main() -> None:
    # Non-standalone so interrupts and crashes reach the handlers below;
    # configuration errors come back as the command's typer.Exit code.
    try:
        code = app(standalone_mode=False)
    except click.exceptions.Abort:
        log.info("Interrupted")
        sys.exit(130)
    except click.ClickException as exc:
        exc.show()
        sys.exit(exc.exit_code)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)
    sys.exit(code or 0)


if __name__ == "__main__":
    main()
