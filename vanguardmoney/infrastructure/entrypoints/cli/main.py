from typing import get_args

import typer

from vanguardmoney import __version__
from vanguardmoney.infrastructure.config.loggers import configure_loggers
from vanguardmoney.infrastructure.config.settings.app import app_settings
from vanguardmoney.infrastructure.entrypoints.cli.commands.db import app as db_app
from vanguardmoney.infrastructure.entrypoints.cli.commands.users import app as users_app
from vanguardmoney.infrastructure.types import LogHandler
from vanguardmoney.infrastructure.types import LogLevel

app = typer.Typer(help="Vanguard Money administration commands.")
app.add_typer(users_app, name="users", help="Manage user accounts.")
app.add_typer(db_app, name="db", help="Manage the database.")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Vanguard Money Version: {__version__}")
        raise typer.Exit()


def log_level_callback(value: str) -> str:
    if value not in get_args(LogLevel):
        raise typer.BadParameter(f"must be one of {', '.join(get_args(LogLevel))}")
    return value


def log_handlers_callback(values: list[str]) -> list[str]:
    for value in values:
        if value not in get_args(LogHandler):
            raise typer.BadParameter(f"'{value}' must be one of {', '.join(get_args(LogHandler))}")
    return values


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option(
        app_settings.LOG_LEVEL_CLI,
        "--log-level",
        help="The log level of the application logger.",
        callback=log_level_callback,
    ),
    log_handlers: list[str] = typer.Option(
        app_settings.LOG_HANDLERS_CLI,
        "--log-handler",
        help="The log handler(s) to use, repeat the option for several.",
        callback=log_handlers_callback,
    ),
) -> None:
    configure_loggers(level=log_level, handlers=log_handlers)  # type: ignore[arg-type]


if __name__ == "__main__":  # pragma: no cover
    app()
