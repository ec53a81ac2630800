"""Main CLI application module."""

import typer

from user_crud.cli.interactive import shell
from user_crud.cli.user_commands import add_user, delete_user, edit_user, list_users
from user_crud.runtime.app_startup import configure_logging
from user_crud.runtime.config.config_data import ConfigData
from user_crud.runtime.context import with_context

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _log_level(value: str | None) -> str | None:
    if value is None:
        return value
    if value.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}")
    return value.upper()


app = typer.Typer(
    help="👥 User Directory - manage the users of a remote REST resource",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    base_url: str | None = typer.Option(
        None, "--base-url", help="URL of the users collection (overrides config.yaml)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        callback=_log_level,
        help="Logging level (TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL).",
    ),
) -> None:
    """Configure the endpoint and logging for every command."""
    if base_url:
        override = ConfigData()
        override.api.base_url = base_url
        ctx.with_resource(with_context(override))
    configure_logging(log_level)


app.command("list")(list_users)
app.command("add")(add_user)
app.command("edit")(edit_user)
app.command("delete")(delete_user)
app.command("shell")(shell)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
