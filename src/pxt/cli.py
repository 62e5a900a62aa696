"""Command-line entry point: attach the TUI to a proxy session."""

from pathlib import Path

import typer
from pydantic import ValidationError

from pxt.app import ProxyApp
from pxt.config import CONFIG_PATH, ConfigError, Settings, load_config
from pxt.logs import configure_logging
from pxt.models import ExitReason

app = typer.Typer(
    help="Terminal front-end for a proxy session",
    no_args_is_help=True,
)

# Module-level defaults for Typer options
_SESSION_OPTION = typer.Option(None, "--session", "-s", help="Session name to attach to")
_LOG_LEVEL_OPTION = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
_LOG_FILE_OPTION = typer.Option(None, "--log-file", help="Where to write the log")
_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to config.json")


def resolve_settings(
    config: Path | None,
    session: str | None = None,
    log_level: str | None = None,
    log_file: Path | None = None,
) -> Settings:
    """Load the config file and apply command-line overrides on top of it.

    Raises ConfigError if either the file or the overrides are invalid.
    """
    settings = load_config(config)
    overrides = {
        key: value
        for key, value in {"session": session, "log_level": log_level, "log_file": log_file}.items()
        if value is not None
    }
    if not overrides:
        return settings
    try:
        return Settings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as exc:
        raise ConfigError(f"Invalid option: {exc}") from exc


@app.command()
def attach(
    session: str | None = _SESSION_OPTION,
    log_level: str | None = _LOG_LEVEL_OPTION,
    log_file: Path | None = _LOG_FILE_OPTION,
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Open the TUI for a proxy session."""
    try:
        settings = resolve_settings(config, session, log_level, log_file)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    log = configure_logging(settings.log_level, settings.log_file)
    log.info("attaching to session %s", settings.session)

    result = ProxyApp(settings, persist_theme=True, config_path=config).run()
    if result is ExitReason.DETACH:
        log.info("detached from session %s", settings.session)
        typer.echo(f"detached from {settings.session}")


@app.command("config-path")
def config_path() -> None:
    """Print where pxt reads its configuration from."""
    typer.echo(str(CONFIG_PATH))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
