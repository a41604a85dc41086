"""Command-line interface for extramacros.

Responsibilities:
- Expose the `ReadFromFile` macro to shells and external-tool templates.
- Convert CLI arguments into `MacroConfig` and print expansion results.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import CommandFailureReporter, exit_with_command_error
from .config import ConfigLoader, MacroConfig
from .errors import CommandStageError
from .macros import ReadFromFileMacro
from .normalizer import FileTextNormalizer
from .parsing import parse_comment_prefixes
from .telemetry.logger import MacroLogger

app = typer.Typer(
    name="extramacros",
    no_args_is_help=True,
    help="extramacros CLI.",
)


def _load_yaml_config(config_path: Path | None) -> MacroConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify the file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    base_dir: Path | None,
    comment_prefixes: list[str] | None,
    confine_to_base_dir: bool | None,
) -> MacroConfig:
    """Resolve effective config: CLI options over YAML file, YAML over environment."""

    loaded_config = _load_yaml_config(config_file)
    if loaded_config is None:
        try:
            loaded_config = ConfigLoader.from_env()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix or unset the `EXTRAMACROS_*` variables.",
            ) from exc

    overrides: dict[str, object] = {}
    if base_dir is not None:
        overrides["base_dir"] = base_dir
    parsed_prefixes = parse_comment_prefixes(comment_prefixes)
    if parsed_prefixes is not None:
        overrides["comment_prefixes"] = parsed_prefixes
    if confine_to_base_dir is not None:
        overrides["confine_to_base_dir"] = confine_to_base_dir
    return replace(loaded_config, **overrides)


@app.command("read-from-file")
def read_from_file_command(
    path: Annotated[
        str | None,
        typer.Argument(help="File to read; relative paths resolve against the base directory."),
    ] = None,
    base_dir: Annotated[
        Path | None,
        typer.Option("--base-dir", help="Base directory for relative paths."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file."),
    ] = None,
    comment_prefix: Annotated[
        list[str] | None,
        typer.Option(
            "--comment-prefix",
            help="Comment line prefix; repeat to accept several (default: # and //).",
        ),
    ] = None,
    confine_to_base_dir: Annotated[
        bool | None,
        typer.Option(
            "--confine-to-base-dir/--no-confine-to-base-dir",
            help="Reject relative paths that escape the base directory.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log macro events to stderr."),
    ] = False,
) -> None:
    """Print the file content as one normalized line."""

    reporter = CommandFailureReporter()
    try:
        config = _resolve_command_config(
            config_file=config_file,
            base_dir=base_dir,
            comment_prefixes=comment_prefix,
            confine_to_base_dir=confine_to_base_dir,
        )
        macro = ReadFromFileMacro(
            reporter=reporter,
            normalizer=FileTextNormalizer(config),
            base_dir=config.base_dir,
            logger=MacroLogger() if verbose else None,
        )
    except Exception as exc:
        exit_with_command_error("read-from-file", exc)

    value = macro.expand(path)
    if reporter.last_error is not None:
        exit_with_command_error("read-from-file", reporter.last_error)
    if value is not None:
        typer.echo(value)


@app.command("describe")
def describe_command() -> None:
    """Print the macros this package provides."""

    typer.echo(f"{ReadFromFileMacro.name}: {ReadFromFileMacro.description}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
