"""The command-line interface for quire."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from quire.config import DataKeyCollisionPolicy, LogFormat, resolve_options
from quire.exceptions import QuireError
from quire.pipeline import render
from quire.utils import create_logger

from ._shared import ExitCode, exit_code_for, exit_with_error

_HELP = "Render a template from JSON, YAML and TOML data files."


def _write_output(output: str, destination: Path | None, console: Console) -> None:
    if destination is None:
        _ = console.file.write(output)
        console.file.flush()
        return

    destination.parent.mkdir(parents=True, exist_ok=True)
    _ = destination.write_text(output, encoding="utf-8")


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="quire",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _render(  # pyright: ignore[reportUnusedFunction]
        *,
        root: Annotated[
            Path | None,
            Parameter(name=["-r", "--root"], help="Root template file"),
        ] = None,
        partial: Annotated[
            list[Path] | None,
            Parameter(
                name=["-p", "--partial"],
                help="Partial template file, glob or directory (can be repeated)",
            ),
        ] = None,
        global_data: Annotated[
            list[str] | None,
            Parameter(
                name=["-g", "--global-data"],
                help="Global data file, glob or directory (can be repeated)",
            ),
        ] = None,
        data: Annotated[
            list[str] | None,
            Parameter(
                name=["-d", "--data"],
                help="Data file, glob or directory (can be repeated)",
            ),
        ] = None,
        data_key: Annotated[
            str | None,
            Parameter(name=["--data-key"], help="Context key for the data list"),
        ] = None,
        sort_data: Annotated[
            str | None,
            Parameter(
                name=["--sort-data"],
                help="Data order: filename, filename-desc, modified, modified-desc",
            ),
        ] = None,
        config: Annotated[
            Path | None,
            Parameter(name=["-c", "--config"], help="Path to config file"),
        ] = None,
        output: Annotated[
            Path | None,
            Parameter(name=["-o", "--output"], help="Write output to this file"),
        ] = None,
        on_data_key_collision: Annotated[
            DataKeyCollisionPolicy | None,
            Parameter(
                name=["--on-data-key-collision"],
                help="When global data defines the data key: error or overwrite",
            ),
        ] = None,
        strict_sort_order: Annotated[
            bool | None,
            Parameter(
                name=["--strict-sort-order"],
                help="Fail on an unrecognized sort order",
            ),
        ] = None,
        strict_undefined: Annotated[
            bool | None,
            Parameter(
                name=["--strict-undefined"],
                help="Fail on undefined template variables",
            ),
        ] = None,
        verbose: Annotated[
            bool,
            Parameter(name=["-v", "--verbose"], help="Enable debug logging"),
        ] = False,
        log_file: Annotated[
            str | None,
            Parameter(name=["--log-file"], help="Write logs to this file"),
        ] = None,
        log_format: Annotated[
            LogFormat | None,
            Parameter(name=["--log-format"], help="Log format: text or json"),
        ] = None,
    ) -> None:
        """Render a template with data.

        Global data files are merged into the top level of the template
        context. Data files are ordered and listed under the data key.

        Examples:
            quire -r page.tmpl -d posts/ -g site.yaml
            quire -r index.mst -p 'partials/*.mst' -d 'posts/*.json' -o out.html
            quire -c quire.toml --sort-data modified-desc

        Exit codes:
            0: Success
            1: Invalid configuration
            2: Data could not be assembled
            3: Template could not be loaded or rendered
            4: Output or log file could not be written
        """
        cli_values: dict[str, object] = {
            "root": root,
            "partials": partial,
            "global_data": global_data,
            "data": data,
            "data_key": data_key,
            "sort_data": sort_data,
            "output": output,
            "on_data_key_collision": on_data_key_collision,
            "strict_sort_order": strict_sort_order,
            "strict_undefined": strict_undefined,
            "logging": {
                "level": "debug" if verbose else None,
                "format": log_format,
                "file": log_file,
            },
        }

        try:
            options = resolve_options(cli_values, config)
            logger = create_logger(
                level=options.logging.level,
                log_format=options.logging.format.value,  # pyright: ignore[reportArgumentType]
                log_file=options.logging.file,
            )
            result = render(options, logger=logger)
            _write_output(result.output, options.output, console)
        except (QuireError, OSError) as e:
            exit_with_error(str(e), exit_code_for(e), console=error_console)

        if options.output is not None:
            logger.debug("Wrote output", path=str(options.output))

    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `quire` CLI."""
    app = create_app()
    app()


if __name__ == "__main__":
    app()
