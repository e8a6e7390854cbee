from __future__ import annotations

"""Command-line interface for config-file.

Examples
--------
$ config-file show configs/app.toml
$ config-file show --output yaml configs/app.json
$ config-file classify a.yml b.TOML c.ini
$ config-file formats
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from pydantic import ValidationError

from config_file.classify import classify
from config_file.enums import OutputFormat
from config_file.errors import ConfigFileError

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)


@dataclass
class CliOptions:
    """Options given to the app callback, handed to commands via ``ctx.obj``."""

    settings: Optional[Path] = None
    log_level: Optional[str] = None


def _load_cli_cfg(opts: CliOptions, formats: Optional[str]):
    """Build the CLI settings: defaults, then ``--settings`` file, then flags."""
    from config_file.loader import load
    from config_file.schema import CliCfg, LoaderCfg, LoggingCfg
    from config_file.utils.logging_utils import apply_logging_cfg

    cfg = CliCfg() if opts.settings is None else load(opts.settings, CliCfg)
    if formats is not None:
        cfg.loader = LoaderCfg(formats=formats)
    if opts.log_level is not None:
        cfg.logging = LoggingCfg(level=opts.log_level, suppress=cfg.logging.suppress)
    apply_logging_cfg(cfg.logging)
    return cfg


def _render(data: Any, output: OutputFormat) -> None:
    from rich.console import Console

    if output is OutputFormat.JSON:
        Console().print_json(json.dumps(data, default=str))
        return

    if output is OutputFormat.YAML:
        from config_file.utils.lazy import is_available, yaml

        if not is_available("yaml"):
            typer.secho("Error: --output yaml needs PyYAML (pip install config-file[yaml])", fg=typer.colors.RED, err=True)
            raise typer.Exit(1)
        typer.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)
        return

    import toml

    if not isinstance(data, dict):
        typer.secho("Error: only a table can be printed as TOML", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    typer.echo(toml.dumps(data), nl=False)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    settings: Optional[Path] = typer.Option(None, help="Settings file for the CLI itself (any supported format)."),
    log_level: Optional[str] = typer.Option(None, help="debug | info | warning | error | critical"),
):  # noqa: D401
    """config-file – load configuration files by extension."""
    ctx.obj = CliOptions(settings=settings, log_level=log_level)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command()
def show(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Configuration file to decode."),
    output: OutputFormat = typer.Option(OutputFormat.JSON, help="Print as json, yaml or toml.", case_sensitive=False),
    formats: Optional[str] = typer.Option(None, help="Comma separated formats to enable, e.g. 'toml,json'."),
):
    """Decode a file and print it."""
    from config_file.loader import ConfigLoader

    opts = ctx.obj if isinstance(ctx.obj, CliOptions) else CliOptions()
    try:
        cfg = _load_cli_cfg(opts, formats)
        loader = ConfigLoader.from_cfg(cfg.loader)
        logger.info("Enabled formats: %s", ", ".join(f.value for f in loader.formats) or "none")
        data = loader.load(path, Dict[str, Any])
    except ConfigFileError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except ValidationError as e:
        typer.secho(f"Invalid settings: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2)

    _render(data, output)


@app.command(name="classify")
def classify_cmd(
    paths: List[Path] = typer.Argument(..., help="Paths to classify; the files are not opened."),
):
    """Print the format each path would be decoded with."""
    for path in paths:
        typer.echo(f"{path}\t{classify(path).value}")


@app.command()
def formats():
    """List registered formats and whether their library is installed."""
    from rich.console import Console
    from rich.table import Table

    from config_file.classify import EXTENSIONS
    from config_file.decoders import DEFAULT_FORMAT, entry_for, is_format_available, registered_formats

    table = Table(title="Configuration formats")
    for header in ("format", "extensions", "requires", "available"):
        table.add_column(header)

    for fmt in registered_formats():
        exts = ", ".join(f".{ext}" for ext, tag in EXTENSIONS.items() if tag is fmt)
        name = f"{fmt.value} (default)" if fmt is DEFAULT_FORMAT else fmt.value
        table.add_row(
            name,
            exts,
            entry_for(fmt).distribution or "-",
            "yes" if is_format_available(fmt) else "no",
        )

    Console().print(table)


def main():
    app()


if __name__ == "__main__":
    main()
