"""Command-line entry points for inspecting a ReactPush storage root.

Every command is read-only with respect to the storage root.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from reactpush.config import ConfigError, ReactPushConfig, dump_example_config, load_config
from reactpush.locator import BundleLocator, ResolutionStatus
from reactpush.util.logging import configure_logging
from reactpush.util.paths import configured_storage_root

app = typer.Typer(add_completion=False, help="ReactPush bundle locator CLI")


def _load(config_path: Optional[Path]) -> ReactPushConfig:
    try:
        return load_config(config_path)
    except ConfigError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _setup(config_path: Optional[Path], root: Optional[Path]) -> tuple[ReactPushConfig, BundleLocator]:
    cfg = _load(config_path)
    logger = configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path, stream=sys.stderr)
    storage_root = configured_storage_root(cfg, root)
    logger.debug("Using storage root %s", storage_root)
    return cfg, BundleLocator(storage_root)


@app.command()
def resolve(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a YAML/TOML/JSON config file"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Storage root (overrides the configured one)"),
    default: Optional[str] = typer.Option(None, "--default", "-d", help="Fallback bundle (default from config)"),
) -> None:
    """Print the bundle path the host would load."""

    cfg, locator = _setup(config_path, root)
    typer.echo(locator.resolve(default or cfg.locator.default_bundle))


@app.command()
def status(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a YAML/TOML/JSON config file"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Storage root (overrides the configured one)"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of text"),
) -> None:
    """Report what the marker file points at; exits 1 unless a bundle is present."""

    _, locator = _setup(config_path, root)
    result = locator.inspect()

    payload = {
        **result.to_dict(),
        "marker_file": locator.marker_file,
        "bundle_directory": locator.bundle_directory,
    }
    if as_json:
        typer.echo(json.dumps(payload, indent=2))
    else:
        for key, value in payload.items():
            if value is not None:
                typer.echo(f"{key}: {value}")

    if result.status is not ResolutionStatus.PRESENT:
        raise typer.Exit(code=1)


@app.command()
def paths(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a YAML/TOML/JSON config file"),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Storage root (overrides the configured one)"),
) -> None:
    """Print the marker file and bundle directory locations."""

    _, locator = _setup(config_path, root)
    typer.echo(f"marker_file: {locator.marker_file}")
    typer.echo(f"bundle_directory: {locator.bundle_directory}")


@app.command("dump-config")
def dump_config(dest: Path = typer.Argument(..., help="Destination (.yaml, .yml or .json)")) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
