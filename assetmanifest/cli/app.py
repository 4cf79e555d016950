"""Main Typer application.

Entry point: ``assetmanifest`` (configured via pyproject.toml project.scripts).

Commands: generate, show.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from assetmanifest import __version__
from assetmanifest.config import settings
from assetmanifest.core.collector import CollectionError
from assetmanifest.core.state import ManifestState
from assetmanifest.host.local import LocalDiskBuild
from assetmanifest.host.memory import InMemoryBuild
from assetmanifest.host.stats import load_build_output
from assetmanifest.models.config import PipelineConfig
from assetmanifest.plugin import ManifestPlugin

console = Console()

app = typer.Typer(
    name="assetmanifest",
    help="assetmanifest: aggregate build outputs into an asset manifest.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _parse_seed(seed: str | None) -> Any:
    if seed is None:
        return None
    try:
        return json.loads(seed)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Seed must be JSON: {exc}") from exc


def _print_manifest(manifest: Any, title: str) -> None:
    if not isinstance(manifest, dict):
        console.print_json(json.dumps(manifest))
        return

    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Path", style="green")
    for name, path in manifest.items():
        table.add_row(str(name), path if isinstance(path, str) else json.dumps(path))
    console.print(table)


@app.command(name="generate", help="Generate a manifest from build stats files.")
def generate_cmd(
    stats: list[Path] = typer.Argument(
        ..., help="Build stats JSON files, applied in order to one shared manifest."
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Override the build output directory."
    ),
    base_path: str = typer.Option("", "--base-path", help="Prefix for manifest keys."),
    public_path: Optional[str] = typer.Option(
        None, "--public-path", help="Prefix for manifest values."
    ),
    file_name: str = typer.Option(
        settings.default_file_name, "--file-name", "-f", help="Manifest file name."
    ),
    seed: Optional[str] = typer.Option(None, "--seed", help="JSON seed value."),
    write: bool = typer.Option(
        True, "--write/--no-write", help="Write the manifest to the output directory."
    ),
) -> None:
    """Feed each stats file through one plugin and print the result."""
    config = PipelineConfig(
        base_path=base_path,
        public_path=public_path,
        file_name=file_name,
        seed=_parse_seed(seed),
    )
    plugin = ManifestPlugin(config, state=ManifestState(seed=config.seed))

    for stats_path in stats:
        try:
            output = load_build_output(stats_path)
        except CollectionError as exc:
            console.print(f"[bold red]Cannot load build stats:[/bold red] {exc}")
            raise typer.Exit(code=1)

        if output_dir is not None:
            output = output.model_copy(update={"output_path": str(output_dir)})

        build: LocalDiskBuild | InMemoryBuild
        if write:
            build = LocalDiskBuild(output.output_path or None)
        else:
            build = InMemoryBuild(output.output_path)

        artifact = plugin.on_build_complete(output, build)
        if artifact is None:
            for error in build.errors:
                console.print(f"[bold red]Manifest failed:[/bold red] {error}")
            raise typer.Exit(code=1)

    artifact = plugin.last_artifact
    _print_manifest(plugin.manifest, title=f"Manifest ({len(plugin.state)} assets)")
    if write and artifact is not None:
        console.print(f"[dim]Wrote {artifact.target_path} ({artifact.size_bytes} bytes)[/dim]")


@app.command(name="show", help="Print an existing manifest.")
def show_cmd(
    manifest_path: Path = typer.Argument(..., help="Path to a JSON manifest."),
) -> None:
    """Print a JSON manifest as a table."""
    if not manifest_path.exists():
        console.print(f"[bold red]Manifest not found:[/bold red] {manifest_path}")
        raise typer.Exit(code=1)
    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        console.print(f"[bold red]Invalid manifest JSON:[/bold red] {exc}")
        raise typer.Exit(code=1)
    _print_manifest(manifest, title=str(manifest_path))


@app.command(name="version", help="Show the installed version.")
def version_cmd() -> None:
    """Print the package version."""
    console.print(f"assetmanifest {__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
