#!/usr/bin/env python3
# citybars/cli.py
from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

import click

from citybars import config
from citybars.chartspec import ExplorerSpec, get_default_spec
from citybars.data import DatasetError, aggregate_cities, load_groups

logger = logging.getLogger("citybars")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_spec(spec_path: Path | None, width: int | None, height: int | None) -> ExplorerSpec:
    if spec_path is None:
        return get_default_spec(width, height)
    spec = ExplorerSpec.from_json(filepath=str(spec_path))
    if width or height:
        spec = replace(
            spec,
            window_width=width or spec.window_width,
            window_height=height or spec.window_height,
        )
    return spec


@click.command()
@click.argument("dataset", type=click.Path(path_type=Path))
@click.option("--group", default=config.CITY_GROUP, show_default=True, help="Label of the group holding city names.")
@click.option("--width", type=int, help=f"Window width in px [default: {config.WINDOW_WIDTH}].")
@click.option("--height", type=int, help=f"Window height in px [default: {config.WINDOW_HEIGHT}].")
@click.option("--spec", "spec_path", type=click.Path(path_type=Path, exists=True), help="ExplorerSpec JSON file.")
@click.option("--filter", "pattern", default="", help="Initial filter pattern.")
@click.option("--offset", type=float, default=0.0, show_default=True, help="Initial viewport offset in context px.")
@click.option("--export", "export_base", type=click.Path(path_type=Path), help="Write BASE.png and BASE.svg instead of opening a window.")
@click.option("--summary", is_flag=True, help="Print the aggregated city counts as JSON and exit.")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging.")
def main(dataset: Path, group: str, width: int | None, height: int | None, spec_path: Path | None,
         pattern: str, offset: float, export_base: Path | None, summary: bool, verbose: bool):
    """Explore city frequencies in DATASET (.json groups or .csv/.tsv columns)."""
    _setup_logging(verbose)

    try:
        cities = aggregate_cities(load_groups(dataset), group)
    except DatasetError as e:
        logger.error(f"Could not load dataset: {e}")
        raise click.ClickException(str(e)) from e

    if summary:
        click.echo(json.dumps({c.key: c.value for c in cities}, indent=2))
        return

    try:
        spec = _load_spec(spec_path, width, height)
    except (ValueError, TypeError) as e:
        raise click.ClickException(f"Invalid layout: {e}") from e

    if export_base is not None:
        import matplotlib
        matplotlib.use("Agg")

    from citybars.app import CityFrequencyExplorer

    explorer = CityFrequencyExplorer(cities, spec)
    if offset:
        explorer.scroll_to(offset)
    if pattern:
        explorer.text_box.set_val(pattern)

    if export_base is not None:
        export_base.parent.mkdir(parents=True, exist_ok=True)
        png, svg = explorer.save(str(export_base))
        click.echo(f"✅ {png}")
        click.echo(f"✅ {svg}")
        explorer.close()
        return

    explorer.show()


if __name__ == "__main__":
    main()
