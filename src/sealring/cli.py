"""
Command line interface for sealring.

Commands:
- draw: Export a drawing from a record file or a standard preset
- presets: List standard presets and materials
- history: List, show and redraw previously exported drawings

Usage:
    sealring draw --preset P-10 --part-no OR-P10-001 -o drawings
    sealring draw --record part.yaml --svg
    sealring history list
    sealring history redraw 1710460800000
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import click
import yaml

from .config import DrawingConfig, setup_logging
from .drawing_generator import export_drawing
from .drawing_number import generate_drawing_no
from .exceptions import SealRingError
from .history import DrawingHistory
from .parts import PartMetadata, PartRecord
from .presets import MATERIALS, PRESETS, apply_preset, get_preset

logger = logging.getLogger(__name__)


def load_record_file(path: Path) -> PartRecord:
    """
    Read a part record from a YAML or JSON file.

    The file uses the same keys as the drawing history (``partType``,
    ``partNo``, ``oRingDims``, ...).
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise click.BadParameter(f"Cannot read record file {path}: {e}") from e
    if not isinstance(data, dict):
        raise click.BadParameter(f"Record file {path} must contain a mapping")
    try:
        return PartRecord.from_dict(data)
    except (TypeError, ValueError) as e:
        raise click.BadParameter(f"Invalid record file {path}: {e}") from e


def _history(config: DrawingConfig) -> DrawingHistory:
    return DrawingHistory(config.resolved_history_path, config.history_limit)


def _export(record: PartRecord, config: DrawingConfig, output_dir: Path | None,
            svg: bool, save_history: bool) -> None:
    history = _history(config)
    if not record.metadata.drawing_no:
        drawing_no = generate_drawing_no(record.part_type, len(history) + 1)
        record = replace(record, metadata=replace(record.metadata, drawing_no=drawing_no))

    try:
        result = export_drawing(
            record,
            output_dir or Path(config.output_dir),
            config=config,
            history=history if save_history else None,
            write_svg=svg,
        )
    except SealRingError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    click.echo(f"PDF saved to: {result.pdf_path}")
    if result.svg_path is not None:
        click.echo(f"SVG saved to: {result.svg_path}")
    if save_history:
        click.echo(f"History id: {result.record.record_id}")


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="SEALRING_CONFIG",
    help="YAML settings file (or set SEALRING_CONFIG).",
)
@click.option("--log-level", default=None, help="Override the configured log level.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None):
    """sealring - O-ring and backup ring delivery drawings."""
    try:
        config = DrawingConfig.from_yaml(config_path) if config_path else DrawingConfig()
    except SealRingError as e:
        click.echo(f"Error loading config: {e}", err=True)
        raise SystemExit(1) from None

    setup_logging(log_level or config.log_level)
    ctx.obj = config


@cli.command()
@click.option(
    "--record", "record_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Part record file (YAML or JSON).",
)
@click.option("--preset", default=None, help="Standard preset code, e.g. P-10.")
@click.option("--part-no", default=None, help="Part number (overrides the record).")
@click.option("--drawing-no", default=None,
              help="Drawing number (default: generated, e.g. 20240315_OR_0001).")
@click.option("--customer", default=None, help="Customer code.")
@click.option("--material", default=None, help="Material grade.")
@click.option("--hardness", default=None, help="Hardness, e.g. Hs70.")
@click.option(
    "--output-dir", "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for exported files (default: configured output_dir).",
)
@click.option("--svg", is_flag=True, help="Also write the SVG sheet.")
@click.option("--no-history", is_flag=True, help="Do not record the drawing in the history.")
@click.pass_obj
def draw(
    config: DrawingConfig,
    record_file: Path | None,
    preset: str | None,
    part_no: str | None,
    drawing_no: str | None,
    customer: str | None,
    material: str | None,
    hardness: str | None,
    output_dir: Path | None,
    svg: bool,
    no_history: bool,
):
    """
    Export a drawing as <drawing number>.pdf.

    The record comes from --record, from --preset, or from both (the preset
    then replaces the record's dimensions). Options such as --part-no
    override the record's metadata.

    Example:
        sealring draw --preset BR-T1 --part-no BR-001 --material "NBR-90-1 (Type 1B)"
    """
    if record_file is None and preset is None:
        raise click.UsageError("Give a part record with --record and/or --preset.")

    if preset is not None:
        try:
            get_preset(preset)
        except KeyError:
            raise click.BadParameter(f"Unknown preset: {preset}", param_hint="--preset") from None

    if record_file is not None:
        record = load_record_file(record_file)
    else:
        record = PartRecord(get_preset(preset).part_type, PartMetadata())

    if preset is not None:
        record = apply_preset(record, preset)

    overrides = {
        "part_no": part_no,
        "drawing_no": drawing_no,
        "customer_code": customer,
        "material": material,
        "hardness": hardness,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        record = replace(record, metadata=replace(record.metadata, **overrides))

    _export(record, config, output_dir, svg, save_history=not no_history)


@cli.command()
def presets():
    """List standard dimension presets and material grades."""
    click.echo("Presets:")
    for preset in PRESETS:
        click.echo(f"  {preset.code:<6} {preset.part_type.value:<12} {preset.description}")
    click.echo("\nMaterials:")
    for material in MATERIALS:
        click.echo(f"  - {material}")


@cli.group()
def history():
    """Browse and redraw exported drawings."""
    pass


@history.command("list")
@click.pass_obj
def history_list(config: DrawingConfig):
    """List history entries, newest first."""
    entries = _history(config).entries()
    if not entries:
        click.echo("History is empty.")
        return
    for record in entries:
        meta = record.metadata
        click.echo(
            f"{record.record_id:<14} {meta.drawing_no:<18} {record.part_type.value:<12} "
            f"{meta.part_no:<16} {meta.created_date}"
        )


def _load_entry(config: DrawingConfig, record_id: str) -> PartRecord:
    try:
        return _history(config).get(record_id)
    except SealRingError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None


@history.command("show")
@click.argument("record_id")
@click.pass_obj
def history_show(config: DrawingConfig, record_id: str):
    """Print one history entry as YAML."""
    record = _load_entry(config, record_id)
    click.echo(yaml.dump(record.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True))


@history.command("redraw")
@click.argument("record_id")
@click.option(
    "--output-dir", "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for exported files (default: configured output_dir).",
)
@click.option("--svg", is_flag=True, help="Also write the SVG sheet.")
@click.option("--no-history", is_flag=True, help="Do not record the drawing again.")
@click.pass_obj
def history_redraw(config: DrawingConfig, record_id: str, output_dir: Path | None,
                   svg: bool, no_history: bool):
    """Export a history entry again with its stored drawing number."""
    record = _load_entry(config, record_id)
    logger.info("Redrawing history entry %s (%s)", record_id, record.metadata.drawing_no)
    _export(record, config, output_dir, svg, save_history=not no_history)


if __name__ == "__main__":
    cli()
