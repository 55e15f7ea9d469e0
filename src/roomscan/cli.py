"""CLI entry point for the roomscan pipeline.

Usage:
    roomscan run                          # Run full pipeline
    roomscan run-step room_export -i '{...}'  # Run single step
    roomscan export room.json             # Import + export one captured room
    roomscan info                         # Show pipeline info
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from roomscan.core.logging import setup_logging

app = typer.Typer(name="roomscan", help="LiDAR room capture to metadata + floorplan export")
console = Console()

DEFAULT_CONFIG = Path("configs/pipeline.yaml")


@app.command()
def run(
    config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path"),
    log_level: str = typer.Option("INFO", help="Logging level"),
) -> None:
    """Run the full pipeline."""
    setup_logging(log_level)
    from roomscan.core.pipeline_runner import run_pipeline

    run_pipeline(config)


@app.command()
def run_step(
    step_name: str = typer.Argument(..., help="Step name (e.g. room_export)"),
    config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path"),
    input_json: str = typer.Option(None, "--input", "-i", help="Input as JSON string"),
) -> None:
    """Run a single pipeline step."""
    import json

    setup_logging()
    from roomscan.core.pipeline_runner import build_step, load_pipeline_config

    pipeline_cfg = load_pipeline_config(config)
    entry = next((s for s in pipeline_cfg.steps if s.name == step_name), None)
    if entry is None:
        console.print(f"[red]Step '{step_name}' not found in pipeline config[/red]")
        raise typer.Exit(1)

    step_instance = build_step(entry, pipeline_cfg.data_root)
    step_cls = type(step_instance)

    input_data = dict(entry.inputs)
    if input_json:
        input_data.update(json.loads(input_json))
    else:
        schema = step_cls.input_type.model_json_schema()
        missing = [f for f in schema.get("required", []) if f not in input_data]
        if missing:
            console.print(f"[yellow]Step '{step_name}' requires input fields: {missing}[/yellow]")
            console.print("[yellow]Use --input/-i with JSON string, e.g.:[/yellow]")
            console.print(f'  roomscan run-step {step_name} -i \'{{"field": "value"}}\'')
            raise typer.Exit(1)

    console.print(f"[green]Running step: {step_name}[/green]")
    step_input = step_cls.input_type(**input_data)
    output = step_instance.execute(step_input)
    console.print(f"[green]Done. Output:[/green] {output.model_dump_json(indent=2)}")


@app.command()
def export(
    room_path: Path = typer.Argument(..., help="Captured room JSON dump"),
    scan_id: Optional[str] = typer.Option(None, help="Scan identifier (default: new UUID)"),
    data_root: Path = typer.Option(Path("./data"), help="Root folder for scan artifacts"),
    config: Optional[Path] = typer.Option(None, help="Room export step config (YAML)"),
    log_level: str = typer.Option("INFO", help="Logging level"),
) -> None:
    """Import one captured room and write room.json + room.svg."""
    setup_logging(log_level)
    from roomscan.core.pipeline_runner import load_step_config
    from roomscan.steps.s00_import_room.config import ImportRoomConfig
    from roomscan.steps.s00_import_room.contracts import ImportRoomInput
    from roomscan.steps.s00_import_room.step import ImportRoomStep
    from roomscan.steps.s01_room_export.config import RoomExportConfig
    from roomscan.steps.s01_room_export.contracts import RoomExportInput
    from roomscan.steps.s01_room_export.step import RoomExportStep
    from roomscan.utils.io import ArtifactWriteError

    export_cfg = load_step_config(config, RoomExportConfig)
    import_step = ImportRoomStep(
        config=ImportRoomConfig(output_root=export_cfg.output_root), data_root=data_root
    )
    imported = import_step.execute(ImportRoomInput(room_path=room_path, scan_id=scan_id))

    export_step = RoomExportStep(config=export_cfg, data_root=data_root)
    try:
        result = export_step.execute(
            RoomExportInput(
                captured_room_path=imported.captured_room_path, scan_id=imported.scan_id
            )
        )
    except ArtifactWriteError as e:
        console.print(f"[red]{e.artifact} write failed:[/red] {e}")
        raise typer.Exit(2)

    dims = result.dimensions
    table = Table(title=f"Scan {imported.scan_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Length (m)", f"{dims.length:.2f}")
    table.add_row("Width (m)", f"{dims.width:.2f}")
    table.add_row("Height (m)", f"{dims.height:.2f}")
    table.add_row("Walls / Doors", f"{result.num_walls} / {result.num_doors}")
    table.add_row("Furniture", str(result.num_furniture))
    table.add_row("Metadata", str(result.metadata_path))
    table.add_row("Floorplan", str(result.floorplan_path))
    console.print(table)


@app.command()
def info(config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path")) -> None:
    """Show pipeline steps and their status."""
    from roomscan.core.pipeline_runner import load_pipeline_config

    pipeline_cfg = load_pipeline_config(config)
    table = Table(title=f"Pipeline: {pipeline_cfg.project_name}")
    table.add_column("#", style="dim")
    table.add_column("Step", style="cyan")
    table.add_column("Module", style="green")
    table.add_column("Enabled", style="yellow")
    table.add_column("Depends On", style="dim")

    for i, step in enumerate(pipeline_cfg.steps, 1):
        table.add_row(
            str(i),
            step.name,
            step.module,
            "Y" if step.enabled else "N",
            ", ".join(step.depends_on) if step.depends_on else "-",
        )
    console.print(table)


if __name__ == "__main__":
    app()
