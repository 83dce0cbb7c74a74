"""CLI interface for roofwind."""

import json
import logging
from pathlib import Path

import click
import pandas as pd

from roofwind import __version__
from roofwind.asce7 import calculate_kz, compute_qz
from roofwind.engine import calculate_wind_pressure
from roofwind.schemas import BuildingOpening, WindPressureRequest
from roofwind.settings import get_settings
from roofwind.tables import (
    create_results_dataframe,
    create_summary_table,
    create_zone_table,
    export_to_csv,
    export_to_excel,
)
from roofwind.validation import grade_accuracy, validate_calculation


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log intermediate calculation values")
def main(verbose: bool):
    """Roofwind - ASCE 7 wind pressure calculator for low-slope roofs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--height", type=float, required=True, help="Mean roof height in feet")
@click.option("--length", type=float, required=True, help="Building length in feet")
@click.option("--width", type=float, required=True, help="Building width in feet")
@click.option("--wind-speed", type=float, help="Basic wind speed in mph")
@click.option("--exposure", type=str, default="C", help="Exposure category (B, C, D)")
@click.option(
    "--method",
    type=click.Choice(["component_cladding", "main_force", "mwfrs"], case_sensitive=False),
    default="component_cladding",
    help="Pressure coefficient method",
)
@click.option("--component-length", type=float, default=10.0, help="Component length in feet")
@click.option("--component-width", type=float, default=1.0, help="Component width in feet")
@click.option(
    "--enclosure",
    type=click.Choice(["enclosed", "partially_enclosed", "open"], case_sensitive=False),
    default="enclosed",
    help="Declared enclosure, used when no opening schedule is given",
)
@click.option(
    "--openings",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with a list of openings",
)
@click.option("--wall-area", type=float, help="Gross wall area in sq ft (default 2(L+W)h)")
@click.option(
    "--consider-failures/--ignore-failures",
    default=True,
    help="Treat breakable windward glazing as open",
)
@click.option(
    "--worst-case/--no-worst-case",
    default=True,
    help="Combine with both internal pressure signs",
)
@click.option("--kzt", type=float, default=1.0, help="Topographic factor Kzt")
@click.option("--kd", type=float, default=1.0, help="Directionality factor Kd")
@click.option("--project-name", type=str, help="Project name")
@click.option("--zones", is_flag=True, help="Print a zone pressure table instead of JSON")
@click.option("--output", type=click.Path(), help="Output JSON file path")
def calculate(
    height: float,
    length: float,
    width: float,
    wind_speed: float | None,
    exposure: str,
    method: str,
    component_length: float,
    component_width: float,
    enclosure: str,
    openings: str | None,
    wall_area: float | None,
    consider_failures: bool,
    worst_case: bool,
    kzt: float,
    kd: float,
    project_name: str | None,
    zones: bool,
    output: str | None,
):
    """Calculate zoned design wind pressures for a roof."""
    settings = get_settings()
    opening_list = []
    try:
        if openings:
            raw = json.loads(Path(openings).read_text())
            opening_list = [BuildingOpening(**item) for item in raw]

        request = WindPressureRequest(
            building_height=height,
            building_length=length,
            building_width=width,
            wind_speed_mph=(
                settings.default_wind_speed_mph if wind_speed is None else wind_speed
            ),
            exposure_category=exposure,
            asce_edition=settings.default_asce_edition,
            calculation_method=method,
            component_length=component_length,
            component_width=component_width,
            building_classification=enclosure.lower(),
            openings=opening_list,
            wall_area=wall_area,
            consider_failures=consider_failures,
            use_worst_case=worst_case,
            topographic_factor=kzt,
            directionality_factor=kd,
            project_name=project_name,
        )
        result = calculate_wind_pressure(request)
    except ValueError as e:
        raise click.ClickException(str(e))

    if zones:
        click.echo(create_zone_table(result).to_string(index=False))
        click.echo(f"\nControlling: {result.controlling_zone} at {result.max_pressure:.2f} psf")
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}")
        return

    result_dict = result.model_dump(mode="json")

    if output:
        output_path = Path(output)
        output_path.write_text(json.dumps(result_dict, indent=2))
        click.echo(f"Results saved to {output}")
    else:
        click.echo(json.dumps(result_dict, indent=2))


@main.command()
@click.option("--height", type=float, required=True, help="Height above ground in feet")
@click.option("--exposure", type=str, default="C", help="Exposure category (B, C, D)")
@click.option("--wind-speed", type=float, help="Also print qz for this wind speed (mph)")
def kz(height: float, exposure: str, wind_speed: float | None):
    """Print the velocity pressure exposure coefficient Kz."""
    try:
        result = calculate_kz(height, exposure)
        click.echo(result.formula)
        if wind_speed is not None:
            qz = compute_qz(wind_speed, result.kz)
            click.echo(f"qz = {qz:.2f} psf")
    except ValueError as e:
        raise click.ClickException(str(e))
    for warning in result.warnings:
        click.echo(f"WARNING: {warning}")


@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    type=click.Path(),
    required=True,
    help="Output file (.csv or .xlsx)",
)
@click.option("--summary", is_flag=True, help="Print a summary table of the batch")
def batch(input_file: str, output: str, summary: bool):
    """Run one calculation per row of a CSV file.

    Columns are WindPressureRequest field names (building_height,
    building_length, building_width, wind_speed_mph, exposure_category, ...).
    """
    settings = get_settings()
    frame = pd.read_csv(input_file)
    results = []
    for index, row in frame.iterrows():
        # numpy scalars to plain Python values for pydantic
        fields = {k: v.item() if hasattr(v, "item") else v for k, v in row.dropna().items()}
        fields.setdefault("wind_speed_mph", settings.default_wind_speed_mph)
        fields.setdefault("asce_edition", settings.default_asce_edition)
        try:
            results.append(calculate_wind_pressure(WindPressureRequest(**fields)))
        except ValueError as e:
            raise click.ClickException(f"Row {index + 1}: {e}")

    df = create_results_dataframe(results)
    if output.lower().endswith(".xlsx"):
        export_to_excel(df, output)
    else:
        export_to_csv(df, output)
    click.echo(f"{len(results)} calculations saved to {output}")

    if summary:
        click.echo(create_summary_table(df).to_string(index=False))


@main.command()
@click.argument("calculated", type=float)
@click.argument("expected", type=float)
@click.option("--tolerance", type=float, help="Relative tolerance (default from settings)")
def check(calculated: float, expected: float, tolerance: float | None):
    """Compare a calculated value against a reference value."""
    if tolerance is None:
        tolerance = get_settings().validation_tolerance
    try:
        result = validate_calculation(calculated, expected, tolerance=tolerance)
    except ValueError as e:
        raise click.ClickException(str(e))

    click.echo(result.message)
    click.echo(f"Grade: {grade_accuracy(result.percent_difference).value}")
    if not result.is_valid:
        raise SystemExit(1)


@main.command()
@click.option("--host", type=str, help="Bind address (default from settings)")
@click.option("--port", type=int, help="Port (default from settings)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str | None, port: int | None, reload: bool):
    """Start the FastAPI server (JSON API)."""
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    click.echo(f"Starting Roofwind server on http://{host}:{port}")
    click.echo(f"  JSON API:   http://{host}:{port}/api/")
    uvicorn.run("app.application:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
