"""Pandas-based data tables for roofwind results."""

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd

from roofwind.engine import WindPressureResult

_ZONE_COLUMNS = [
    "zone",
    "name",
    "gcp",
    "effective_area",
    "external_pressure",
    "net_positive",
    "net_negative",
    "controlling",
    "is_zone1_prime",
    "source",
]


def result_row(result: WindPressureResult) -> dict[str, Any]:
    """Flatten one calculation into a single table row."""
    row: dict[str, Any] = {
        "project_name": result.project_name,
        "exposure_category": result.exposure_category.value,
        "wind_speed_mph": result.wind_speed_mph,
        "mean_roof_height": result.kz.height_used,
        "kz": round(result.kz.kz, 4),
        "qz_psf": round(result.velocity_pressure, 2),
        "enclosure": result.enclosure.type.value,
        "gcpi": result.enclosure.gcpi_positive,
        "zone1_prime_required": result.zone1_prime.is_required,
        "controlling_zone": result.controlling_zone,
        "max_pressure_psf": round(result.max_pressure, 2),
        "pe_ready": result.pe_ready,
        "warning_count": len(result.warnings),
    }
    for zone_pressure in result.zone_pressures:
        row[f"{zone_pressure.name}_psf"] = round(zone_pressure.controlling, 2)
    return row


def create_results_dataframe(results: Iterable[WindPressureResult]) -> pd.DataFrame:
    """
    Create a pandas DataFrame with one row per calculation.

    Args:
        results: Calculation results, e.g. from a batch run

    Returns:
        DataFrame with calculation results
    """
    rows = [result_row(result) for result in results]
    if not rows:
        return pd.DataFrame()
    return pd.DataFrame(rows)


def create_zone_table(result: WindPressureResult) -> pd.DataFrame:
    """
    Create a per-zone pressure table for one calculation.

    Args:
        result: Calculation result

    Returns:
        DataFrame with one row per roof zone, pressures in psf
    """
    records = [zp.model_dump(mode="json") for zp in result.zone_pressures]
    df = pd.DataFrame(records, columns=_ZONE_COLUMNS)
    for column in ("external_pressure", "net_positive", "net_negative", "controlling"):
        df[column] = df[column].round(2)
    return df


def create_summary_table(df: pd.DataFrame) -> pd.DataFrame:
    """
    Create a summary table from results DataFrame.

    Args:
        df: DataFrame from :func:`create_results_dataframe`

    Returns:
        Summary DataFrame with aggregated statistics
    """
    if df.empty:
        return pd.DataFrame()

    pressures = df["max_pressure_psf"]
    summary = pd.DataFrame(
        {
            "metric": [
                "count",
                "mean_max_pressure",
                "max_max_pressure",
                "mean_qz",
                "zone1_prime_count",
                "pe_ready_count",
            ],
            "value": [
                len(df),
                pressures.mean(),
                pressures.max(),
                df["qz_psf"].mean(),
                int(df["zone1_prime_required"].sum()),
                int(df["pe_ready"].sum()),
            ],
        }
    )
    return summary


def export_to_csv(df: pd.DataFrame, filepath: str) -> None:
    """
    Export DataFrame to CSV file.

    Args:
        df: DataFrame to export
        filepath: Path to save CSV file
    """
    df.to_csv(filepath, index=False)


def export_to_excel(df: pd.DataFrame, filepath: str) -> None:
    """
    Export DataFrame to Excel file.

    Args:
        df: DataFrame to export
        filepath: Path to save Excel file
    """
    df.to_excel(filepath, index=False, engine="openpyxl")


__all__ = [
    "create_results_dataframe",
    "create_summary_table",
    "create_zone_table",
    "export_to_csv",
    "export_to_excel",
    "result_row",
]
