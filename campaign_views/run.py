"""Command-line runner — builds the dashboard views for a dataset file."""

import argparse
import json
import logging
import sys

import pandas as pd
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from campaign_views.config import get_env_config, load_dashboard_config, load_geo_lookup
from campaign_views.geo import DEFAULT_GEO_LOOKUP
from campaign_views.ingest import load_dataset
from campaign_views.report import VIEW_FRAMES, build_report, validate_report
from campaign_views.transform import normalize_campaigns
from campaign_views.utils.io import export_frames
from campaign_views.utils.types import ViewName

console = Console()


def _format_cell(value: object) -> str:
    match value:
        case bool():
            return str(value)
        case float():
            return f"{value:,.2f}"
        case int():
            return f"{value:,}"
        case None:
            return ""
        case _:
            return str(value)


def render_frame(title: str, df: pd.DataFrame) -> Table:
    table = Table(title=title)
    for column in df.columns:
        table.add_column(str(column), justify="right" if pd.api.types.is_numeric_dtype(df[column]) else "left")
    for record in df.itertuples(index=False):
        table.add_row(*(_format_cell(value) for value in record))
    return table


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build marketing dashboard views from a campaign dataset")
    parser.add_argument("dataset", nargs="?", help="Path to the campaigns JSON file")
    parser.add_argument("--env", type=str, help="Configuration profile (production, staging, development)")
    parser.add_argument("--view", choices=[v.value for v in ViewName], action="append",
                        help="Only build the given view (repeatable)")
    parser.add_argument("--geo-config", type=str, help="TOML or YAML file extending the geo tables")
    parser.add_argument("--output", type=str, help="Directory to export the view frames to")
    parser.add_argument("--format", choices=["csv", "json", "parquet", "excel"], help="Export format")
    parser.add_argument("--validate", action="store_true", help="Validate the frames against their schemas")
    parser.add_argument("--log-level", type=str, help="Override the profile's log level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    try:
        config = load_dashboard_config(args.env or str(get_env_config().get("env", "development")))
        geo = load_geo_lookup(args.geo_config) if args.geo_config else DEFAULT_GEO_LOOKUP
    except (OSError, ValueError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)

    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    source = args.dataset or config.data_path
    try:
        dataset = load_dataset(source)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        console.print(f"[red]Could not load dataset {source}: {e}[/red]")
        sys.exit(1)

    campaigns = normalize_campaigns(dataset["campaigns"])
    frames = build_report(campaigns, geo=geo)

    views = [ViewName(v) for v in args.view] if args.view else config.views
    selected = [name for view in views for name in VIEW_FRAMES[view]]

    for name in selected:
        console.print(render_frame(name, frames[name]))

    if args.output:
        fmt = args.format or config.output.fmt
        export_frames({name: frames[name] for name in selected}, args.output, fmt)

    if args.validate:
        results = validate_report({name: frames[name] for name in selected})
        table = Table(title="Validation Results")
        table.add_column("Frame")
        table.add_column("Valid")
        table.add_column("Details")

        for name, result in results.items():
            status = "[green]✓[/green]" if result["valid"] else "[red]✗[/red]"
            detail = "; ".join(result["errors"]) or "OK"
            table.add_row(name, status, detail)

        console.print(table)

        if not all(r["valid"] for r in results.values()):
            sys.exit(1)


if __name__ == "__main__":
    main()
