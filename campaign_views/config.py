"""Dashboard configuration and environment setup."""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from campaign_views.geo import DEFAULT_GEO_LOOKUP, GeoLookup
from campaign_views.utils.types import ViewName

type ConfigDict = dict[str, str | int | bool | list[str]]


@dataclass(frozen=True)
class OutputConfig:
    directory: Path
    fmt: str


@dataclass(frozen=True)
class DashboardConfig:
    data_path: Path
    output: OutputConfig
    log_level: str
    views: list[ViewName] = field(default_factory=lambda: list(ViewName))


def load_dashboard_config(env: str = "production") -> DashboardConfig:
    match env:
        case "production":
            data_path = Path("/data/marketing/campaigns.json")
            output = OutputConfig(directory=Path("/data/marketing/views"), fmt="parquet")
            log_level = "WARNING"
        case "staging":
            data_path = Path("/data/staging/marketing/campaigns.json")
            output = OutputConfig(directory=Path("/data/staging/marketing/views"), fmt="csv")
            log_level = "INFO"
        case "development":
            data_path = Path("data/campaigns.json")
            output = OutputConfig(directory=Path("output"), fmt="csv")
            log_level = "DEBUG"
        case other:
            raise ValueError(f"Unknown environment: {other}")

    return DashboardConfig(data_path=data_path, output=output, log_level=log_level)


def get_env_config() -> ConfigDict:
    """Read dashboard config from pyproject.toml."""
    pyproject = Path(__file__).parent.parent / "pyproject.toml"
    if not pyproject.exists():
        return {}
    with open(pyproject, "rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("campaign_views", {})


def _coordinate_table(path: Path, key: str, table: object) -> dict[str, tuple[float, float]]:
    """Check one ``name -> [lng, lat]`` table from a geo config file."""
    match table:
        case None:
            return {}
        case Mapping():
            pass
        case other:
            raise ValueError(f"Geo config {path}: '{key}' must be a table, got {type(other).__name__}")

    coords = {}
    for name, value in table.items():
        match value:
            case [int() | float() as lng, int() | float() as lat] if not isinstance(lng, bool) and not isinstance(lat, bool):
                if not (-180 <= lng <= 180 and -90 <= lat <= 90):
                    raise ValueError(f"Geo config {path}: {key}.{name} is out of range: {value}")
                coords[str(name)] = (float(lng), float(lat))
            case _:
                raise ValueError(f"Geo config {path}: {key}.{name} must be [lng, lat], got {value!r}")
    return coords


def load_geo_lookup(path: str | Path, base: GeoLookup = DEFAULT_GEO_LOOKUP) -> GeoLookup:
    """Extend the built-in geography tables from a TOML or YAML file.

    The file may hold ``city_coords`` and ``country_centroids`` tables mapping
    a name to ``[lng, lat]``. Malformed files raise ``ValueError``.
    """
    path = Path(path)

    match path.suffix:
        case ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        case ".yaml" | ".yml":
            with open(path, encoding="utf-8") as f:
                try:
                    data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ValueError(f"Geo config {path} is not valid YAML: {e}") from e
        case ext:
            raise ValueError(f"Unsupported geo config format: {ext}")

    if not isinstance(data, Mapping):
        raise ValueError(f"Geo config {path} must contain a mapping")

    return base.merged(
        city_coords=_coordinate_table(path, "city_coords", data.get("city_coords")),
        country_centroids=_coordinate_table(path, "country_centroids", data.get("country_centroids")),
    )
