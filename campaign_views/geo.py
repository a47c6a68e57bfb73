"""Static geography tables and coordinate resolution for the regional view."""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from campaign_views.utils.types import Coordinate, RegionGroup

JITTER_RADIUS = 0.6

CITY_COORDS: dict[str, Coordinate] = {
    "Dubai": (55.27, 25.2),
    "Sharjah": (55.4, 25.35),
    "Abu Dhabi": (54.37, 24.47),
    "Riyadh": (46.71, 24.71),
    "Jeddah": (39.17, 21.54),
    "Dammam": (50.1, 26.43),
    "Cairo": (31.23, 30.04),
    "Giza": (31.21, 30.01),
    "Amman": (35.93, 31.95),
    "Doha": (51.53, 25.29),
    "Muscat": (58.41, 23.59),
    "Manama": (50.58, 26.23),
    "London": (-0.12, 51.51),
    "Paris": (2.35, 48.85),
    "Berlin": (13.4, 52.52),
    "Madrid": (-3.7, 40.42),
    "Rome": (12.5, 41.9),
    "Istanbul": (28.97, 41.01),
    "New York": (-74.0, 40.71),
    "Los Angeles": (-118.24, 34.05),
    "San Francisco": (-122.42, 37.77),
    "Toronto": (-79.38, 43.65),
    "São Paulo": (-46.63, -23.55),
    "Sydney": (151.21, -33.87),
    "Tokyo": (139.69, 35.68),
    "Singapore": (103.82, 1.35),
    "Mumbai": (72.88, 19.08),
}

# matched as substrings of the country string, in this order
COUNTRY_CENTROIDS: dict[str, Coordinate] = {
    "UAE": (54.37, 24.47),
    "United Arab Emirates": (54.37, 24.47),
    "Saudi Arabia": (45.08, 23.88),
    "KSA": (45.08, 23.88),
    "Qatar": (51.18, 25.3),
    "Oman": (57.49, 21.51),
    "Bahrain": (50.55, 26.07),
    "Jordan": (36.24, 31.24),
    "Egypt": (30.8, 26.82),
    "United Kingdom": (-1.47, 52.35),
    "UK": (-1.47, 52.35),
    "France": (2.21, 46.23),
    "Germany": (10.45, 51.16),
    "Italy": (12.57, 42.88),
    "Spain": (-3.65, 40.22),
    "Turkey": (35.24, 39.06),
    "United States": (-98.35, 39.5),
    "USA": (-98.35, 39.5),
    "Canada": (-106.35, 56.13),
    "Brazil": (-52.97, -14.24),
    "Australia": (134.49, -25.73),
    "Japan": (138.25, 36.2),
    "India": (78.96, 20.59),
    "Singapore": (103.82, 1.35),
}

# first matching group wins, so the order here is significant
REGION_KEYWORDS: tuple[tuple[RegionGroup, tuple[str, ...]], ...] = (
    (RegionGroup.MENA, ("uae", "united arab emirates", "qatar", "saudi", "ksa",
                        "bahrain", "oman", "jordan", "egypt")),
    (RegionGroup.EUROPE, ("uk", "united kingdom", "france", "germany", "italy",
                          "spain", "netherlands")),
    (RegionGroup.AMERICAS, ("usa", "united states", "canada", "brazil", "mexico")),
    (RegionGroup.ASIA, ("china", "japan", "india", "indonesia", "singapore", "south korea")),
    (RegionGroup.APAC, ("australia", "new zealand")),
    (RegionGroup.AFRICA, ("nigeria", "kenya", "south africa", "morocco")),
)


def _frozen(table: Mapping[str, Sequence[float]]) -> Mapping[str, Coordinate]:
    return MappingProxyType({name: (float(lng), float(lat)) for name, (lng, lat) in table.items()})


def name_hash(name: str) -> int:
    """Rolling base-31 hash over UTF-16 code units, kept to 32 unsigned bits."""
    encoded = name.encode("utf-16-le")
    h = 0
    for i in range(0, len(encoded), 2):
        h = (h * 31 + int.from_bytes(encoded[i:i + 2], "little")) & 0xFFFFFFFF
    return h


def jitter(name: str) -> Coordinate:
    """Deterministic (dlng, dlat) offset so cities sharing a centroid spread out."""
    angle = math.radians(name_hash(name) % 360)
    return math.cos(angle) * JITTER_RADIUS, math.sin(angle) * JITTER_RADIUS


@dataclass(frozen=True)
class GeoLookup:
    """Read-only geography tables injected into the regional view."""

    city_coords: Mapping[str, Coordinate] = field(default_factory=lambda: CITY_COORDS)
    country_centroids: Mapping[str, Coordinate] = field(default_factory=lambda: COUNTRY_CENTROIDS)
    region_keywords: tuple[tuple[RegionGroup, tuple[str, ...]], ...] = REGION_KEYWORDS

    def __post_init__(self):
        object.__setattr__(self, "city_coords", _frozen(self.city_coords))
        object.__setattr__(self, "country_centroids", _frozen(self.country_centroids))

    def merged(
        self,
        city_coords: Mapping[str, Sequence[float]] | None = None,
        country_centroids: Mapping[str, Sequence[float]] | None = None,
    ) -> "GeoLookup":
        """Return a copy with extra (or overriding) table entries."""
        return GeoLookup(
            city_coords={**self.city_coords, **(city_coords or {})},
            country_centroids={**self.country_centroids, **(country_centroids or {})},
            region_keywords=self.region_keywords,
        )

    def country_centroid(self, country: str) -> Coordinate | None:
        lowered = country.lower()
        for name, centroid in self.country_centroids.items():
            if name.lower() in lowered:
                return centroid
        return None

    def resolve(self, city: str, country: str) -> Coordinate | None:
        """Return (lng, lat) for a city, falling back to a jittered country centroid."""
        if city in self.city_coords:
            return self.city_coords[city]

        if not country:
            return None

        centroid = self.country_centroid(country)
        if centroid is None:
            return None

        dlng, dlat = jitter(city or country)
        return centroid[0] + dlng, centroid[1] + dlat

    def region_group(self, country: str | None) -> RegionGroup:
        if not country:
            return RegionGroup.OTHER

        lowered = country.lower()
        for group, keywords in self.region_keywords:
            if any(keyword in lowered for keyword in keywords):
                return group
        return RegionGroup.OTHER


DEFAULT_GEO_LOOKUP = GeoLookup()
