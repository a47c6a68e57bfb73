"""Shared type definitions for the dashboard views."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any


type RawRecord = Mapping[str, Any]
type RawDataset = Mapping[str, Any]
type Coordinate = tuple[float, float]  # (lng, lat)
type ValidationResult = dict[str, str | bool | list[str]]


class Gender(StrEnum):
    MALE = "Male"
    FEMALE = "Female"


class RegionGroup(StrEnum):
    MENA = "MENA"
    EUROPE = "Europe"
    AMERICAS = "Americas"
    ASIA = "Asia"
    APAC = "APAC"
    AFRICA = "Africa"
    OTHER = "Other"


class ViewName(StrEnum):
    DEMOGRAPHIC = "demographic"
    DEVICE = "device"
    REGIONAL = "regional"
    WEEKLY = "weekly"
