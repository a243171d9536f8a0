"""citybars — shared data model for the city frequency explorer."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict

__version__ = "0.1.0"


@dataclass
class DatasetGroup:
    """One labelled group of the input dataset (e.g. the "City" column)."""

    name: str
    values: list[str] = field(default_factory=list)


@dataclass
class CityRecord:
    """A distinct city and how often it occurs in the dataset."""

    key: str  # city name, unique across the aggregated list
    value: int  # occurrence count, always >= 1
    selected: bool = False  # transient filter state

    def to_dict(self) -> dict:
        return asdict(self)


__all__ = ["CityRecord", "DatasetGroup", "__version__"]
