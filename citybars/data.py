"""Dataset loading and city frequency aggregation.

A dataset is an ordered collection of labelled groups. The group labelled
"City" holds the raw sequence of city names; every other group is ignored.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from citybars import CityRecord, DatasetGroup
from citybars.config import CITY_GROUP

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Raised when a dataset file cannot be read as labelled groups."""


def _scalar_values(name, values: list) -> list[str]:
    """Stringify scalar entries; nulls are dropped like empty CSV cells."""
    out = []
    for v in values:
        if v is None:
            continue
        if isinstance(v, (list, dict)):
            raise DatasetError(f"group '{name}' has a nested {type(v).__name__} value")
        out.append(str(v))
    return out


def _groups_from_json(payload) -> list[DatasetGroup]:
    if isinstance(payload, dict):
        payload = [{"name": k, "values": v} for k, v in payload.items()]
    if not isinstance(payload, list):
        raise DatasetError(f"expected a list of groups, got {type(payload).__name__}")

    groups = []
    for i, entry in enumerate(payload):
        if not isinstance(entry, dict) or "name" not in entry:
            raise DatasetError(f"group #{i} has no 'name'")
        values = entry.get("values") or []
        if not isinstance(values, list):
            raise DatasetError(f"group '{entry['name']}' values must be a list")
        groups.append(DatasetGroup(name=str(entry["name"]), values=_scalar_values(entry["name"], values)))
    return groups


def _groups_from_frame(df: pd.DataFrame) -> list[DatasetGroup]:
    return [
        DatasetGroup(name=str(col), values=df[col].dropna().astype(str).tolist())
        for col in df.columns
    ]


def load_groups(path: str | Path) -> list[DatasetGroup]:
    """Read a dataset file into labelled groups.

    ``.json`` files hold a list of ``{"name": ..., "values": [...]}`` objects
    (or a mapping of name -> values). ``.csv``/``.tsv`` files are read with
    pandas and each column becomes a group named after its header.
    """
    path = Path(path)
    if not path.exists():
        raise DatasetError(f"dataset not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            with open(path, "r") as f:
                groups = _groups_from_json(json.load(f))
        elif suffix in (".csv", ".tsv"):
            sep = "\t" if suffix == ".tsv" else ","
            groups = _groups_from_frame(pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False, na_values=[""]))
        else:
            raise DatasetError(f"unsupported dataset format: {suffix or path.name}")
    except (json.JSONDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DatasetError(f"could not parse {path}: {e}") from e

    logger.debug(f"Loaded {len(groups)} groups from {path}")
    return groups


def extract_group(groups: Iterable[DatasetGroup], name: str = CITY_GROUP) -> list[str]:
    """Values of the group labelled ``name``; the last match wins.

    A missing group yields an empty list rather than an error.
    """
    found = None
    for group in groups:
        if group.name == name:
            found = group.values
    if found is None:
        logger.warning(f"No '{name}' group in dataset; chart will be empty")
        return []
    return list(found)


def count_frequencies(values: Sequence[str]) -> list[CityRecord]:
    """One record per distinct city, in order of first encounter."""
    counts = Counter(values)
    return [CityRecord(key=city, value=count) for city, count in counts.items()]


def aggregate_cities(groups: Iterable[DatasetGroup], name: str = CITY_GROUP) -> list[CityRecord]:
    cities = count_frequencies(extract_group(groups, name))
    logger.info(f"Aggregated {len(cities)} distinct cities")
    return cities
