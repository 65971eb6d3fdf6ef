import logging
from collections.abc import Callable
from dataclasses import dataclass
from io import StringIO
from pathlib import Path

import pandas as pd
import requests

from mobility_survey import config
from mobility_survey.const import FIELDS
from mobility_survey.util import to_bool, to_float_or_none, to_number, to_str_or_none

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when the survey data cannot be retrieved."""

    def __init__(self, source: str, status: int | None, detail: str = ""):
        self.source = source
        self.status = status
        message = f"Loading {source} failed"
        if status is not None:
            message += f": HTTP {status}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


@dataclass(frozen=True)
class Row:
    """One vehicle reported by one participant"""

    participant_id: float
    plz: str
    employment_status: str
    semester: str
    vl: bool
    semester_time: str
    """time period used for grouping"""
    days_present: float
    vehicle: str
    distance_km: float | None
    distance_km_week: float | None
    has_changed: str | None
    is_main_vehicle: bool
    """the participant's main vehicle in this time period"""
    car_technology: str | None


def read_source(source: str, timeout_secs: float = config.FETCH_TIMEOUT_SECS) -> str:
    """Return the raw text of a local file or an http(s) resource"""
    if source.lower().startswith(("http://", "https://")):
        try:
            response = requests.get(source, timeout=timeout_secs)
        except requests.RequestException as exc:
            raise LoadError(source, None, str(exc)) from exc
        if not response.ok:
            raise LoadError(source, response.status_code)
        return response.text

    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise LoadError(source, None, str(exc)) from exc


def parse_records(text: str, sep: str = config.CSV_SEP) -> list[dict[str, str]]:
    """
    Parse delimited text with a header row into string records.
    Missing columns and missing trailing fields default to the empty string.
    Unknown columns and surplus fields beyond the header are dropped.
    """
    if not text.strip():
        return []
    df = pd.read_csv(
        StringIO(text),
        sep=sep,
        dtype=str,
        keep_default_na=False,
        # never take the first column as index when rows are longer than the header
        index_col=False,
        usecols=lambda name: name in FIELDS,
        engine="python",
    )
    df = df.reindex(columns=FIELDS).fillna("")
    return df.to_dict("records")


def to_row(record: dict[str, str]) -> Row:
    return Row(
        participant_id=to_number(record.get("participant_id")),
        plz=record.get("plz", ""),
        employment_status=record.get("employment_status", ""),
        semester=record.get("semester", ""),
        vl=to_bool(record.get("vl")),
        semester_time=record.get("semester_time", ""),
        days_present=to_number(record.get("days_present")),
        vehicle=record.get("vehicle", ""),
        distance_km=to_float_or_none(record.get("distance_km")),
        distance_km_week=to_float_or_none(record.get("distance_km_week")),
        has_changed=to_str_or_none(record.get("has_changed")),
        is_main_vehicle=to_bool(record.get("is_main_vehicle")),
        car_technology=to_str_or_none(record.get("car_technology")),
    )


def read_rows(
    source: str, reader: Callable[[str], str] = read_source
) -> tuple[Row, ...]:
    """Retrieve, parse and coerce all rows of the survey"""
    logger.info("Reading survey data from %s", source)
    rows = tuple(to_row(record) for record in parse_records(reader(source)))
    logger.info("Read %s rows", len(rows))
    return rows
