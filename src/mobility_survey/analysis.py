import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass

import pandas as pd

from mobility_survey import categories
from mobility_survey.categories import GroupScheme
from mobility_survey.const import (
    COL_COUNT,
    COL_PERIOD,
    COL_SHARE,
    COL_VEHICLE,
    COL_VEHICLE_RANK,
)
from mobility_survey.io import Row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModalSplitRow:
    period: str
    vehicle: str
    vehicle_label: str
    vehicle_rank: int
    count: int


@dataclass(frozen=True)
class GroupUsageRow:
    period: str
    vehicle: str
    vehicle_label: str
    vehicle_rank: int
    group: str
    group_label: str
    group_rank: int
    people: int
    """number of distinct participants, not rows"""


def modal_split(rows: Iterable[Row]) -> dict[str, list[ModalSplitRow]]:
    """
    Count main vehicles per time period and vehicle.
    Secondary vehicles are ignored.
    Combinations without any main vehicle are not part of the result.
    """
    counts: dict[str, Counter] = defaultdict(Counter)
    for row in rows:
        if not row.is_main_vehicle:
            continue
        counts[row.semester_time][row.vehicle] += 1

    result = {}
    for period, vehicle_counts in counts.items():
        result[period] = [
            _modal_split_row(period, vehicle, count)
            for vehicle, count in vehicle_counts.items()
        ]
    logger.info(
        "Modal split: %s period(s), %s entries",
        len(result),
        sum(len(entries) for entries in result.values()),
    )
    return result


def _modal_split_row(period: str, vehicle: str, count: int) -> ModalSplitRow:
    info = categories.vehicle_info(vehicle)
    return ModalSplitRow(period, vehicle, info.label, info.rank, count)


def usage_by_group(rows: Iterable[Row], scheme: GroupScheme) -> list[GroupUsageRow]:
    """
    Count distinct participants per time period, group and vehicle.

    A participant reporting the same vehicle more than once is counted once.
    Rows whose employment status is excluded by the group scheme are skipped.
    """
    participants: dict[tuple[str, str, str], set] = defaultdict(set)
    excluded = 0
    for row in rows:
        group = categories.group_of(scheme, row.employment_status)
        if group is None:
            excluded += 1
            continue
        participants[row.semester_time, group, row.vehicle].add(row.participant_id)

    if excluded:
        logger.info(
            "Skipped %s row(s) not covered by group scheme %s", excluded, scheme.key
        )

    result = []
    for (period, group, vehicle), ids in participants.items():
        vehicle_info = categories.vehicle_info(vehicle)
        group_info = categories.group_info(scheme, group)
        result.append(
            GroupUsageRow(
                period=period,
                vehicle=vehicle,
                vehicle_label=vehicle_info.label,
                vehicle_rank=vehicle_info.rank,
                group=group,
                group_label=group_info.label,
                group_rank=group_info.rank,
                people=len(ids),
            )
        )
    logger.info("Usage by group: %s entries", len(result))
    return result


def sort_modal_split(rows: Iterable[ModalSplitRow]) -> list[ModalSplitRow]:
    return sorted(rows, key=lambda r: (r.period, r.vehicle_rank, r.vehicle))


def sort_usage(rows: Iterable[GroupUsageRow]) -> list[GroupUsageRow]:
    return sorted(
        rows, key=lambda r: (r.period, r.group_rank, r.group, r.vehicle_rank, r.vehicle)
    )


def modal_split_frame(modal: Mapping[str, Iterable[ModalSplitRow]]) -> pd.DataFrame:
    """
    Modal split as DataFrame in display order,
    with the share of each vehicle within its period
    """
    records = [asdict(r) for entries in modal.values() for r in entries]
    if not records:
        return pd.DataFrame()

    df = pd.DataFrame(records)
    df[COL_SHARE] = df[COL_COUNT] / df.groupby(COL_PERIOD)[COL_COUNT].transform("sum")
    return df.sort_values([COL_PERIOD, COL_VEHICLE_RANK, COL_VEHICLE]).reset_index(
        drop=True
    )


def usage_frame(rows: Iterable[GroupUsageRow]) -> pd.DataFrame:
    """Group usage as DataFrame in display order"""
    records = [asdict(r) for r in sort_usage(rows)]
    if not records:
        return pd.DataFrame()
    return pd.DataFrame(records)
