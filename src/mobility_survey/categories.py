from collections import namedtuple
from collections.abc import Mapping

from matplotlib import colors as mcolors
from matplotlib import pyplot as plt

from mobility_survey.const import SENTINEL_RANK

CategoryInfo = namedtuple("CategoryInfo", ["key", "label", "rank", "color"])
GroupScheme = namedtuple("GroupScheme", ["key", "buckets", "groups"])

cmap = plt.get_cmap("tab10")
UNKNOWN_COLOR = mcolors.to_rgba("lightgray")

VEHICLE_CAR_DRIVER = "car-driver"
VEHICLE_CAR_PASSENGER = "car-passenger"
VEHICLE_MOTORBIKE = "motorbike"
VEHICLE_BUS = "bus"
VEHICLE_TRAIN_SHORT = "train-short"
VEHICLE_TRAIN_FAR = "train-far"
VEHICLE_BICYCLE = "bicycle"
VEHICLE_EBIKE = "ebike"
VEHICLE_WALK = "walk"

VEHICLES = {
    VEHICLE_CAR_DRIVER: CategoryInfo(VEHICLE_CAR_DRIVER, "Pkw (Fahrer:in)", 1, cmap(3)),
    VEHICLE_CAR_PASSENGER: CategoryInfo(
        VEHICLE_CAR_PASSENGER, "Pkw (Mitfahrer:in)", 2, cmap(1)
    ),
    VEHICLE_MOTORBIKE: CategoryInfo(VEHICLE_MOTORBIKE, "Motorrad", 3, cmap(5)),
    VEHICLE_BUS: CategoryInfo(VEHICLE_BUS, "Bus", 4, cmap(4)),
    VEHICLE_TRAIN_SHORT: CategoryInfo(
        VEHICLE_TRAIN_SHORT, "Zug (Nahverkehr)", 5, cmap(0)
    ),
    VEHICLE_TRAIN_FAR: CategoryInfo(VEHICLE_TRAIN_FAR, "Zug (Fernverkehr)", 6, cmap(9)),
    VEHICLE_BICYCLE: CategoryInfo(VEHICLE_BICYCLE, "Fahrrad", 7, cmap(2)),
    VEHICLE_EBIKE: CategoryInfo(VEHICLE_EBIKE, "E-Bike", 8, cmap(8)),
    VEHICLE_WALK: CategoryInfo(VEHICLE_WALK, "zu Fuß", 9, cmap(6)),
}
"""dict of vehicle codes and infos about them. keys sorted by display rank"""

GROUP_STUDENT = "student"
GROUP_EMPLOYEE = "employee"
GROUP_PROF = "prof"

STATUS_STUDENT = "student"
STATUS_WIMI = "wimi"
STATUS_NIWI = "niwi"
STATUS_PROF = "prof"

SCHEME_COARSE = "coarse"
SCHEME_STATUS = "status"

GROUP_SCHEMES = {
    SCHEME_COARSE: GroupScheme(
        SCHEME_COARSE,
        {
            STATUS_STUDENT: GROUP_STUDENT,
            STATUS_WIMI: GROUP_EMPLOYEE,
            STATUS_NIWI: GROUP_EMPLOYEE,
            STATUS_PROF: GROUP_PROF,
        },
        {
            GROUP_STUDENT: CategoryInfo(GROUP_STUDENT, "Studierende", 1, cmap(0)),
            GROUP_EMPLOYEE: CategoryInfo(GROUP_EMPLOYEE, "Beschäftigte", 2, cmap(1)),
            GROUP_PROF: CategoryInfo(GROUP_PROF, "Professor:innen", 3, cmap(2)),
        },
    ),
    SCHEME_STATUS: GroupScheme(
        SCHEME_STATUS,
        None,
        {
            STATUS_STUDENT: CategoryInfo(STATUS_STUDENT, "Studierende", 1, cmap(0)),
            STATUS_WIMI: CategoryInfo(
                STATUS_WIMI, "Wissenschaftliche Mitarbeitende", 2, cmap(1)
            ),
            STATUS_NIWI: CategoryInfo(
                STATUS_NIWI, "Nichtwissenschaftliche Mitarbeitende", 3, cmap(4)
            ),
            STATUS_PROF: CategoryInfo(STATUS_PROF, "Professor:innen", 4, cmap(2)),
        },
    ),
}
"""
Two alternative ways to group participants by employment status.
`buckets` maps a raw status to its group; statuses missing from it are excluded.
`buckets=None` means the raw status is the group.
"""


def resolve(registry: Mapping[str, CategoryInfo], code: str) -> CategoryInfo:
    """
    Look up a code. Unknown codes are labelled with the code itself
    and sorted after all known ones.
    """
    info = registry.get(code)
    if info is not None:
        return info
    return CategoryInfo(code, code, SENTINEL_RANK, UNKNOWN_COLOR)


def vehicle_info(code: str) -> CategoryInfo:
    return resolve(VEHICLES, code)


def group_info(scheme: GroupScheme, code: str) -> CategoryInfo:
    return resolve(scheme.groups, code)


def group_of(scheme: GroupScheme, status: str) -> str | None:
    """
    The group a raw employment status belongs to, None if it is excluded
    """
    if scheme.buckets is None:
        return status
    return scheme.buckets.get(status)


def get_group_scheme(name: str) -> GroupScheme:
    try:
        return GROUP_SCHEMES[name]
    except KeyError:
        raise ValueError(
            f"Unknown group scheme: {name} (expected one of {', '.join(GROUP_SCHEMES)})"
        ) from None
