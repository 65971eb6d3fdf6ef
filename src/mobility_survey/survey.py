"""
Memoized access to the survey rows and their aggregates.

Everything is computed lazily on first access and kept for the lifetime
of the process. There is no invalidation.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType

from mobility_survey import analysis, categories, config, io
from mobility_survey.analysis import GroupUsageRow, ModalSplitRow
from mobility_survey.cache import SingleFlight
from mobility_survey.io import Row

logger = logging.getLogger(__name__)


class SurveyData:
    """
    Rows and aggregates of one data source under one group scheme.
    Each of them is retrieved or computed at most once.
    """

    def __init__(
        self,
        source: str = config.DATA_SOURCE,
        group_scheme: str = config.GROUP_SCHEME,
        reader: Callable[[str], str] = io.read_source,
    ):
        self.source = source
        self.scheme = categories.get_group_scheme(group_scheme)
        self._reader = reader
        self._rows = SingleFlight(self._read_rows)
        self._modal_split = SingleFlight(self._compute_modal_split)
        self._usage_by_group = SingleFlight(self._compute_usage_by_group)

    def _read_rows(self) -> tuple[Row, ...]:
        return io.read_rows(self.source, self._reader)

    def _compute_modal_split(self) -> Mapping[str, tuple[ModalSplitRow, ...]]:
        modal = analysis.modal_split(self.load_rows())
        return MappingProxyType(
            {period: tuple(entries) for period, entries in modal.items()}
        )

    def _compute_usage_by_group(self) -> tuple[GroupUsageRow, ...]:
        return tuple(analysis.usage_by_group(self.load_rows(), self.scheme))

    def load_rows(self) -> tuple[Row, ...]:
        return self._rows.get()

    def modal_split(self) -> Mapping[str, tuple[ModalSplitRow, ...]]:
        """Main vehicle counts per time period"""
        return self._modal_split.get()

    def usage_by_group(self) -> tuple[GroupUsageRow, ...]:
        """Distinct participants per time period, group and vehicle"""
        return self._usage_by_group.get()


_default: SurveyData | None = None
_default_lock = threading.Lock()


def get_default() -> SurveyData:
    """The process wide instance, configured by `config`"""
    global _default
    with _default_lock:
        if _default is None:
            logger.info(
                "Using data source %s with group scheme %s",
                config.DATA_SOURCE,
                config.GROUP_SCHEME,
            )
            _default = SurveyData(config.DATA_SOURCE, config.GROUP_SCHEME)
        return _default


def load_rows() -> tuple[Row, ...]:
    return get_default().load_rows()


def modal_split() -> Mapping[str, tuple[ModalSplitRow, ...]]:
    return get_default().modal_split()


def usage_by_group() -> tuple[GroupUsageRow, ...]:
    return get_default().usage_by_group()
