"""
Visualization helpers for reports.
"""

import logging

import matplotlib.figure
import matplotlib.pyplot as plt
import pandas as pd

from mobility_survey import categories
from mobility_survey.const import COL_PERIOD, COL_SHARE, COL_VEHICLE
from mobility_survey.util import float_str

logger = logging.getLogger(__name__)

ANNOTATION_FONT_SIZE = 10
MIN_ANNOTATED_SHARE = 0.05


def plot_modal_split(modal_split: pd.DataFrame) -> matplotlib.figure.Figure:
    """
    Stacked bars with the share of each main vehicle per time period.

    Args:
        modal_split: as returned by `analysis.modal_split_frame`
    """
    fig, ax = plt.subplots()
    if modal_split.empty:
        logger.warning("Nothing to plot, modal split is empty")
        return fig

    pivot_df = modal_split.pivot(
        index=COL_PERIOD, columns=COL_VEHICLE, values=COL_SHARE
    ).fillna(0)
    # fix sorting of vehicles
    vehicles = sorted(
        pivot_df.columns, key=lambda v: (categories.vehicle_info(v).rank, v)
    )
    pivot_df = pivot_df[vehicles] * 100
    infos = [categories.vehicle_info(v) for v in vehicles]

    pivot_df.plot(
        ax=ax,
        kind="bar",
        stacked=True,
        width=0.8,
        ylabel="Anteil [%]",
        title="Modal Split nach Semester (Hauptverkehrsmittel)",
        color=[info.color for info in infos],
    )
    for container in ax.containers:
        labels = [
            f"{float_str(v, 1)} %" if v >= MIN_ANNOTATED_SHARE * 100 else ""
            for v in container.datavalues
        ]
        ax.bar_label(
            container, labels=labels, label_type="center", fontsize=ANNOTATION_FONT_SIZE
        )
    ax.legend(
        title="Verkehrsmittel",
        labels=[info.label for info in infos],
        bbox_to_anchor=(1.01, 1),
        loc="upper left",
    )
    ax.set_xlabel("Semester")
    ax.set_xticklabels(pivot_df.index, rotation=0)
    return fig
