"""
Commuting survey aggregates for the mobility dashboard
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from mobility_survey import analysis, categories, config, viz
from mobility_survey.io import LoadError
from mobility_survey.survey import SurveyData
from mobility_survey.util import int_str

#### report figures ####
plt.rcParams.update(
    {
        "figure.figsize": (16, 9),
        "figure.constrained_layout.use": True,
        "font.size": 12,
        "axes.titlesize": 20,
        "axes.labelsize": 16,
        "legend.title_fontsize": 14,
        "legend.fontsize": 12,
        "savefig.dpi": 200,
    }
)
FIG_OPTIONS = {
    "bbox_inches": "tight",
    "pad_inches": 0.1,
}

OUTPUT_PATH = Path("output")
LOG_FORMAT = "%(asctime)s %(name)s.%(levelname)s: %(message)s"


def _prepare_logger(log_file: Path | None) -> logging.Logger:
    # log to stdout and, if given, to a file in the output directory
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = [logging.StreamHandler(stream=sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(filename=log_file, encoding="utf-8"))

    root_logger = logging.getLogger("")
    # repeated runs in one interpreter must not duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel("WARNING")

    logger = logging.getLogger("mobility_survey")
    logger.setLevel("INFO")
    return logger


def export_aggregates(survey: SurveyData, output_path: Path) -> None:
    """
    Write both aggregates as CSV and the modal split as figure
    """
    rows = survey.load_rows()
    participants = {row.participant_id for row in rows}
    logger.info(
        f"{int_str(len(rows))} rows from {int_str(len(participants))} participants"
    )

    df_modal = analysis.modal_split_frame(survey.modal_split())
    df_modal.to_csv(output_path / "modal-split.csv", index=False)
    fig = viz.plot_modal_split(df_modal)
    fig.savefig(output_path / "modal-split.png", **FIG_OPTIONS)
    plt.close(fig)

    df_usage = analysis.usage_frame(survey.usage_by_group())
    df_usage.to_csv(output_path / "usage-by-group.csv", index=False)
    logger.info(
        f"Wrote {len(df_modal)} modal split and {len(df_usage)} usage rows to {output_path}"
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--source",
        default=config.DATA_SOURCE,
        help="Path or URL of the survey CSV.",
    )
    parser.add_argument(
        "--group-scheme",
        default=config.GROUP_SCHEME,
        choices=list(categories.GROUP_SCHEMES),
        help="How participants are grouped by employment status.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=OUTPUT_PATH,
        help="Directory for the exported CSV files and figures.",
    )
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)
    logger = _prepare_logger(args.output / "mobility-survey.log")
    logger.info("Starting...")

    survey = SurveyData(args.source, args.group_scheme)
    try:
        export_aggregates(survey, args.output)
    except LoadError as e:
        logger.error(f"No survey data available: {e}")
        sys.exit(1)

    logger.info("Done")
