import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from mobility_survey.viz import plot_modal_split  # noqa: E402


def test_plot_modal_split__legend_in_display_order():
    df = pd.DataFrame(
        {
            "period": ["WS24", "WS24", "SS25"],
            "vehicle": ["walk", "car-driver", "scooter"],
            "share": [0.4, 0.6, 1.0],
        }
    )
    fig = plot_modal_split(df)
    legend = fig.axes[0].get_legend()
    assert [t.get_text() for t in legend.get_texts()] == [
        "Pkw (Fahrer:in)",
        "zu Fuß",
        "scooter",
    ]
    plt.close(fig)


def test_plot_modal_split__empty():
    fig = plot_modal_split(pd.DataFrame())
    assert len(fig.axes) == 1
    plt.close(fig)
