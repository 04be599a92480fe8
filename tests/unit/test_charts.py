"""Tests for the matplotlib chart renderers."""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pytest

from config.schemas import TwoValueRatio
from dashboard.components.charts import (
    category_chart,
    division_chart,
    time_series_chart,
    two_value_radial,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_time_series_chart():
    fig = time_series_chart(
        [{"name": "Jan 14", "value": 12}, {"name": "Jan 15", "value": 30}],
        "Reports Per Day",
    )

    ax = fig.axes[0]
    assert ax.get_title() == "Reports Per Day"
    assert list(ax.lines[0].get_ydata()) == [12, 30]
    assert [t.get_text() for t in ax.get_xticklabels()] == ["Jan 14", "Jan 15"]


def test_time_series_chart_empty():
    fig = time_series_chart([], "Reports Per Day")

    assert fig.axes[0].texts[0].get_text() == "No data available"


def test_category_chart_skips_zero_slices():
    fig = category_chart(
        [{"name": "Accident", "value": 3}, {"name": "Parking", "value": 0}],
        "Report Categories",
    )

    labels = [t.get_text() for t in fig.axes[0].texts]
    assert "Accident" in labels
    assert "Parking" not in labels


def test_category_chart_empty():
    fig = category_chart([], "Report Categories")

    assert fig.axes[0].texts[0].get_text() == "No data available"


def test_two_value_radial_legend_shows_values():
    ratio = TwoValueRatio("Pending", 30, "Total", 70)

    fig = two_value_radial(ratio, "Pending Queries", inner_radius=20, outer_radius=35, height=100)

    ax = fig.axes[0]
    assert ax.get_title() == "Pending Queries"
    legend = [t.get_text() for t in ax.get_legend().get_texts()]
    assert legend == ["Pending: 30", "Total: 70"]


def test_two_value_radial_negative_remainder_draws():
    """Inconsistent data is drawn without raising and labelled with the real value."""
    ratio = TwoValueRatio("Active Sessions", 15, "Total Users", -5)

    fig = two_value_radial(ratio, "Active Users")

    legend = [t.get_text() for t in fig.axes[0].get_legend().get_texts()]
    assert legend[1] == "Total Users: -5"


def test_two_value_radial_all_zero():
    fig = two_value_radial(TwoValueRatio("Resolved", 0, "Total", 0), "Resolved Issues")

    assert fig.axes[0].get_title() == "Resolved Issues"


def test_division_chart():
    fig = division_chart()

    ax = fig.axes[0]
    assert len(ax.patches) == 5
    assert ax.get_title() == "Infractions By Division"
