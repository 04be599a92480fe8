"""
Overview panel component for the traffic reports dashboard.

Renders radial status cards, the total reports card, daily and category
charts, the division chart and the recent activity table.
Use `render_panel(controller)` after the controller has been reloaded.
"""

from typing import Any, Dict

import matplotlib.pyplot as plt
import streamlit as st

from config.config import (
    CATEGORY_TITLE,
    LOADING_MESSAGE,
    PAGE_TITLE,
    RADIAL_HEIGHT,
    RADIAL_INNER_RADIUS,
    RADIAL_OUTER_RADIUS,
    TIME_SERIES_TITLE,
    TOTAL_REPORTS_TITLE,
)
from service.overview_controller import OverviewController, ViewState
from dashboard.components.charts import (
    category_chart,
    division_chart,
    time_series_chart,
    two_value_radial,
)
from dashboard.components.layout import (
    render_activity_table,
    render_header,
    render_total_card,
)


def _show(fig: plt.Figure) -> None:
    st.pyplot(fig)
    plt.close(fig)


def render_panel(controller: OverviewController) -> Dict[str, Any]:
    """
    Render the overview panel for the controller's current state.

    Only one of the loading indicator, the error message or the full
    dashboard is shown.

    Returns:
        Dict containing panel state and metrics for external monitoring.
    """
    if controller.state in (ViewState.IDLE, ViewState.LOADING):
        st.info(LOADING_MESSAGE)
        return {"status": "loading"}

    if controller.state is ViewState.FAILED:
        st.error(controller.error_message)
        return {"status": "error", "error": controller.error_message}

    view = controller.view_model()
    render_header(PAGE_TITLE)

    # Stats overview
    card_cols = st.columns(len(view.radial_cards))
    for col, card in zip(card_cols, view.radial_cards):
        with col:
            _show(two_value_radial(
                card.ratio,
                card.title,
                inner_radius=RADIAL_INNER_RADIUS,
                outer_radius=RADIAL_OUTER_RADIUS,
                height=RADIAL_HEIGHT,
            ))

    render_total_card(TOTAL_REPORTS_TITLE, view.total_queries)

    # Charts
    col1, col2 = st.columns(2)
    with col1:
        _show(time_series_chart(view.time_series, TIME_SERIES_TITLE))
    with col2:
        _show(category_chart(view.categories, CATEGORY_TITLE))
    _show(division_chart())

    render_activity_table(view.activity_rows)

    return {
        "status": "success",
        "backend_url": controller.backend_url,
        "total_queries": view.total_queries,
        "days": len(view.time_series),
        "categories": len(view.categories),
        "activity_rows": len(view.activity_rows),
    }
