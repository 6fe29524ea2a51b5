"""
Chart functions for loan and SIP schedules.

Charts take the DataFrames built by :mod:`formulab.schedules` and return
(figure, dataframe_used) so the plotted data can be inspected or exported.
"""

from __future__ import annotations

import pandas as pd

# Plotly imports with graceful fallback
try:
    import plotly.express as px
    import plotly.graph_objects as go

    PLOTLY_AVAILABLE = True
except ImportError:
    PLOTLY_AVAILABLE = False


def _check_plotly() -> None:
    """Check if Plotly is available and raise helpful error if not."""
    if not PLOTLY_AVAILABLE:
        raise ImportError(
            "Plotly is required for chart functions. Install with:\n"
            "pip install plotly\n"
            "or\n"
            "pip install 'formulab[viz]'"
        )


def _require_columns(df: pd.DataFrame, columns: list[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Schedule is missing columns: {', '.join(missing)}")


def amortization_breakdown(schedule: pd.DataFrame) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot the principal/interest split of each payment and the outstanding balance.

    **Args:**
        schedule: DataFrame from :func:`formulab.schedules.amortization_schedule`

    **Returns:**
        Tuple of (plotly_figure, long_dataframe_used)

    **Example:**
        ```python
        from formulab.schedules import amortization_schedule
        from formulab.charts import amortization_breakdown

        fig, data = amortization_breakdown(amortization_schedule(2_500_000, 8.5, 240))
        fig.show()
        ```
    """
    _check_plotly()
    _require_columns(schedule, ["month", "principal", "interest", "balance"])

    long = schedule.melt(
        id_vars="month",
        value_vars=["principal", "interest"],
        var_name="component",
        value_name="amount",
    )

    fig = px.bar(
        long,
        x="month",
        y="amount",
        color="component",
        title="Loan Payment Breakdown",
        labels={"amount": "Amount", "month": "Month", "component": "Component"},
    )
    fig.add_trace(
        go.Scatter(
            x=schedule["month"],
            y=schedule["balance"],
            name="balance",
            mode="lines",
            yaxis="y2",
        )
    )
    fig.update_layout(
        barmode="stack",
        hovermode="x unified",
        yaxis2={"title": "Outstanding balance", "overlaying": "y", "side": "right"},
    )

    return fig, long


def sip_growth(schedule: pd.DataFrame) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot invested amount against portfolio value for a SIP.

    Args:
        schedule: DataFrame from :func:`formulab.schedules.sip_growth_schedule`

    Returns:
        Tuple of (plotly_figure, long_dataframe_used)
    """
    _check_plotly()
    _require_columns(schedule, ["month", "invested", "value"])

    long = schedule.melt(
        id_vars="month",
        value_vars=["invested", "value"],
        var_name="series",
        value_name="amount",
    )

    fig = px.line(
        long,
        x="month",
        y="amount",
        color="series",
        title="SIP Growth",
        labels={"amount": "Amount", "month": "Month", "series": ""},
    )
    fig.update_layout(hovermode="x unified")

    return fig, long


def save_chart(fig: go.Figure, filename: str, format: str = "html") -> None:
    """
    Save chart to file.

    Args:
        fig: Plotly figure
        filename: Output filename
        format: Output format ('html', 'png', 'pdf', 'svg')
    """
    _check_plotly()

    if format == "html":
        fig.write_html(filename)
    elif format in ("png", "pdf", "svg"):
        fig.write_image(filename, format=format)
    else:
        raise ValueError(f"Unsupported format: {format}")
