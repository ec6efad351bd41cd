import logging

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st
from plotly.subplots import make_subplots

from ecommerce_dashboard.config import DEFAULT_TITLE, load_settings
from ecommerce_dashboard.content import (
    CHURN_BUCKET_NOTES,
    CHURN_DRIVERS,
    CHURN_SAVINGS_NOTE,
    CUSTOMER_ACTIONS,
    KPIS,
    OVERVIEW_INSIGHTS,
    RETENTION_STRATEGIES,
    SALES_FINDINGS,
    VALUE_TIERS,
)
from ecommerce_dashboard.data import (
    CategoryRecord,
    ChurnBucket,
    MonthlyPoint,
    RegionRecord,
    Segment,
    generate_data,
    to_frame,
)
from ecommerce_dashboard.formatting import format_currency, format_number, format_thousands
from ecommerce_dashboard.state import Region, Tab, ViewState

st.set_page_config(
    page_title=DEFAULT_TITLE,
    page_icon="📊",
    layout="wide",
)

logger = logging.getLogger(__name__)

TAB_OPTIONS = [tab.value for tab in Tab]
REGION_OPTIONS = [region.value for region in Region]

RISK_ICONS = {"Low Risk": "✅", "Medium Risk": "⚠️", "High Risk": "🚨"}


def get_view_state(seed) -> ViewState:
    if "view_state" not in st.session_state:
        bundle = generate_data(seed)
        st.session_state["bundle"] = bundle
        st.session_state["view_state"] = ViewState(bundle)
        logger.info("Started dashboard session (seed=%s)", seed)
    return st.session_state["view_state"]


def add_hover(fig, axis: str = "y", money: bool = True):
    number_format = "$,.0f" if money else ",.0f"
    fig.update_traces(hovertemplate=f"%{{{axis}:{number_format}}}<extra></extra>")
    return fig


def create_bar(data, x, y, title, horizontal=False, color=None, money=True):
    if data.empty:
        st.info(f"No data available for {title.lower()}.")
        return
    if horizontal:
        fig = px.bar(data, x=y, y=x, orientation="h", title=title, text_auto=".2s")
        fig.update_yaxes(autorange="reversed")
        add_hover(fig, "x", money=money)
    else:
        fig = px.bar(data, x=x, y=y, title=title, text_auto=".2s")
        add_hover(fig, money=money)
    if color:
        fig.update_traces(marker_color=color)
    fig.update_layout(height=320, xaxis_title=None, yaxis_title=None)
    st.plotly_chart(fig, width="stretch")


def create_line(data, x, y, title):
    if data.empty:
        st.info(f"No data available for {title.lower()}.")
        return
    fig = px.line(data, x=x, y=y, markers=True, title=title)
    fig.update_traces(line_color="#3b82f6", line_width=3)
    add_hover(fig)
    fig.update_layout(height=320, xaxis_title=None, yaxis_title=None)
    st.plotly_chart(fig, width="stretch")


def create_dual_axis(data: pd.DataFrame, title: str):
    if data.empty:
        st.info(f"No data available for {title.lower()}.")
        return
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(
        go.Scatter(
            x=data["month"],
            y=data["revenue"],
            name="Revenue ($)",
            mode="lines",
            line={"color": "#3b82f6", "width": 3},
        ),
        secondary_y=False,
    )
    fig.add_trace(
        go.Scatter(
            x=data["month"],
            y=data["orders"],
            name="Orders",
            mode="lines",
            line={"color": "#10b981", "width": 3},
        ),
        secondary_y=True,
    )
    fig.update_layout(height=450, title=title, legend={"orientation": "h"})
    st.plotly_chart(fig, width="stretch")


def metric_row():
    columns = st.columns(len(KPIS))
    for col, kpi in zip(columns, KPIS):
        col.metric(kpi.label, kpi.value, kpi.change)


def bullet_list(items) -> str:
    return "\n".join(f"- {item}" for item in items)


def render_overview(view: ViewState):
    data = view.visible_data()

    left, right = st.columns(2)
    with left:
        create_line(
            to_frame(data["monthly_sales"], MonthlyPoint),
            "month",
            "revenue",
            "Monthly Revenue Trend",
        )
        st.caption(OVERVIEW_INSIGHTS["revenue"])
    with right:
        create_bar(
            to_frame(data["category_data"], CategoryRecord),
            "category",
            "sales",
            "Top Product Categories",
            horizontal=True,
            color="#10b981",
        )
        st.caption(OVERVIEW_INSIGHTS["categories"])

    left, right = st.columns(2)
    with left:
        create_bar(
            to_frame(data["region_data"], RegionRecord),
            "region",
            "revenue",
            "Revenue by Region",
            color="#8b5cf6",
        )
        st.caption(OVERVIEW_INSIGHTS["regions"])
    with right:
        st.markdown("#### 🏆 Top Selling Products")
        for rank, product in enumerate(data["top_products"], start=1):
            name_col, sales_col = st.columns([4, 1])
            name_col.markdown(
                f"**#{rank} {product.name}**  \n{format_number(product.units)} units sold"
            )
            sales_col.markdown(f"**{format_thousands(product.sales)}**")


def render_sales(view: ViewState):
    data = view.visible_data()

    header, selector = st.columns([3, 1])
    header.subheader("Sales Performance Analysis")
    with selector:
        choice = st.selectbox(
            "Region",
            options=REGION_OPTIONS,
            index=REGION_OPTIONS.index(view.selected_region.value),
            format_func=lambda value: Region(value).label,
            key="region_filter",
        )
    view.set_region(choice)

    if view.selected_region is not Region.ALL:
        st.caption(
            f"Showing **{view.selected_region.label}**. Monthly figures have no regional "
            "breakdown, so the chart covers all regions."
        )

    monthly = to_frame(data["monthly_sales"], MonthlyPoint)
    create_dual_axis(monthly, "Revenue and Orders by Month")

    if not monthly.empty:
        peak = monthly.sort_values("revenue", ascending=False).iloc[0]
        st.caption(
            f"Peak revenue month: **{peak['month']}** at **{format_currency(peak['revenue'])}** "
            f"from **{format_number(peak['orders'])}** orders."
        )

    st.markdown("#### 📊 Key Findings")
    st.info(bullet_list(SALES_FINDINGS))


def render_customers(view: ViewState):
    data = view.visible_data()
    segments = data["segments"]

    left, right = st.columns(2)
    with left:
        title = "Customer Segmentation (RFM Analysis)"
        frame = to_frame(segments, Segment)
        if frame.empty:
            st.info(f"No data available for {title.lower()}.")
        else:
            fig = px.pie(
                frame,
                names="name",
                values="value",
                color="name",
                color_discrete_map={s.name: s.color for s in segments},
                title=title,
            )
            fig.update_traces(textinfo="label+percent")
            fig.update_layout(height=360, showlegend=False)
            st.plotly_chart(fig, width="stretch")

        for segment in segments:
            st.markdown(
                f"<span style='color:{segment.color}'>●</span> **{segment.name}** "
                f"({segment.value}%): {segment.description}",
                unsafe_allow_html=True,
            )

    with right:
        st.markdown("#### Customer Lifetime Value Distribution")
        for tier in VALUE_TIERS:
            name_col, value_col = st.columns([3, 1])
            name_col.markdown(f"**{tier.name}**")
            value_col.markdown(f"**{format_currency(tier.average_value)}**")
            st.progress(
                tier.bar_fill,
                text=(
                    f"{format_number(tier.customers)} customers • "
                    f"Avg {tier.orders_per_year} orders/year"
                ),
            )

    st.markdown("#### 🎯 Recommended Actions")
    st.success(bullet_list(CUSTOMER_ACTIONS))


def render_churn(view: ViewState):
    data = view.visible_data()
    buckets = data["churn_data"]

    create_bar(
        to_frame(buckets, ChurnBucket),
        "segment",
        "customers",
        "Customer Churn Risk Analysis",
        color="#8b5cf6",
        money=False,
    )

    for col, bucket in zip(st.columns(len(buckets)), buckets):
        with col:
            st.metric(f"{RISK_ICONS.get(bucket.segment, '')} {bucket.segment}", f"{bucket.percentage}%")
            st.caption(
                f"{format_number(bucket.customers)} "
                f"{CHURN_BUCKET_NOTES.get(bucket.segment, 'customers')}"
            )

    st.markdown("#### 🤖 ML Model Insights & Retention Strategy")
    drivers_col, strategy_col = st.columns(2)
    with drivers_col:
        st.markdown("**Churn Indicators (Feature Importance):**")
        for driver in CHURN_DRIVERS:
            st.progress(driver.importance, text=f"{driver.feature}: {driver.importance}%")
    with strategy_col:
        for risk, strategies in RETENTION_STRATEGIES.items():
            st.markdown(f"**{risk} Customers:**")
            st.markdown(bullet_list(strategies))
        st.info(CHURN_SAVINGS_NOTE)


try:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    view_state = get_view_state(settings.seed)
except Exception as e:
    st.error(f"Unable to start the dashboard. {e}")
    st.stop()

st.title(settings.title)
st.markdown("Real-time insights for data-driven business decisions")

selected = st.radio(
    "View",
    options=TAB_OPTIONS,
    index=TAB_OPTIONS.index(view_state.selected_tab.value),
    format_func=lambda value: Tab(value).label,
    horizontal=True,
    label_visibility="collapsed",
    key="tab_choice",
)
view_state.set_tab(selected)

metric_row()
st.markdown("---")

if view_state.selected_tab is Tab.OVERVIEW:
    render_overview(view_state)
elif view_state.selected_tab is Tab.SALES:
    render_sales(view_state)
elif view_state.selected_tab is Tab.CUSTOMERS:
    render_customers(view_state)
elif view_state.selected_tab is Tab.CHURN:
    render_churn(view_state)

st.markdown("---")
st.caption(
    "📊 Built with Streamlit and Plotly | 🔍 Data: Simulated E-Commerce Dataset | "
    "🛠️ Skills: SQL, Python, ML, BI Tools"
)
