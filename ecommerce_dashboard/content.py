"""Fixed copy and headline figures shown alongside the generated charts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    change: str


@dataclass(frozen=True)
class ValueTier:
    name: str
    average_value: float
    customers: int
    orders_per_year: float
    bar_fill: int


@dataclass(frozen=True)
class ChurnDriver:
    feature: str
    importance: int


KPIS: Tuple[Kpi, ...] = (
    Kpi("Total Revenue", "$847K", "+23.5%"),
    Kpi("Total Orders", "12,459", "+18.2%"),
    Kpi("Active Customers", "5,432", "+12.4%"),
    Kpi("Avg Order Value", "$68", "+4.3%"),
)

VALUE_TIERS: Tuple[ValueTier, ...] = (
    ValueTier("High Value (Top 20%)", 2340.0, 1086, 8.3, 80),
    ValueTier("Medium Value (60%)", 780.0, 3259, 4.1, 60),
    ValueTier("Low Value (20%)", 180.0, 1087, 1.2, 30),
)

CHURN_DRIVERS: Tuple[ChurnDriver, ...] = (
    ChurnDriver("Days Since Last Purchase", 92),
    ChurnDriver("Order Frequency Drop", 85),
    ChurnDriver("Cart Abandonment Rate", 78),
    ChurnDriver("Customer Service Contacts", 65),
    ChurnDriver("Email Engagement", 58),
)

CHURN_BUCKET_NOTES = {
    "Low Risk": "customers with regular purchase patterns",
    "Medium Risk": "customers with declining activity",
    "High Risk": "customers likely to churn soon",
}

OVERVIEW_INSIGHTS = {
    "revenue": "**Insight:** Revenue peaks during holiday season (Nov-Dec). Plan inventory accordingly.",
    "categories": "**Recommendation:** Focus marketing budget on top 3 categories for maximum ROI.",
    "regions": "**Action Item:** Investigate lower performance in underperforming regions.",
}

SALES_FINDINGS = (
    "Revenue shows 23.5% YoY growth with strong Q4 performance",
    "Average order value increased 4.3% indicating successful upselling",
    "Holiday season (Nov-Dec) accounts for 35% of annual revenue",
)

CUSTOMER_ACTIONS = (
    "Create VIP program for high-value segment (20%)",
    "Re-engagement campaign for medium-value customers",
    "Offer incentives to boost low-value segment frequency",
)

RETENTION_STRATEGIES = {
    "High Risk": (
        "Send personalized win-back offers (20% discount)",
        "Priority customer support outreach",
        "Exclusive early access to new products",
    ),
    "Medium Risk": (
        "Re-engagement email campaigns",
        "Product recommendations based on history",
        "Limited-time loyalty rewards",
    ),
}

CHURN_SAVINGS_NOTE = "Reducing churn by 5% could save **$127K annually** in revenue."
