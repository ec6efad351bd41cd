from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Tuple, Union

from ecommerce_dashboard.data import DataBundle

logger = logging.getLogger(__name__)


class Tab(str, Enum):
    OVERVIEW = "overview"
    SALES = "sales"
    CUSTOMERS = "customers"
    CHURN = "churn"

    @property
    def label(self) -> str:
        return TAB_LABELS[self]


class Region(str, Enum):
    ALL = "All"
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    @property
    def label(self) -> str:
        return "All Regions" if self is Region.ALL else self.value


TAB_LABELS: Dict[Tab, str] = {
    Tab.OVERVIEW: "Overview",
    Tab.SALES: "Sales Analysis",
    Tab.CUSTOMERS: "Customer Insights",
    Tab.CHURN: "Churn Prediction",
}

TAB_FIELDS: Dict[Tab, Tuple[str, ...]] = {
    Tab.OVERVIEW: ("monthly_sales", "category_data", "region_data", "top_products"),
    Tab.SALES: ("monthly_sales",),
    Tab.CUSTOMERS: ("segments",),
    Tab.CHURN: ("churn_data",),
}


class ViewState:
    """
    Selected tab and region for one dashboard session.

    The bundle is fixed at construction. The region selection is kept
    for display only: no region breakdown exists for the monthly or
    category figures, so ``visible_data`` is the same for every region.
    """

    def __init__(
        self,
        bundle: DataBundle,
        selected_tab: Union[Tab, str] = Tab.OVERVIEW,
        selected_region: Union[Region, str] = Region.ALL,
    ):
        self.bundle = bundle
        self.selected_tab = _coerce(Tab, selected_tab)
        self.selected_region = _coerce(Region, selected_region)

    def set_tab(self, tab: Union[Tab, str]) -> Tab:
        selected = _coerce(Tab, tab)
        if selected is not self.selected_tab:
            logger.debug("Selected tab: %s", selected.value)
        self.selected_tab = selected
        return self.selected_tab

    def set_region(self, region: Union[Region, str]) -> Region:
        selected = _coerce(Region, region)
        if selected is not self.selected_region:
            logger.debug("Selected region: %s", selected.value)
        self.selected_region = selected
        return self.selected_region

    def visible_fields(self) -> Tuple[str, ...]:
        return TAB_FIELDS[self.selected_tab]

    def visible_data(self) -> Dict[str, Any]:
        return {name: getattr(self.bundle, name) for name in self.visible_fields()}

    def __repr__(self) -> str:
        return (
            f"ViewState(selected_tab={self.selected_tab.value!r}, "
            f"selected_region={self.selected_region.value!r})"
        )


def _coerce(enum_type, value):
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        logger.warning("Rejected %s value %r", enum_type.__name__, value)
        raise ValueError(
            f"Unknown {enum_type.__name__.lower()} {value!r}; expected one of: {allowed}"
        ) from None
