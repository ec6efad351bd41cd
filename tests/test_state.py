import logging

import pytest

from ecommerce_dashboard.data import generate_data
from ecommerce_dashboard.state import TAB_FIELDS, Region, Tab, ViewState


@pytest.fixture
def view():
    return ViewState(generate_data(11))


def test_defaults(view):
    assert view.selected_tab is Tab.OVERVIEW
    assert view.selected_region is Region.ALL


def test_set_tab_by_id(view):
    view.set_tab("churn")
    assert view.selected_tab == "churn"
    assert view.selected_tab is Tab.CHURN


def test_set_tab_last_write_wins(view):
    view.set_tab(Tab.SALES)
    view.set_tab("customers")
    assert view.selected_tab is Tab.CUSTOMERS


def test_unknown_tab_is_rejected(view):
    view.set_tab("sales")
    with pytest.raises(ValueError, match="not-a-real-tab"):
        view.set_tab("not-a-real-tab")
    assert view.selected_tab is Tab.SALES


def test_unknown_region_is_rejected(view):
    view.set_region("East")
    with pytest.raises(ValueError):
        view.set_region("Atlantis")
    assert view.selected_region is Region.EAST


def test_invalid_initial_values_rejected():
    with pytest.raises(ValueError):
        ViewState(generate_data(0), selected_tab="reports")


def test_every_tab_has_fields():
    assert set(TAB_FIELDS) == set(Tab)


def test_visible_data_per_tab(view):
    expected = {
        "overview": {"monthly_sales", "category_data", "region_data", "top_products"},
        "sales": {"monthly_sales"},
        "customers": {"segments"},
        "churn": {"churn_data"},
    }
    for tab_id, fields in expected.items():
        view.set_tab(tab_id)
        data = view.visible_data()
        assert set(data) == fields
        for name, value in data.items():
            assert value is getattr(view.bundle, name)


def test_region_filter_does_not_change_data(view):
    categories = view.bundle.category_data
    regions = view.bundle.region_data
    view.set_tab("sales")
    before = view.visible_data()

    view.set_region("North")

    assert view.selected_region is Region.NORTH
    assert view.bundle.category_data == categories
    assert view.bundle.region_data == regions
    assert view.visible_data() == before


def test_labels():
    assert [t.label for t in Tab] == [
        "Overview",
        "Sales Analysis",
        "Customer Insights",
        "Churn Prediction",
    ]
    assert Region.ALL.label == "All Regions"
    assert Region.WEST.label == "West"


def test_selection_logged_only_on_change(view, caplog):
    caplog.set_level(logging.DEBUG, logger="ecommerce_dashboard.state")

    view.set_tab("overview")
    view.set_region("All")
    assert not caplog.records

    view.set_tab("sales")
    view.set_tab("sales")
    view.set_region("West")
    view.set_region("West")
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Selected tab: sales", "Selected region: West"]
