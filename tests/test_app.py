import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("DASHBOARD_SEED", "5")
    at = AppTest.from_file(APP_PATH, default_timeout=60)
    at.run()
    return at


def test_renders_overview(app):
    assert not app.exception
    assert app.title[0].value == "E-Commerce Analytics Dashboard"
    assert len(app.metric) >= 4
    assert app.session_state["view_state"].selected_tab.value == "overview"


def test_switching_tabs(app):
    for tab_id in ("sales", "customers", "churn", "overview"):
        app.radio(key="tab_choice").set_value(tab_id).run()
        assert not app.exception
        assert app.session_state["view_state"].selected_tab.value == tab_id


def test_region_filter_leaves_bundle_unchanged(app):
    bundle = app.session_state["bundle"]

    app.radio(key="tab_choice").set_value("sales").run()
    app.selectbox(key="region_filter").set_value("North").run()

    assert not app.exception
    assert app.session_state["view_state"].selected_region.value == "North"
    assert app.session_state["bundle"] == bundle


def test_malformed_seed_shows_error(monkeypatch):
    monkeypatch.setenv("DASHBOARD_SEED", "not-a-number")
    at = AppTest.from_file(APP_PATH, default_timeout=60)
    at.run()
    assert at.error
    assert "DASHBOARD_SEED" in at.error[0].value


def _chart_hover(at, index=0):
    spec = json.loads(at.get("plotly_chart")[index].proto.spec)
    return spec["data"][0]["hovertemplate"]


def test_churn_chart_shows_plain_counts(app):
    app.radio(key="tab_choice").set_value("churn").run()

    assert not app.exception
    hover = _chart_hover(app)
    assert "$" not in hover
    assert ",.0f" in hover


def test_revenue_chart_shows_dollars(app):
    assert "$" in _chart_hover(app)


def test_bad_log_level_shows_error(monkeypatch):
    monkeypatch.setenv("DASHBOARD_LOG_LEVEL", "verbose")
    at = AppTest.from_file(APP_PATH, default_timeout=60)
    at.run()
    assert at.error
    assert "DASHBOARD_LOG_LEVEL" in at.error[0].value
