import pandas as pd


def format_currency(value: float) -> str:
    if pd.isna(value):
        return "$0"
    return f"${value:,.0f}"


def format_number(value: float) -> str:
    if pd.isna(value):
        return "0"
    return f"{value:,.0f}"


def format_thousands(value: float) -> str:
    if pd.isna(value):
        return "$0.0K"
    return f"${value / 1000:.1f}K"
