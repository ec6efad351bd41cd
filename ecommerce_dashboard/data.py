"""
Mock data for the analytics dashboard.

Every figure here is synthetic. The random parts (monthly trend, category
and region performance) come from bounded uniform draws; segments, churn
buckets and top products are fixed literals.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
CATEGORIES = ("Electronics", "Clothing", "Home & Garden", "Sports", "Books")
REGIONS = ("North", "South", "East", "West")

# Months after this index get the holiday uplift.
SEASONAL_START_INDEX = 8

REVENUE_BASE = 45_000.0
REVENUE_SPREAD = 35_000.0
REVENUE_SEASONAL = 20_000.0

ORDERS_BASE = 800
ORDERS_SPREAD = 400
ORDERS_SEASONAL = 300

CATEGORY_SALES_RANGE = (40_000.0, 120_000.0)
CATEGORY_UNITS_RANGE = (500, 2_500)

REGION_REVENUE_RANGE = (80_000.0, 230_000.0)
REGION_CUSTOMERS_RANGE = (1_000, 4_000)

SeedLike = Union[int, np.random.Generator, None]


@dataclass(frozen=True)
class MonthlyPoint:
    month: str
    revenue: float
    orders: int


@dataclass(frozen=True)
class CategoryRecord:
    category: str
    sales: float
    units: int


@dataclass(frozen=True)
class RegionRecord:
    region: str
    revenue: float
    customers: int


@dataclass(frozen=True)
class Segment:
    name: str
    value: int
    color: str
    description: str


@dataclass(frozen=True)
class ChurnBucket:
    segment: str
    customers: int
    percentage: int


@dataclass(frozen=True)
class ProductRecord:
    name: str
    sales: float
    units: int


SEGMENTS: Tuple[Segment, ...] = (
    Segment("Champions", 23, "#10b981", "High value, frequent buyers"),
    Segment("Loyal", 18, "#3b82f6", "Regular customers"),
    Segment("Potential", 28, "#f59e0b", "New with potential"),
    Segment("At Risk", 15, "#ef4444", "Declining activity"),
    Segment("Lost", 16, "#6b7280", "Haven't purchased recently"),
)

CHURN_BUCKETS: Tuple[ChurnBucket, ...] = (
    ChurnBucket("Low Risk", 3420, 68),
    ChurnBucket("Medium Risk", 980, 20),
    ChurnBucket("High Risk", 600, 12),
)

TOP_PRODUCTS: Tuple[ProductRecord, ...] = (
    ProductRecord("Wireless Earbuds Pro", 45230.0, 892),
    ProductRecord("Smart Watch Ultra", 38900.0, 523),
    ProductRecord("Laptop Stand Deluxe", 32450.0, 1234),
    ProductRecord("LED Desk Lamp", 28700.0, 1567),
    ProductRecord("Ergonomic Chair", 25600.0, 234),
)


@dataclass(frozen=True)
class DataBundle:
    """All datasets shown on the dashboard, built once per session."""

    monthly_sales: Tuple[MonthlyPoint, ...]
    category_data: Tuple[CategoryRecord, ...]
    region_data: Tuple[RegionRecord, ...]
    segments: Tuple[Segment, ...]
    churn_data: Tuple[ChurnBucket, ...]
    top_products: Tuple[ProductRecord, ...]


def _as_rng(rng: SeedLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def generate_monthly_sales(rng: np.random.Generator) -> Tuple[MonthlyPoint, ...]:
    points = []
    for i, month in enumerate(MONTHS):
        seasonal = i > SEASONAL_START_INDEX
        revenue = REVENUE_BASE + rng.uniform(0.0, REVENUE_SPREAD)
        orders = ORDERS_BASE + int(rng.integers(0, ORDERS_SPREAD))
        if seasonal:
            revenue += REVENUE_SEASONAL
            orders += ORDERS_SEASONAL
        points.append(MonthlyPoint(month=month, revenue=float(revenue), orders=orders))
    return tuple(points)


def generate_category_data(rng: np.random.Generator) -> Tuple[CategoryRecord, ...]:
    records = [
        CategoryRecord(
            category=category,
            sales=float(rng.uniform(*CATEGORY_SALES_RANGE)),
            units=int(rng.integers(*CATEGORY_UNITS_RANGE)),
        )
        for category in CATEGORIES
    ]
    # sorted() is stable with reverse=True, so equal sales keep label order
    return tuple(sorted(records, key=lambda r: r.sales, reverse=True))


def generate_region_data(rng: np.random.Generator) -> Tuple[RegionRecord, ...]:
    return tuple(
        RegionRecord(
            region=region,
            revenue=float(rng.uniform(*REGION_REVENUE_RANGE)),
            customers=int(rng.integers(*REGION_CUSTOMERS_RANGE)),
        )
        for region in REGIONS
    )


def generate_data(rng: SeedLike = None) -> DataBundle:
    """
    Build a fresh bundle of mock datasets.

    ``rng`` may be a numpy Generator, an integer seed, or None for an
    unseeded source. The same seed always yields the same bundle.
    """
    generator = _as_rng(rng)

    bundle = DataBundle(
        monthly_sales=generate_monthly_sales(generator),
        category_data=generate_category_data(generator),
        region_data=generate_region_data(generator),
        segments=SEGMENTS,
        churn_data=CHURN_BUCKETS,
        top_products=TOP_PRODUCTS,
    )
    logger.debug(
        "Generated data bundle: %d months, %d categories, %d regions",
        len(bundle.monthly_sales),
        len(bundle.category_data),
        len(bundle.region_data),
    )
    return bundle


def to_frame(records: Sequence, record_type: Optional[type] = None) -> pd.DataFrame:
    """
    Convert a sequence of bundle records into a DataFrame for plotting.

    Pass ``record_type`` to keep the columns when ``records`` is empty.
    """
    if not records:
        if record_type is None:
            return pd.DataFrame()
        return pd.DataFrame(columns=[f.name for f in fields(record_type)])
    return pd.DataFrame([asdict(r) for r in records])
