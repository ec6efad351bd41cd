from ecommerce_dashboard.data import DataBundle, generate_data, to_frame
from ecommerce_dashboard.state import Region, Tab, ViewState

__all__ = [
    "DataBundle",
    "Region",
    "Tab",
    "ViewState",
    "generate_data",
    "to_frame",
]
