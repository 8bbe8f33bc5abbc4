"""
Dashboard (link list) state for the shortlink client.
"""

from .controller import DashboardController, CreateLinkForm
from .debounce import Debouncer
from .projection import SortKey, SortOrder, derive_projection, matches_search

__all__ = [
    "DashboardController",
    "CreateLinkForm",
    "Debouncer",
    "SortKey",
    "SortOrder",
    "derive_projection",
    "matches_search",
]
