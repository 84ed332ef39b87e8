"""
Static data sources.
"""

from data.seed import PRODUCTION_RECORDS, HISTORY_ENTRIES

__all__ = [
    "PRODUCTION_RECORDS",
    "HISTORY_ENTRIES",
]
