"""
Database operations package.

Contains table-specific operations classes (one per table).
Each *_sql.py file owns all SQL for that specific table.
"""

from .meta_sql import MetaOperations
from .smartlinks_sql import SmartlinkOperations, from_payload, to_payload

__all__ = [
    "MetaOperations",
    "SmartlinkOperations",
    "from_payload",
    "to_payload",
]
