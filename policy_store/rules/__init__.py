"""
Rule record package.

Defines the fixed-width record stored for each Casbin policy rule and the
codec that pads engine tuples into records, unpads them on load, and
builds the partial-match filters used for removal.

Modules of interest:
- models: The CasbinRule record and its MongoDB document shape.
- codec: Tuple/record conversion and removal filter construction.
"""

from .models import CasbinRule, VALUE_FIELDS
from .codec import RULE_FIELD_COUNT, build_filter, has_text, to_record, to_tuple

__all__ = [
    "CasbinRule",
    "VALUE_FIELDS",
    "RULE_FIELD_COUNT",
    "build_filter",
    "has_text",
    "to_record",
    "to_tuple",
]
