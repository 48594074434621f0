"""
Conversion between engine policy tuples and stored rule records.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from shared.logging import get_logger
from .models import CasbinRule, VALUE_FIELDS

# ptype plus one slot per value field
RULE_FIELD_COUNT = 1 + len(VALUE_FIELDS)

logger = get_logger("policy_store.rules.codec")


def has_text(value: Optional[str]) -> bool:
    """Return True when the value contains a non-whitespace character."""
    return value is not None and bool(value.strip())


def to_record(ptype: str, rule: Sequence[str]) -> Optional[CasbinRule]:
    """Pad a policy tuple into a record, or return None if it has too many values."""
    fields = [ptype, *rule]
    fields.extend("" for _ in range(RULE_FIELD_COUNT - len(fields)))
    if len(fields) != RULE_FIELD_COUNT:
        logger.warning(
            "Rule size does not match record fields",
            ptype=ptype,
            size=len(fields),
        )
        return None
    return CasbinRule.from_list(fields)


def to_tuple(record: CasbinRule) -> Tuple[str, List[str]]:
    """Split a record into its type and all six value slots."""
    fields = record.to_list()
    return fields[0], fields[1:]


def build_filter(ptype: str, field_index: int, field_values: Sequence[Optional[str]]) -> Dict[str, Any]:
    """Build an equality filter; blank values match any slot content."""
    query: Dict[str, Any] = {"ptype": ptype}
    for offset, value in enumerate(field_values):
        if has_text(value):
            query[f"v{field_index + offset}"] = value
    return query
