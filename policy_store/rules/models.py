"""
Stored rule record for the policy store adapter.
"""

from typing import Any, Dict, List, Mapping
from dataclasses import dataclass, astuple

from shared.errors import PolicyIntegrityError

VALUE_FIELDS = ("v0", "v1", "v2", "v3", "v4", "v5")


@dataclass(frozen=True)
class CasbinRule:
    """Fixed-width policy record: a rule type and six value slots.

    Unused slots hold empty strings, so two records compare equal exactly
    when all seven fields match. The store-assigned ``_id`` is never part
    of the record.
    """
    ptype: str
    v0: str = ""
    v1: str = ""
    v2: str = ""
    v3: str = ""
    v4: str = ""
    v5: str = ""

    @classmethod
    def from_list(cls, fields: List[str]) -> "CasbinRule":
        """Build a record from ``[ptype, v0, ..., v5]``."""
        return cls(*fields)

    def to_list(self) -> List[str]:
        """Return ``[ptype, v0, ..., v5]``."""
        return list(astuple(self))

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "CasbinRule":
        """Read a record from a stored MongoDB document."""
        ptype = document.get("ptype")
        if not isinstance(ptype, str) or not ptype.strip():
            raise PolicyIntegrityError(
                "Stored rule has no policy type",
                details={"id": str(document.get("_id"))}
            )

        extra = [
            key for key in document
            if key.startswith("v") and key[1:].isdigit() and key not in VALUE_FIELDS
        ]
        if extra:
            raise PolicyIntegrityError(
                "Stored rule has more value fields than supported",
                details={"id": str(document.get("_id")), "fields": sorted(extra)}
            )

        values = []
        for name in VALUE_FIELDS:
            value = document.get(name)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise PolicyIntegrityError(
                    "Stored rule value is not a string",
                    details={"id": str(document.get("_id")), "field": name}
                )
            values.append(value)

        return cls(ptype, *values)

    def to_document(self) -> Dict[str, str]:
        """Return the document shape persisted in MongoDB."""
        document = {"ptype": self.ptype}
        for name, value in zip(VALUE_FIELDS, self.to_list()[1:]):
            document[name] = value
        return document
