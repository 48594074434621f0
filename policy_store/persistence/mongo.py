"""
MongoDB persistence layer for Casbin policies.
"""

from typing import Dict, List, Optional, Sequence

from pymongo import DeleteOne, MongoClient
from pymongo.collection import Collection

from shared.config import AdapterSettings, DEFAULT_COLLECTION_NAME, DEFAULT_DB_NAME, get_settings
from shared.errors import PolicyIntegrityError
from shared.logging import get_logger
from ..rules.codec import build_filter, to_record, to_tuple
from ..rules.models import CasbinRule

POLICY_SECTIONS = ("p", "g")


def _or_default(value: Optional[str], default: str) -> str:
    return default if value is None or not value.strip() else value


def _strip_trailing_blanks(values: List[str]) -> List[str]:
    end = len(values)
    while end and values[end - 1] == "":
        end -= 1
    return values[:end]


class MongoAdapter:
    """Casbin adapter that keeps policy rules in one MongoDB collection.

    Implements the Casbin adapter interface (load_policy, save_policy,
    add_policy, add_policies, remove_policy, remove_filtered_policy,
    remove_policies). The model passed to load_policy and save_policy is
    read through ``model.model[sec][ptype]``, whose ``policy`` list and
    ``policy_map`` index are maintained by the engine.

    Every rule is stored as a ``CasbinRule`` document (``ptype`` plus
    ``v0``..``v5``). The adapter keeps no state besides the client and the
    collection coordinates, so one instance can be shared across threads.
    Store errors propagate to the caller unchanged.
    """

    def __init__(self, client: MongoClient, db_name: Optional[str] = None,
                 collection_name: Optional[str] = None):
        self.client = client
        self.db_name = _or_default(db_name, DEFAULT_DB_NAME)
        self.collection_name = _or_default(collection_name, DEFAULT_COLLECTION_NAME)
        self.logger = get_logger("policy_store.persistence.mongo")

    @classmethod
    def from_settings(cls, settings: Optional[AdapterSettings] = None) -> "MongoAdapter":
        """Create an adapter with its own client from connection settings."""
        settings = settings or get_settings()
        client = MongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
        )
        return cls(client, settings.db_name, settings.collection_name)

    @property
    def collection(self) -> Collection:
        return self.client[self.db_name][self.collection_name]

    def clear_collection(self):
        """Drop the whole rule collection."""
        self.collection.drop()

    def load_policy(self, model):
        """Load all stored rules into the model, merging duplicates.

        Trailing empty values are dropped from each rule, since a stored
        record cannot tell them apart from padding. A rule saved as
        ``["alice", "data1", "read", ""]`` reloads as
        ``["alice", "data1", "read"]``.
        """
        policies = self.loading()
        for ptype, rules in policies.items():
            section = model.model.get(ptype[0])
            if section is None or ptype not in section:
                raise PolicyIntegrityError(
                    "Stored policy type is not defined by the model",
                    details={"ptype": ptype}
                )
            assertion = section[ptype]
            for rule in rules:
                assertion.policy.append(rule)
                assertion.policy_map[",".join(rule)] = len(assertion.policy) - 1

        self.logger.debug(
            "Policy loaded",
            collection=self.collection_name,
            rules=sum(len(rules) for rules in policies.values()),
        )

    def loading(self) -> Dict[str, List[List[str]]]:
        """Read distinct stored rules grouped by policy type."""
        records: Dict[CasbinRule, None] = {}
        for document in self.collection.find():
            records.setdefault(CasbinRule.from_document(document), None)

        policies: Dict[str, List[List[str]]] = {}
        for record in records:
            ptype, values = to_tuple(record)
            policies.setdefault(ptype, []).append(_strip_trailing_blanks(values))
        return policies

    def save_policy(self, model):
        """Replace every stored rule with the policies held by the model.

        The collection is dropped before the new rules are inserted; there
        is no transaction around the two steps.
        """
        self.clear_collection()

        documents = []
        for sec in POLICY_SECTIONS:
            for ptype, assertion in model.model.get(sec, {}).items():
                for rule in assertion.policy:
                    record = to_record(ptype, rule)
                    if record is not None:
                        documents.append(record.to_document())

        if documents:
            self.collection.insert_many(documents)
        self.logger.debug("Policy saved", collection=self.collection_name, rules=len(documents))

    def add_policy(self, sec, ptype, rule):
        """Add a policy rule to the storage."""
        record = to_record(ptype, rule)
        if record is not None:
            self.collection.insert_one(record.to_document())
            self.logger.debug("Policy added", ptype=ptype, rules=1)

    def add_policies(self, sec, ptype, rules):
        """Add policy rules to the storage in one bulk insert."""
        documents = []
        skipped = 0
        for rule in rules:
            record = to_record(ptype, rule)
            if record is None:
                skipped += 1
            else:
                documents.append(record.to_document())

        if documents:
            self.collection.insert_many(documents)
            self.logger.debug("Policies added", ptype=ptype, rules=len(documents), skipped=skipped)

    def remove_policy(self, sec, ptype, rule):
        """Remove one stored rule matching the given values."""
        if not rule:
            return
        self.remove_filtered_policy(sec, ptype, 0, *rule)

    def remove_filtered_policy(self, sec, ptype, field_index, *field_values):
        """Remove one stored rule matching the given values from field_index on.

        Blank values match anything. Only the first matching rule is
        deleted, even when several match.
        """
        if not field_values:
            return
        result = self.collection.delete_one(build_filter(ptype, field_index, field_values))
        self.logger.debug(
            "Policy removed",
            ptype=ptype,
            field_index=field_index,
            deleted=result.deleted_count,
        )

    def remove_policies(self, sec, ptype, rules: Sequence[Sequence[str]]):
        """Remove one stored rule per given rule in a single bulk write."""
        requests = [
            DeleteOne(build_filter(ptype, 0, rule))
            for rule in rules
            if rule
        ]
        if requests:
            self.collection.bulk_write(requests)
            self.logger.debug("Policies removed", ptype=ptype, requests=len(requests))
