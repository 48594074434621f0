"""
MongoDB policy storage for the Casbin authorization engine.

Usage:

    import casbin
    from pymongo import MongoClient
    from policy_store import MongoAdapter

    adapter = MongoAdapter(MongoClient("mongodb://localhost:27017"), "casbin")
    enforcer = casbin.Enforcer("model.conf", adapter)
"""

from .persistence import MongoAdapter
from .rules import CasbinRule

__all__ = ["MongoAdapter", "CasbinRule"]

__version__ = "1.0.0"
