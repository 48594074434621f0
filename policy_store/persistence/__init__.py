"""
Persistence package.

Provides the MongoDB-backed Casbin adapter that loads, saves, adds and
removes policy rules stored as fixed-width rule documents.
"""

from .mongo import MongoAdapter

__all__ = ["MongoAdapter"]
