"""
Shared error handling for the policy store adapter.
"""

from typing import Dict, Any, Optional


class PolicyStoreException(Exception):
    """Base exception for the policy store adapter."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PolicyIntegrityError(PolicyStoreException):
    """Stored policy data that does not fit the rule record contract."""

    def __init__(self, message: str = "Stored policy is malformed", details: Optional[Dict[str, Any]] = None):
        super().__init__("POLICY_INTEGRITY_ERROR", message, details)


class ConfigurationError(PolicyStoreException):
    """Configuration-related errors."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
