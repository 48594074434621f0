"""
Shared utilities for the policy store adapter.

This package aggregates common building blocks:

- config: Connection settings via pydantic-settings
- logging: Structured logging with request correlation
- errors: Canonical error types and responses
- test_helpers: In-memory MongoDB doubles and policy fixtures for tests

Do not import from policy_store into shared/.
"""
