# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides common record fixtures
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# Settings are cached on first use, so these must be in place before any
# test calls check() or setup_logging()

os.environ.setdefault("RECORD_PRIMITIVES_ENVIRONMENT", "test")
os.environ.setdefault("RECORD_PRIMITIVES_LOG_LEVEL", "DEBUG")
os.environ.setdefault("RECORD_PRIMITIVES_ALLOW_BREAKPOINTS", "false")

import pytest


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def users():
    """Records with id and name properties."""
    return [
        {"id": 1, "name": "ada", "role": "admin"},
        {"id": 2, "name": "grace", "role": "dev"},
        {"id": 3, "name": "linus", "role": "dev"},
        {"id": 2, "name": "barbara", "role": "ops"},
    ]


@pytest.fixture
def nested_record():
    """A record with nested records and lists."""
    return {
        "user": {
            "profile": {"first": "Ada", "last": "Lovelace", "age": 36},
            "tags": ["math", "engines"],
            "manager": None,
        },
        "count": 0,
    }
