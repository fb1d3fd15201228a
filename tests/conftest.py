"""Test configuration and fixtures for doublysure.

Fixtures:
    side_effects: externally owned list that deferred callables append to
    enable_resolution_receipts: turn on sure_resolution receipts
"""
import pytest


@pytest.fixture
def side_effects() -> list:
    """Provide an empty list observed by deferred callables."""
    return []


@pytest.fixture
def enable_resolution_receipts(monkeypatch):
    """Enable resolution receipts for the duration of a test.

    Flags are read through the features module, patching it is enough.
    """
    import doublysure.config.features as features
    monkeypatch.setattr(features, 'FEATURE_RESOLUTION_RECEIPTS_ENABLED', True)
