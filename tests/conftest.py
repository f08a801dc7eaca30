# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_envars tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from omnibase_envars.binding import field_binding_cache as cache_module
from omnibase_envars.conversion import converter_registry as registry_module
from omnibase_envars.models import ModelCulture


@pytest.fixture(autouse=True)
def reset_singletons() -> Iterator[None]:
    """Reset the converter registry and field binding cache around each test."""
    with registry_module._singleton_lock:
        registry_module._registry = None
    with cache_module._singleton_lock:
        cache_module._cache = None
    yield
    with registry_module._singleton_lock:
        registry_module._registry = None
    with cache_module._singleton_lock:
        cache_module._cache = None


@pytest.fixture
def invariant_culture() -> ModelCulture:
    """Provide the invariant culture."""
    return ModelCulture.invariant()


@pytest.fixture
def german_culture() -> ModelCulture:
    """Provide the de_DE culture (decimal comma, dot grouping)."""
    return ModelCulture.from_locale("de_DE")


@pytest.fixture
def us_culture() -> ModelCulture:
    """Provide the en_US culture."""
    return ModelCulture.from_locale("en_US")
