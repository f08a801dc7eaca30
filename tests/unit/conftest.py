# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit test configuration for omnibase_envars.

Every test collected under tests/unit/ gets the ``unit`` marker, so the
suite can be split without per-module ``pytestmark`` boilerplate::

    pytest -m unit
    pytest -m "not unit"

Unit tests never depend on the real process environment: binder tests pass
an explicit ``environ`` mapping or patch ``os.environ`` for one block.
"""

from pathlib import Path

import pytest

_UNIT_ROOT = Path(__file__).parent


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the ``unit`` marker to every item collected below this directory."""
    for item in items:
        if _UNIT_ROOT not in Path(str(item.path)).parents:
            continue
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
