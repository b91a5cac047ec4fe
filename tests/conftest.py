"""
Shared pytest fixtures for all tests.
"""

from pathlib import Path

import pytest

from chunkwise.config.settings import get_settings

# ---------------------------------------------------------------------------
# Automatic test markers based on path
# ---------------------------------------------------------------------------
# Tests in ``tests/unit`` get the ``unit`` marker and tests in
# ``tests/integration`` get ``integration``, so ``pytest -m unit`` works
# without decorating every test.


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Dynamically add pytest markers depending on filepath."""
    root_path = Path(config.rootdir)

    for item in items:
        rel_path = Path(item.fspath).resolve().relative_to(root_path).as_posix()

        if rel_path.startswith("tests/unit/"):
            item.add_marker("unit")
        elif rel_path.startswith("tests/integration/"):
            item.add_marker("integration")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are lru_cached; drop the cache so env patches in one test never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
