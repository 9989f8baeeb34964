"""Shared test fixtures for pagination window tests."""
import pytest


@pytest.fixture
def short_list_config():
    """Five pages, positioned on the last one."""
    return {"offset": 40, "limit": 10, "total": 50}


@pytest.fixture
def long_list_config():
    """Nine pages, positioned in the middle."""
    return {"offset": 40, "limit": 10, "total": 90}


@pytest.fixture
def valid_configs():
    """A spread of valid configurations for property checks."""
    configs = []
    for limit in (1, 3, 10):
        for total in (0, 1, 9, 10, 11, 25, 90, 137):
            offsets = range(0, max(total, 1), max(limit // 2, 1))
            for offset in offsets:
                configs.append({"offset": offset, "limit": limit, "total": total})
    return configs
