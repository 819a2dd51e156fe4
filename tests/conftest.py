"""
Shared pytest fixtures for the extsort test suite.
"""

import pytest

from extsort.utils import logger as logger_module
from extsort.utils import validator as validator_module


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch):
    """Give every test its own logger and validator instances"""
    monkeypatch.setattr(logger_module, "_global_logger", None)
    monkeypatch.setattr(validator_module, "_global_validator", None)


@pytest.fixture
def make_files(tmp_path):
    """Create empty files under tmp_path and return tmp_path"""
    def _make(*names, root=None):
        root = root or tmp_path
        for name in names:
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(name)
        return root
    return _make
