"""
Общие fixtures тестов exactcalc
"""

import pytest

from exactcalc.config import reset_config


@pytest.fixture(autouse=True)
def isolated_config():
    """Каждый тест начинается с конфигурации по умолчанию."""
    reset_config()
    yield
    reset_config()
