from typing import Generator

import pytest

from config import config


@pytest.fixture(autouse=True)
def _reset_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.delenv("SIAWALLET_SIGNIFICANT_DIGITS", raising=False)
    config.cache_clear()
    yield
    config.cache_clear()
