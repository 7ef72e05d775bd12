from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime

import pytest

from stockroom.domain.entities import InventoryItem
from stockroom.domain.value_objects.ids import ItemId
from stockroom.logging_config import LOG_NAME

ADDED_AT = datetime(2024, 5, 1, 9, 30, 0)


@pytest.fixture(autouse=True)
def reset_logger_handlers() -> Generator[None, None, None]:
    """Ensure every test starts and ends without package log handlers attached."""
    logger = logging.getLogger(LOG_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_item():
    def _make(item_id: int, name: str = "Item", quantity: int = 1) -> InventoryItem:
        return InventoryItem(id=ItemId(item_id), name=name, quantity=quantity, date_added=ADDED_AT)

    return _make
