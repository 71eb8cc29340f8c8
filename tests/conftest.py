"""Pytest configuration and fixtures"""
import logging
import os
import pytest

# Set test environment variables
os.environ.setdefault("PROJECT_NAME", "ShopCart Test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from shopcart.core.config import Settings
from shopcart.core.logging_config import LOGGER_NAME
from shopcart.schemas.cart_schema import ShoppingItem
from shopcart.services.cart_service import CartService, ShoppingCart


@pytest.fixture
def settings():
    """Settings aislados del .env local"""
    return Settings(_env_file=None)


@pytest.fixture
def cart():
    """Empty cart"""
    return ShoppingCart()


@pytest.fixture
def cart_service(settings):
    """Cart service with no sessions"""
    return CartService(settings)


@pytest.fixture
def item_a():
    return ShoppingItem(uuid="a", price=10, quantity=2, name="Guantes")


@pytest.fixture
def item_b():
    return ShoppingItem(uuid="b", price=5, quantity=1, name="Martillo")


@pytest.fixture
def shopcart_caplog(caplog):
    """caplog attached to the package logger, which does not propagate to root"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
