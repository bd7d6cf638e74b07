import logging

import pytest

ROAD_CONFIG = [("chain", "11-speed"), ("tire_size", "23"), ("tape_color", "red")]

MOUNTAIN_CONFIG = [
    ("chain", "11-speed"),
    ("tire_size", "2.1"),
    ("front_shock", "Manitou"),
    ("rear_shock", "Fox", False),
]


@pytest.fixture(autouse=True)
def reset_bikeshop_logger():
    yield
    logger = logging.getLogger("bikeshop")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def road_config():
    return list(ROAD_CONFIG)


@pytest.fixture
def mountain_config():
    return list(MOUNTAIN_CONFIG)
