import random
from pathlib import Path

import pytest

import obama64

PLUGIN_DIR = Path(__file__).resolve().parent.parent / "obama64" / "plugins"


@pytest.fixture(scope="session", autouse=True)
def plugins():
    return obama64.load_plugins(PLUGIN_DIR)


@pytest.fixture
def codec():
    return obama64.Obama64(rng=random.Random(1234))
