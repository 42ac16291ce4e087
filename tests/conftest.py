import os
import sys

import pytest

# Ensure project root is on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from gazie.database.gateway import Gateway  # noqa: E402


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'data' / 'gazie.db'}"


@pytest.fixture()
def gateway(db_url):
    gw = Gateway(db_url)
    gw.initialize()
    try:
        yield gw
    finally:
        gw.close()


@pytest.fixture()
def empty_gateway(db_url):
    gw = Gateway(db_url, seed_samples=False)
    gw.initialize()
    try:
        yield gw
    finally:
        gw.close()
