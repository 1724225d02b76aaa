import logging

import pytest

from factory import FIXTURES, loadFixture


@pytest.fixture
def fixtures_dir():
    return FIXTURES

@pytest.fixture
def golden():
    return loadFixture('golden.json')

@pytest.fixture
def proof_json():
    return loadFixture('proof.json')

@pytest.fixture
def public_json():
    return loadFixture('public.json')

@pytest.fixture
def vkey_json():
    return loadFixture('vkey.json')

@pytest.fixture(autouse=True)
def _encoder_logs(caplog):
    caplog.set_level(logging.DEBUG, logger='Encoder Logger')
    yield
    # CLI runs attach a stderr handler bound to the captured stream
    logger = logging.getLogger('Encoder Logger')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
