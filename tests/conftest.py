from __future__ import annotations

import os
from unittest import mock

import pytest

ENV_VARS = ("LOG_FILE", "LOG_LEVEL", "HOSTS_FILE")


@pytest.fixture(autouse=True)
def clean_env():
    # load_dotenv writes straight into os.environ; restore it after every test
    with mock.patch.dict(os.environ):
        for name in ENV_VARS:
            os.environ.pop(name, None)
        yield
