import os
import pytest
from hkfetch.core import config

@pytest.fixture(autouse=True)
def setup_test_environment(tmp_path):
    """Point the output file at a temporary directory for every test"""
    original_output_path = config.settings.OUTPUT_PATH

    config.settings.OUTPUT_PATH = os.path.join(str(tmp_path), "data", "hk-data.json")

    yield

    config.settings.OUTPUT_PATH = original_output_path
