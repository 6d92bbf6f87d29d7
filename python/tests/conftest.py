import os

import pytest
from dotenv import load_dotenv

# Set environment variable early to suppress warnings during imports
os.environ["PYTHONWARNINGS"] = "ignore::DeprecationWarning"


def pytest_configure(config):
    """Configure pytest with global settings."""
    load_dotenv()


@pytest.fixture(autouse=True)
def default_line_length(monkeypatch):
    """Keep message layout tests independent of a local STRINGEQ_MAX_LINE_LENGTH."""
    monkeypatch.delenv("STRINGEQ_MAX_LINE_LENGTH", raising=False)
