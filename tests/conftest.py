"""
Pytest configuration and shared fixtures.
"""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from crawl_config import CrawlConfig
from dictionary_catalog import DictionaryDescriptor

BASE_URL = "https://example.test/dictionaries"


def make_response(status_code=200, text=""):
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = text.encode('utf-8')
    return response


class FakeRemote:
    """Stand-in for requests.get serving files by URL."""

    def __init__(self, files=None):
        self.files = dict(files or {})
        self.requested = []

    def __call__(self, url, *args, **kwargs):
        self.requested.append(url)
        value = self.files.get(url)
        if isinstance(value, Exception):
            raise value
        if value is None:
            return make_response(404)
        return make_response(200, value)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up after the test."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def config(temp_dir):
    return CrawlConfig(dictionaries_dir=temp_dir / 'dictionaries', base_url=BASE_URL)


@pytest.fixture
def descriptor():
    return DictionaryDescriptor('xx', 'xx_YY', 'Test Language', 'GPL-3.0', 'COPYING')


@pytest.fixture
def remote_files(descriptor):
    """Complete upstream file set for the test descriptor."""
    folder_url = f"{BASE_URL}/{descriptor.folder}"
    return {
        f"{folder_url}/xx_YY.dic": "2\r\nalpha \r\nbeta\r\n\r\n",
        f"{folder_url}/xx_YY.aff": "SET ISO8859-1\r\nTRY abc\t\r\n",
        f"{folder_url}/COPYING": "\ufeffGNU GENERAL PUBLIC LICENSE\n\n\n",
    }
