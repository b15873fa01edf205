"""
Upload Test Configuration and Fixtures

Shared fixtures for video upload tests.

To run:
    pip install -e .[test]
    pytest tests/video_upload/
"""

import io
import json
from pathlib import Path

import pytest

from config import settings
from video_upload.catalog.category_catalog import CategoryCatalog, clear_catalog_cache
from video_upload.config import UploadConfig
from video_upload.controllers.upload_controller import UploadController
from video_upload.implementations.console_reporter import ConsoleProgressReporter
from video_upload.implementations.mock_uploader import MockUploader

VIDEO_FILENAME = "ouP-2021-02-11_12-27-41.avi"
VIDEO_SIZE = 1_000_000

# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture
def upload_config(tmp_path):
    """
    Provide an UploadConfig that ignores any real YAML file.

    Usage:
        def test_something(upload_config):
            assert upload_config.category_name == "Science & Technology"
    """
    return UploadConfig(
        config_path=tmp_path / "missing.yaml",
        title_prefix="COINBASE PRO",
        category_name="Science & Technology",
        filename_prefix="ouP-",
        privacy_status="unlisted",
        tags=["Coinbase", "Coinbase Pro"],
        client_secret_path=str(tmp_path / "client_secret.json"),
        token_path=str(tmp_path / "token.json"),
    )


# =============================================================================
# CATALOG FIXTURES
# =============================================================================


@pytest.fixture
def catalog_path():
    """Path to the bundled category catalog"""
    return Path(settings.CONFIG_DIR) / "youtube-categories.json"


@pytest.fixture
def catalog(catalog_path):
    """Provide the bundled CategoryCatalog"""
    return CategoryCatalog.load(catalog_path)


@pytest.fixture
def write_catalog(tmp_path):
    """
    Write a custom catalog document and return its path.

    Usage:
        def test_catalog(write_catalog):
            path = write_catalog({"items": []})
    """

    def _write(document, name="categories.json"):
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_catalog_cache():
    """Each test starts with an empty process-wide catalog cache"""
    clear_catalog_cache()
    yield
    clear_catalog_cache()


# =============================================================================
# VIDEO FIXTURES
# =============================================================================


@pytest.fixture
def video_file(tmp_path):
    """
    Create a 1,000,000 byte video named after the recording convention.

    Usage:
        def test_upload(video_file):
            controller.upload_video(video_file)
    """
    path = tmp_path / VIDEO_FILENAME
    path.write_bytes(b"\0" * VIDEO_SIZE)
    return path


# =============================================================================
# UPLOADER FIXTURES
# =============================================================================


@pytest.fixture
def mock_uploader():
    """Stub transport returning video id 'abc123' in 250 KB chunks"""
    return MockUploader(video_id="abc123", chunk_size=250_000)


@pytest.fixture
def output():
    """Text buffer for reporter output"""
    return io.StringIO()


@pytest.fixture
def reporter(output):
    """ConsoleProgressReporter writing into the ``output`` buffer"""
    return ConsoleProgressReporter(stream=output)


@pytest.fixture
def controller(mock_uploader, catalog, upload_config):
    """UploadController wired to the stub transport"""
    return UploadController(
        uploader=mock_uploader,
        catalog=catalog,
        config=upload_config,
    )


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Full workflow tests")
