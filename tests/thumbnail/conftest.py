"""
Thumbnail Test Configuration and Fixtures

Shared fixtures for thumbnail module tests.
Mirrors the pattern from the storage and recording conftest files.

To use pytest:
    pip install pytest
    pytest tests/thumbnail/
"""

import json
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from thumbnail.implementations.mock_thumbnail_uploader import MockThumbnailUploader
from thumbnail.utils.progress_utils import ProgressReporter

# Minimal PNG signature plus padding, so size checks have something to count
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 1024

THUMBNAIL_URL = "https://example.com/thumb.jpg"


# =============================================================================
# FILE FIXTURES
# =============================================================================


@pytest.fixture
def temp_image_file(tmp_path):
    """
    Provide a small image file on disk.

    Usage:
        def test_upload(temp_image_file):
            uploader.set_thumbnail("abc", str(temp_image_file))
    """
    image_path = tmp_path / "thumbnail.png"
    image_path.write_bytes(PNG_BYTES)
    return image_path


@pytest.fixture
def missing_image_path(tmp_path):
    """Path of an image that does not exist"""
    return tmp_path / "does_not_exist.png"


# =============================================================================
# UPLOADER FIXTURES
# =============================================================================


@pytest.fixture
def mock_uploader():
    """Provide a MockThumbnailUploader that always succeeds"""
    return MockThumbnailUploader()


@pytest.fixture
def progress_reporter():
    """Provide a ProgressReporter that collects lines instead of printing"""
    lines = []
    reporter = ProgressReporter(output=lines.append)
    reporter.lines = lines
    return reporter


def make_chunk_status(fraction):
    """Fake MediaUploadProgress returning the given fraction"""
    status = MagicMock()
    status.progress.return_value = fraction
    return status


def make_http_error(code, message):
    """Real HttpError as raised by googleapiclient"""
    content = json.dumps({"error": {"code": code, "message": message}}).encode()
    return HttpError(httplib2.Response({"status": code}), content)


def make_set_response(url=THUMBNAIL_URL):
    """ThumbnailSetResponse with a single item"""
    return {
        "kind": "youtube#thumbnailSetResponse",
        "items": [
            {
                "default": {"url": url, "width": 120, "height": 90},
                "high": {"url": url.replace("thumb", "thumb_hq")},
            },
        ],
    }


@pytest.fixture
def youtube_service():
    """
    Provide a fake YouTube API client.

    The thumbnails().set() request uploads in two chunks by default.
    Override request.next_chunk.side_effect to change the behaviour.

    Usage:
        def test_upload(youtube_service):
            request = youtube_service.thumbnails.return_value.set.return_value
            request.next_chunk.side_effect = [(None, make_set_response())]
    """
    service = MagicMock()
    request = service.thumbnails.return_value.set.return_value
    request.next_chunk.side_effect = [
        (make_chunk_status(0.5), None),
        (None, make_set_response()),
    ]
    return service


# =============================================================================
# RESPONSE FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def http_error():
    """
    Provide a factory for googleapiclient HttpErrors.

    Usage:
        def test_forbidden(http_error):
            error = http_error(403, "forbidden")
    """
    return make_http_error


@pytest.fixture
def set_response():
    """Provide a factory for ThumbnailSetResponse dicts"""
    return make_set_response


@pytest.fixture
def chunk_status():
    """Provide a factory for fake chunk progress objects"""
    return make_chunk_status
