"""
YouTube Uploader Tests

The API resource is replaced with a fake whose insert request replays a
scripted sequence of next_chunk() results.
"""

import io

import httplib2
import pytest
from googleapiclient.errors import HttpError

from video_upload.exceptions import UploadError
from video_upload.implementations.youtube_uploader import YouTubeUploader
from video_upload.models.video_metadata import VideoMetadata


class FakeStatus:
    def __init__(self, resumable_progress):
        self.resumable_progress = resumable_progress


class FakeRequest:
    """Replays (status, response) tuples or raises scripted errors"""

    def __init__(self, steps):
        self.steps = list(steps)
        self.retries = []

    def next_chunk(self, num_retries=0):
        self.retries.append(num_retries)
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step


class FakeVideos:
    def __init__(self, request):
        self.request = request
        self.insert_kwargs = None

    def insert(self, **kwargs):
        self.insert_kwargs = kwargs
        return self.request


class FakeService:
    def __init__(self, request):
        self._videos = FakeVideos(request)

    def videos(self):
        return self._videos


class FakeOAuth:
    def is_authenticated(self):
        return True

    def get_credentials(self):
        raise AssertionError("service is pre-built")


class RecordingReporter:
    """Collects every event handled"""

    def __init__(self):
        self.events = []

    def handle(self, event):
        self.events.append(event)


def http_error(status, message):
    content = (
        '{"error": {"code": %d, "message": "%s", '
        '"errors": [{"message": "%s", "reason": "quotaExceeded"}, '
        '{"message": "Daily limit reached", "reason": "dailyLimitExceeded"}]}}'
        % (status, message, message)
    ).encode()
    return HttpError(httplib2.Response({"status": status}), content)


@pytest.fixture
def metadata():
    return VideoMetadata(
        title="COINBASE PRO - 2021-02-11 12:27:41",
        description="desc",
        category_id="28",
        tags=("Coinbase",),
    )


def make_uploader(steps):
    request = FakeRequest(steps)
    service = FakeService(request)
    uploader = YouTubeUploader(FakeOAuth(), chunk_size=256 * 1024, youtube_service=service)
    return uploader, service, request


@pytest.mark.unit
class TestYouTubeUploader:
    """Chunk loop, events and error aggregation"""

    def test_successful_upload_events(self, metadata):
        """Chunk progress, final total and completion are reported in order"""
        uploader, service, request = make_uploader(
            [
                (FakeStatus(262144), None),
                (FakeStatus(524288), None),
                (None, {"id": "abc123"}),
            ]
        )
        reporter = RecordingReporter()

        video_id = uploader.upload(metadata, io.BytesIO(b"x" * 600_000), reporter)

        assert video_id == "abc123"
        assert [e.bytes_sent for e in reporter.events[:3]] == [262144, 524288, 600_000]
        assert reporter.events[-1].resource_id == "abc123"
        assert request.retries == [uploader.num_retries] * 3

    def test_request_body_and_parts(self, metadata):
        """insert() receives the metadata body and snippet,status parts"""
        uploader, service, _ = make_uploader([(None, {"id": "v"})])

        uploader.upload(metadata, io.BytesIO(b"x"), RecordingReporter())

        kwargs = service.videos().insert_kwargs
        assert kwargs["part"] == "snippet,status"
        assert kwargs["body"] == metadata.to_request_body()
        assert kwargs["media_body"].mimetype() == "video/*"
        assert kwargs["media_body"].resumable() is True

    def test_http_error_aggregates_causes(self, metadata):
        """Every API error detail becomes its own cause"""
        uploader, _, _ = make_uploader(
            [(FakeStatus(262144), None), http_error(403, "Quota exceeded")]
        )
        reporter = RecordingReporter()

        with pytest.raises(UploadError) as excinfo:
            uploader.upload(metadata, io.BytesIO(b"x" * 600_000), reporter)

        errors = excinfo.value.errors
        assert errors[0].startswith("HTTP 403")
        assert "Daily limit reached" in errors
        failed = reporter.events[-1]
        assert failed.error is not None
        assert failed.bytes_sent == 262144

    def test_network_error(self, metadata):
        """Socket errors become UploadError"""
        uploader, _, _ = make_uploader([ConnectionResetError("reset by peer")])

        with pytest.raises(UploadError) as excinfo:
            uploader.upload(metadata, io.BytesIO(b"x"), RecordingReporter())

        assert "reset by peer" in excinfo.value.errors[0]

    def test_missing_video_id(self, metadata):
        """A final response without id is a failure"""
        uploader, _, _ = make_uploader([(None, {"kind": "youtube#video"})])
        reporter = RecordingReporter()

        with pytest.raises(UploadError):
            uploader.upload(metadata, io.BytesIO(b"x"), reporter)

        assert reporter.events[-1].error == "Upload completed but no video ID returned"

    def test_is_available(self):
        """Pre-built service with valid auth is available"""
        uploader, _, _ = make_uploader([])

        assert uploader.is_available() is True
