"""
Upload Workflow Integration Tests

Tests cover:
1. Metadata derived from the filename and config
2. Full upload through the stub transport
3. Failures surface as typed errors before/after the network step
4. Factory creates correct implementations
"""

import pytest

from video_upload.catalog.category_catalog import CategoryCatalog
from video_upload.constants import PrivacyStatus, UploadStatus
from video_upload.controllers.upload_controller import UploadController
from video_upload.exceptions import (
    CategoryNotFoundError,
    ConfigLoadError,
    DateParseError,
    FileAccessError,
    UploadError,
)
from video_upload.factory import UploaderFactory, create_uploader
from video_upload.implementations.mock_uploader import MockUploader
from video_upload.implementations.youtube_uploader import YouTubeUploader
from video_upload.models.video_metadata import VideoMetadata

# =============================================================================
# METADATA
# =============================================================================


@pytest.mark.unit
class TestBuildMetadata:
    """UploadController.build_metadata"""

    def test_title_and_privacy(self, controller):
        """Title carries the filename timestamp; privacy is unlisted"""
        metadata = controller.build_metadata("ouP-2021-02-11_12-27-41.avi")

        assert metadata.title == "COINBASE PRO - 2021-02-11 12:27:41"
        assert metadata.privacy_status == PrivacyStatus.UNLISTED
        assert metadata.privacy_status.value == "unlisted"

    def test_description_tags_category(self, controller):
        """Description template, fixed tags and category id are applied"""
        metadata = controller.build_metadata("ouP-2021-02-11_12-27-41.avi")

        assert metadata.description.endswith("recording on  2021-02-11 12:27:41")
        assert metadata.tags == ("Coinbase", "Coinbase Pro")
        assert metadata.category_id == "28"

    def test_request_body(self, controller):
        """Metadata renders the videos.insert body"""
        body = controller.build_metadata("ouP-2021-02-11_12-27-41.avi").to_request_body()

        assert body["snippet"]["categoryId"] == "28"
        assert body["snippet"]["tags"] == ["Coinbase", "Coinbase Pro"]
        assert body["status"] == {"privacyStatus": "unlisted"}

    def test_metadata_is_immutable(self, controller):
        """VideoMetadata cannot be modified after creation"""
        metadata = controller.build_metadata("ouP-2021-02-11_12-27-41.avi")

        with pytest.raises(AttributeError):
            metadata.title = "changed"

    def test_bad_filename(self, controller):
        """Filenames without a timestamp raise DateParseError"""
        with pytest.raises(DateParseError):
            controller.build_metadata("random.mp4")

    def test_unknown_category(self, mock_uploader, catalog, upload_config, tmp_path):
        """Missing category raises CategoryNotFoundError"""
        empty = CategoryCatalog(())
        controller = UploadController(mock_uploader, empty, upload_config)

        with pytest.raises(CategoryNotFoundError):
            controller.build_metadata("ouP-2021-02-11_12-27-41.avi")


# =============================================================================
# UPLOAD WORKFLOW
# =============================================================================


@pytest.mark.integration
class TestUploadWorkflow:
    """UploadController.upload_video with the stub transport"""

    def test_upload_success(self, controller, mock_uploader, video_file, reporter):
        """Upload returns the transport's video id"""
        result = controller.upload_video(video_file, reporter=reporter)

        assert result.success is True
        assert result.video_id == "abc123"
        assert result.status == UploadStatus.COMPLETED
        assert result.file_size == 1_000_000
        assert result.metadata.title == "COINBASE PRO - 2021-02-11 12:27:41"
        assert mock_uploader.authenticated is True

    def test_progress_reported(self, controller, video_file, reporter, output):
        """Reporter sees increasing progress ending at 100% and the id"""
        controller.upload_video(video_file, reporter=reporter)

        assert reporter.total_size == 1_000_000
        assert reporter.percentages == [0.25, 0.5, 0.75, 1.0]
        assert "Video id 'abc123' was successfully uploaded." in output.getvalue()

    def test_metadata_reaches_transport(self, controller, mock_uploader, video_file, reporter):
        """Transport receives the derived metadata and every byte"""
        controller.upload_video(video_file, reporter=reporter)

        last = mock_uploader.get_last_upload()
        assert isinstance(last["metadata"], VideoMetadata)
        assert last["metadata"].category_id == "28"
        assert last["bytes_sent"] == 1_000_000

    def test_missing_file(self, controller, mock_uploader, tmp_path):
        """Missing file fails before authentication"""
        with pytest.raises(FileAccessError):
            controller.upload_video(tmp_path / "ouP-2021-02-11_12-27-41.avi")

        assert mock_uploader.authenticated is False

    def test_bad_name_fails_before_network(self, controller, mock_uploader, tmp_path):
        """DateParseError aborts before the transport is touched"""
        path = tmp_path / "random.mp4"
        path.write_bytes(b"data")

        with pytest.raises(DateParseError):
            controller.upload_video(path)

        assert mock_uploader.authenticated is False
        assert mock_uploader.get_upload_history() == []

    def test_transport_failure(self, catalog, upload_config, video_file, reporter, output):
        """Transport errors propagate with every cause"""
        failing = MockUploader(fail_with=["quotaExceeded", "uploadLimitExceeded"])
        controller = UploadController(failing, catalog, upload_config)

        with pytest.raises(UploadError) as excinfo:
            controller.upload_video(video_file, reporter=reporter)

        assert excinfo.value.errors == ["quotaExceeded", "uploadLimitExceeded"]
        assert "An error prevented the upload from completing." in output.getvalue()
        assert reporter.resource_id is None

    def test_file_closed_after_failure(self, catalog, upload_config, video_file, reporter):
        """The stream is closed even when the upload fails"""
        streams = []

        class RecordingUploader(MockUploader):
            def upload(self, metadata, stream, reporter):
                streams.append(stream)
                raise UploadError("boom")

        controller = UploadController(RecordingUploader(), catalog, upload_config)

        with pytest.raises(UploadError):
            controller.upload_video(video_file, reporter=reporter)

        assert streams[0].closed

    def test_file_closed_when_reporter_rejects_size(
        self, controller, mock_uploader, video_file, reporter, monkeypatch
    ):
        """A reporter already bound to another size leaves no open handle"""
        from video_upload.controllers import upload_controller as controller_module

        streams = []

        def recording_open(*args, **kwargs):
            stream = open(*args, **kwargs)
            streams.append(stream)
            return stream

        monkeypatch.setattr(controller_module, "open", recording_open, raising=False)
        reporter.begin(5)

        with pytest.raises(ValueError):
            controller.upload_video(video_file, reporter=reporter)

        assert len(streams) == 1
        assert streams[0].closed
        assert mock_uploader.get_upload_history() == []

    def test_status(self, controller):
        """Controller status reports transport and catalog"""
        status = controller.get_status()

        assert status["ready"] is True
        assert status["uploader_type"] == "MockUploader"
        assert status["categories_loaded"] > 0
        assert controller.test_connection() is True


# =============================================================================
# FACTORY TESTS
# =============================================================================


@pytest.mark.unit
class TestUploaderFactory:
    """Test uploader factory"""

    def test_factory_creates_mock(self, upload_config):
        """Factory creates mock uploader"""
        uploader = UploaderFactory.create_uploader(upload_config, mode="mock")

        assert isinstance(uploader, MockUploader)
        assert uploader.chunk_size == upload_config.chunk_size

    def test_factory_convenience_function(self, upload_config):
        """create_uploader(force_mock=True) returns the stub"""
        assert isinstance(create_uploader(upload_config, force_mock=True), MockUploader)

    def test_factory_creates_youtube(self, upload_config):
        """YouTube mode builds an unauthenticated YouTubeUploader"""
        upload_config.client_secret_path.write_text("{}", encoding="utf-8")

        uploader = UploaderFactory.create_uploader(upload_config, mode="youtube")

        assert isinstance(uploader, YouTubeUploader)
        assert uploader.youtube_service is None
        assert uploader.oauth_manager.client_secret_path == upload_config.client_secret_path

    def test_factory_youtube_without_secret(self, upload_config):
        """Missing client secret raises ConfigLoadError"""
        with pytest.raises(ConfigLoadError):
            UploaderFactory.create_uploader(upload_config, mode="youtube")

    def test_factory_unknown_mode(self, upload_config):
        """Unknown modes are rejected"""
        with pytest.raises(ConfigLoadError):
            UploaderFactory.create_uploader(upload_config, mode="vimeo")
