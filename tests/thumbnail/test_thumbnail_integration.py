"""
Thumbnail Module Integration Tests

Tests cover:
1. Mock uploader works correctly
2. Controller handles input, success and failure
3. Factory creates correct implementations
4. Entry point exit codes
"""

import logging
import sys
from unittest.mock import MagicMock

import pytest

import upload_thumbnail
from thumbnail.constants import (
    EXIT_CANCELLED,
    EXIT_INVALID_INPUT,
    EXIT_SUCCESS,
    EXIT_UPLOAD_FAILED,
    IMAGE_PATH_PROMPT,
    VIDEO_ID_PROMPT,
    ThumbnailStatus,
    UploadState,
)
from thumbnail.controllers.thumbnail_controller import ThumbnailController
from thumbnail.factory import ThumbnailUploaderFactory, create_uploader
from thumbnail.implementations.mock_thumbnail_uploader import MockThumbnailUploader
from thumbnail.implementations.scripted_input import ScriptedLineReader
from thumbnail.implementations.youtube_thumbnail_uploader import YouTubeThumbnailUploader
from thumbnail.interfaces.thumbnail_interface import AuthorizationError

# =============================================================================
# MOCK UPLOADER TESTS
# =============================================================================


class TestMockThumbnailUploader:
    """Test mock uploader implementation"""

    def test_mock_uploader_is_available(self, mock_uploader):
        """MockThumbnailUploader is always available"""
        assert mock_uploader.is_available() is True

    def test_mock_uploader_success(self, mock_uploader, temp_image_file, progress_reporter):
        """MockThumbnailUploader walks every state and returns a URL"""
        result = mock_uploader.set_thumbnail(
            "video123",
            str(temp_image_file),
            progress_reporter,
        )

        assert result.success is True
        assert result.thumbnail_url.endswith("/video123/default.jpg")
        assert result.file_size == temp_image_file.stat().st_size
        assert progress_reporter.states[0] == UploadState.NOT_STARTED
        assert progress_reporter.states[-1] == UploadState.MEDIA_COMPLETE

    def test_mock_uploader_tracks_history(self, mock_uploader, temp_image_file):
        """MockThumbnailUploader tracks upload history"""
        result = mock_uploader.set_thumbnail("video123", str(temp_image_file))

        history = mock_uploader.get_upload_history()
        assert len(history) == 1
        assert history[0]["thumbnail_url"] == result.thumbnail_url
        assert mock_uploader.get_last_upload()["video_id"] == "video123"

        mock_uploader.clear_history()
        assert mock_uploader.get_last_upload() is None

    def test_mock_uploader_missing_file(self, mock_uploader, missing_image_path):
        """MockThumbnailUploader reads the file for real"""
        result = mock_uploader.set_thumbnail("video123", str(missing_image_path))

        assert result.success is False
        assert result.status == ThumbnailStatus.IO_ERROR

    def test_mock_uploader_forced_failure(self, temp_image_file):
        """MockThumbnailUploader can simulate API errors"""
        uploader = MockThumbnailUploader(
            fail_status=ThumbnailStatus.API_ERROR,
            fail_code=403,
            fail_message="forbidden",
        )

        result = uploader.set_thumbnail("video123", str(temp_image_file))

        assert result.success is False
        assert result.error_code == 403
        assert uploader.get_upload_history() == []


# =============================================================================
# THUMBNAIL CONTROLLER TESTS
# =============================================================================


class TestThumbnailController:
    """Test thumbnail controller"""

    def test_controller_success_prints_url(
        self,
        youtube_service,
        temp_image_file,
        capsys,
    ):
        """Successful upload prints exactly the default thumbnail URL"""
        controller = ThumbnailController(
            uploader=YouTubeThumbnailUploader(youtube_service),
            reader=ScriptedLineReader(["video123", str(temp_image_file)]),
        )

        exit_code = controller.run()

        out = capsys.readouterr().out
        assert exit_code == EXIT_SUCCESS
        assert "You chose video123 to upload a thumbnail." in out
        assert f"You chose {temp_image_file} to upload." in out
        assert "Uploaded Thumbnail" in out
        assert "  - Url: https://example.com/thumb.jpg\n" in out

    def test_controller_prints_progress(self, youtube_service, temp_image_file, capsys):
        """Progress labels appear in state order"""
        controller = ThumbnailController(
            uploader=YouTubeThumbnailUploader(youtube_service),
            reader=ScriptedLineReader(["video123", str(temp_image_file)]),
        )

        controller.run()

        out = capsys.readouterr().out
        labels = [
            "Upload Not Started!",
            "Initiation Started",
            "Initiation Completed",
            "Upload in progress",
            "Upload percentage: 0.5",
            "Upload Completed!",
        ]
        positions = [out.index(label) for label in labels]
        assert positions == sorted(positions)

    def test_controller_api_error(self, youtube_service, temp_image_file, http_error, capsys):
        """
        API error prints a diagnostic with code and message.

        Should:
        - Print "403" and "forbidden" on stderr
        - Not print any thumbnail URL
        - Exit with EXIT_UPLOAD_FAILED
        """
        request = youtube_service.thumbnails.return_value.set.return_value
        request.next_chunk.side_effect = http_error(403, "forbidden")
        controller = ThumbnailController(
            uploader=YouTubeThumbnailUploader(youtube_service),
            reader=ScriptedLineReader(["video123", str(temp_image_file)]),
        )

        exit_code = controller.run()

        captured = capsys.readouterr()
        assert exit_code == EXIT_UPLOAD_FAILED
        assert "403" in captured.err
        assert "forbidden" in captured.err
        assert "Url:" not in captured.out
        assert "https://" not in captured.out

    def test_controller_diagnostic_precedes_trace(
        self,
        youtube_service,
        temp_image_file,
        http_error,
        capsys,
    ):
        """
        Failure output on stderr is the diagnostic line, then the trace.

        Should:
        - Print the diagnostic before any traceback
        - Log the HttpError trace from the controller, not the uploader
        """
        request = youtube_service.thumbnails.return_value.set.return_value
        request.next_chunk.side_effect = http_error(403, "forbidden")
        handler = logging.StreamHandler(sys.stderr)
        logging.getLogger("thumbnail").addHandler(handler)
        controller = ThumbnailController(
            uploader=YouTubeThumbnailUploader(youtube_service),
            reader=ScriptedLineReader(["video123", str(temp_image_file)]),
        )

        try:
            controller.run()
        finally:
            logging.getLogger("thumbnail").removeHandler(handler)

        err = capsys.readouterr().err
        diagnostic = err.index("YouTube API error code: 403 : forbidden")
        trace = err.index("Traceback (most recent call last)")
        assert diagnostic < trace
        assert "HttpError" in err[trace:]

    def test_controller_missing_file(self, youtube_service, missing_image_path, capsys):
        """Missing image prints an I/O diagnostic and never calls the API"""
        controller = ThumbnailController(
            uploader=YouTubeThumbnailUploader(youtube_service),
            reader=ScriptedLineReader(["video123", str(missing_image_path)]),
        )

        exit_code = controller.run()

        captured = capsys.readouterr()
        assert exit_code == EXIT_UPLOAD_FAILED
        assert "I/O error" in captured.err
        assert "Url:" not in captured.out
        youtube_service.thumbnails.return_value.set.assert_not_called()

    def test_controller_empty_response(self, youtube_service, temp_image_file, capsys):
        """Response without items is reported as a failure"""
        request = youtube_service.thumbnails.return_value.set.return_value
        request.next_chunk.side_effect = [(None, {"items": []})]
        controller = ThumbnailController(
            uploader=YouTubeThumbnailUploader(youtube_service),
            reader=ScriptedLineReader(["video123", str(temp_image_file)]),
        )

        exit_code = controller.run()

        captured = capsys.readouterr()
        assert exit_code == EXIT_UPLOAD_FAILED
        assert "no thumbnail returned" in captured.err
        assert "Url:" not in captured.out

    @pytest.mark.parametrize("video_id", ["", " ", "\t"])
    def test_controller_rejects_empty_video_id(self, video_id, capsys):
        """Empty video id stops before the second prompt and any upload"""
        uploader = MagicMock()
        reader = ScriptedLineReader([video_id, "thumb.png"])
        controller = ThumbnailController(uploader=uploader, reader=reader)

        exit_code = controller.run()

        assert exit_code == EXIT_INVALID_INPUT
        assert reader.prompts == [VIDEO_ID_PROMPT]
        assert "Video Id can't be empty!" in capsys.readouterr().err
        uploader.set_thumbnail.assert_not_called()

    @pytest.mark.parametrize("image_path", ["", "  "])
    def test_controller_rejects_empty_path(self, image_path, capsys):
        """Empty image path stops before any upload"""
        uploader = MagicMock()
        reader = ScriptedLineReader(["video123", image_path])
        controller = ThumbnailController(uploader=uploader, reader=reader)

        exit_code = controller.run()

        assert exit_code == EXIT_INVALID_INPUT
        assert reader.prompts == [VIDEO_ID_PROMPT, IMAGE_PATH_PROMPT]
        assert "Path can not be empty!" in capsys.readouterr().err
        uploader.set_thumbnail.assert_not_called()

    def test_controller_with_mock_uploader(self, mock_uploader, temp_image_file):
        """Controller passes the entered values to the uploader"""
        controller = ThumbnailController(
            uploader=mock_uploader,
            reader=ScriptedLineReader(["video123", str(temp_image_file)]),
        )

        assert controller.run() == EXIT_SUCCESS
        last_upload = mock_uploader.get_last_upload()
        assert last_upload["video_id"] == "video123"
        assert last_upload["image_path"] == str(temp_image_file)


# =============================================================================
# FACTORY TESTS
# =============================================================================


class TestThumbnailUploaderFactory:
    """Test uploader factory"""

    def test_factory_creates_mock(self):
        """Factory creates mock uploader"""
        uploader = ThumbnailUploaderFactory.create_uploader(mode="mock")

        assert isinstance(uploader, MockThumbnailUploader)

    def test_factory_convenience_function(self):
        """Convenience create_uploader function works"""
        uploader = create_uploader(force_mock=True)

        assert isinstance(uploader, MockThumbnailUploader)

    def test_factory_unknown_mode(self):
        """Unknown mode is rejected"""
        with pytest.raises(ValueError):
            ThumbnailUploaderFactory.create_uploader(mode="vimeo")

    def test_factory_creates_youtube(self, monkeypatch):
        """YouTube mode authorizes with the thumbnail scope and datastore"""
        oauth = MagicMock()
        service = MagicMock()
        monkeypatch.setattr(
            "thumbnail.factory.build_youtube_service",
            lambda credentials: service,
        )

        uploader = ThumbnailUploaderFactory.create_uploader(
            mode="youtube",
            oauth_manager=oauth,
        )

        assert isinstance(uploader, YouTubeThumbnailUploader)
        assert uploader.youtube_service is service
        oauth.authorize.assert_called_once_with(
            ["https://www.googleapis.com/auth/youtube"],
            "uploadthumbnail",
        )

    def test_factory_youtube_authorization_error(self):
        """Authorization failures propagate unchanged in YouTube mode"""
        oauth = MagicMock()
        oauth.authorize.side_effect = AuthorizationError("no token")

        with pytest.raises(AuthorizationError):
            ThumbnailUploaderFactory.create_uploader(mode="youtube", oauth_manager=oauth)

    def test_factory_has_no_silent_mock_fallback(self):
        """
        Without an explicit "mock" mode, a failed authorization never
        turns into a simulated upload.

        Should:
        - Reject an "auto" mode
        - Let AuthorizationError escape from "youtube" mode
        """
        oauth = MagicMock()
        oauth.authorize.side_effect = AuthorizationError("no token")

        with pytest.raises(ValueError):
            ThumbnailUploaderFactory.create_uploader(mode="auto", oauth_manager=oauth)

        with pytest.raises(AuthorizationError):
            ThumbnailUploaderFactory.create_uploader(mode="youtube", oauth_manager=oauth)

    def test_settings_mode_authorization_failure_exits_non_zero(
        self,
        monkeypatch,
        capsys,
    ):
        """Configured mode with failing authorization prints no URL"""
        oauth = MagicMock()
        oauth.authorize.side_effect = AuthorizationError("no token")
        monkeypatch.setattr(upload_thumbnail, "setup_logging", lambda: None)
        monkeypatch.setattr(
            upload_thumbnail,
            "create_uploader",
            lambda: ThumbnailUploaderFactory.create_uploader(
                mode="youtube",
                oauth_manager=oauth,
            ),
        )

        assert upload_thumbnail.main() == EXIT_UPLOAD_FAILED
        captured = capsys.readouterr()
        assert "Url:" not in captured.out
        assert "I/O error: no token" in captured.err


# =============================================================================
# ENTRY POINT TESTS
# =============================================================================


class TestEntryPoint:
    """Test upload_thumbnail.main exit codes"""

    @pytest.fixture(autouse=True)
    def quiet_logging(self, monkeypatch):
        """Leave root logging to pytest"""
        monkeypatch.setattr(upload_thumbnail, "setup_logging", lambda: None)

    def test_main_success(self, monkeypatch, temp_image_file, capsys):
        """Full flow from console input to printed URL"""
        answers = iter(["video123", str(temp_image_file)])
        monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
        monkeypatch.setattr(
            upload_thumbnail,
            "create_uploader",
            lambda: MockThumbnailUploader(),
        )

        assert upload_thumbnail.main() == EXIT_SUCCESS
        assert "/video123/default.jpg" in capsys.readouterr().out

    def test_main_authorization_failure(self, monkeypatch, capsys):
        """Authorization failure prints an I/O diagnostic and exits non-zero"""

        def failing_uploader():
            raise AuthorizationError("Client secret file not found")

        monkeypatch.setattr(upload_thumbnail, "create_uploader", failing_uploader)

        assert upload_thumbnail.main() == EXIT_UPLOAD_FAILED
        assert "Client secret file not found" in capsys.readouterr().err

    def test_run_exits_with_code(self, monkeypatch):
        """Console script exits with main()'s return code"""
        monkeypatch.setattr(upload_thumbnail, "main", lambda: EXIT_INVALID_INPUT)

        with pytest.raises(SystemExit) as excinfo:
            upload_thumbnail.run()

        assert excinfo.value.code == EXIT_INVALID_INPUT

    def test_main_unknown_mode(self, monkeypatch, capsys):
        """Unknown THUMBNAIL_UPLOADER_MODE is an upload failure, not a traceback"""
        monkeypatch.setattr(
            "thumbnail.factory.settings.THUMBNAIL_UPLOADER_MODE",
            "vimeo",
        )

        assert upload_thumbnail.main() == EXIT_UPLOAD_FAILED
        assert "Unknown uploader mode: vimeo" in capsys.readouterr().err

    def test_run_cancelled_by_user(self, monkeypatch):
        """Ctrl+C exits with its own code, distinct from empty input"""

        def interrupted():
            raise KeyboardInterrupt

        monkeypatch.setattr(upload_thumbnail, "main", interrupted)

        with pytest.raises(SystemExit) as excinfo:
            upload_thumbnail.run()

        assert excinfo.value.code == EXIT_CANCELLED
        assert EXIT_CANCELLED != EXIT_INVALID_INPUT
