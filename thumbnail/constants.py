"""
Thumbnail Constants

Centralized configuration for the thumbnail upload module.
Values that users may want to change live in config/settings.py.
"""

from enum import Enum

# =============================================================================
# YOUTUBE API CONFIGURATION
# =============================================================================

# Full read/write access to the authenticated user's account
# https://developers.google.com/youtube/v3/guides/authentication
YOUTUBE_SCOPES = [
    "https://www.googleapis.com/auth/youtube",
]

# YouTube API service details
YOUTUBE_API_SERVICE_NAME = "youtube"
YOUTUBE_API_VERSION = "v3"

# Sent as the User-Agent of every API request
APPLICATION_NAME = "youtube-cmdline-uploadthumbnail-sample"

# Name under which the OAuth token is stored locally
CREDENTIAL_DATASTORE = "uploadthumbnail"

# Token revocation endpoint
OAUTH_REVOKE_URI = "https://oauth2.googleapis.com/revoke"

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# Declared content type of every thumbnail, whatever the actual encoding
IMAGE_FILE_FORMAT = "image/png"

# Resumable chunks must be multiples of 256 KB
CHUNK_SIZE_UNIT = 256 * 1024

# =============================================================================
# CONSOLE MESSAGES
# =============================================================================

VIDEO_ID_PROMPT = "Please enter a video Id to update: "
VIDEO_ID_EMPTY_MESSAGE = "Video Id can't be empty!"

IMAGE_PATH_PROMPT = "Please enter the path of the image file to upload: "
IMAGE_PATH_EMPTY_MESSAGE = "Path can not be empty!"

RESULT_DIVIDER = "\n================== Uploaded Thumbnail ==================\n"

# =============================================================================
# EXIT CODES
# =============================================================================

EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1
EXIT_UPLOAD_FAILED = 2

# Conventional shell code for SIGINT (128 + 2)
EXIT_CANCELLED = 130

# =============================================================================
# UPLOAD STATE
# =============================================================================


class UploadState(Enum):
    """Stages of a resumable media upload, in the order they occur"""

    NOT_STARTED = "not_started"
    INITIATION_STARTED = "initiation_started"
    INITIATION_COMPLETE = "initiation_complete"
    MEDIA_IN_PROGRESS = "media_in_progress"
    MEDIA_COMPLETE = "media_complete"


# =============================================================================
# THUMBNAIL STATUS
# =============================================================================


class ThumbnailStatus(Enum):
    """Thumbnail operation status codes"""

    SUCCESS = "success"
    API_ERROR = "api_error"
    IO_ERROR = "io_error"
    AUTH_ERROR = "auth_error"
    EMPTY_RESPONSE = "empty_response"
    INVALID_INPUT = "invalid_input"
