"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Secrets (client secrets, tokens) live in files referenced from .env, NOT here
- Import these settings in modules: from config import settings
- Every value can be overridden with an environment variable of the same name
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# Uploader implementation: "youtube" or "mock" (simulated, never uploads)
THUMBNAIL_UPLOADER_MODE = os.getenv("THUMBNAIL_UPLOADER_MODE", "youtube")

# Resumable upload chunk size (bytes) - must be a multiple of 256 KB
# Thumbnails are at most 2 MB, so 1 MB means one or two chunks
THUMBNAIL_CHUNK_SIZE = int(
    os.getenv("THUMBNAIL_CHUNK_SIZE", str(1024 * 1024)),
)

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

# WARNING keeps the console to prompts, progress and results
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# =============================================================================
# SECRETS (loaded from .env)
# =============================================================================
# IMPORTANT: These should NEVER be committed to version control!
# Create a .env file in the project root with these values

# YouTube OAuth Configuration (file-based)
# These point to credential files, not inline secrets
YOUTUBE_CLIENT_SECRET_PATH = os.getenv(
    "YOUTUBE_CLIENT_SECRET_PATH",
    "client_secrets.json",
)
YOUTUBE_CREDENTIALS_DIR = os.getenv(
    "YOUTUBE_CREDENTIALS_DIR",
    os.path.join("~", ".oauth-credentials"),
)

# Local port the browser redirects to during the first authorization
OAUTH_CALLBACK_PORT = int(os.getenv("OAUTH_CALLBACK_PORT", "8080"))
