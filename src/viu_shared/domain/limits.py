"""Field length and count limits shared by schemas and clients.

Sizes are in bytes, durations in seconds.
"""

from __future__ import annotations

# --- Users ---
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MIN_LENGTH = 5
EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
PHONE_MAX_LENGTH = 20

# --- Projects ---
PROJECT_NAME_MAX_LENGTH = 255
PROJECT_DESCRIPTION_MAX_LENGTH = 1000

# --- Tags (projects, artworks, tasks) ---
TAGS_MAX_COUNT = 20
TAG_MAX_LENGTH = 50

# --- Artworks ---
ART_TITLE_MAX_LENGTH = 255
ART_DESCRIPTION_MAX_LENGTH = 1000
ART_MAX_FILE_SIZE = 100 * 1024 * 1024
ART_MAX_VERSIONS = 50

# --- Feedback ---
FEEDBACK_CONTENT_MAX_LENGTH = 2000
FEEDBACK_AUDIO_MAX_DURATION = 300
FEEDBACK_AUDIO_MAX_SIZE = 50 * 1024 * 1024
COORDINATE_MAX = 10000

# --- Approvals ---
APPROVAL_COMMENT_MAX_LENGTH = 1000
APPROVAL_CONDITION_MAX_LENGTH = 255
APPROVAL_CONDITIONS_MAX_COUNT = 10

# --- Tasks ---
TASK_TITLE_MAX_LENGTH = 255
TASK_DESCRIPTION_MAX_LENGTH = 1000
TASK_MIN_HOURS = 0.5
TASK_MAX_HOURS = 1000
TASK_BLOCK_REASON_MAX_LENGTH = 500

# --- Money (centavos) ---
MONEY_MAX_CENTAVOS = 999_999_999

# --- Pagination ---
PAGINATION_MIN_LIMIT = 1
PAGINATION_MAX_LIMIT = 100
PAGINATION_DEFAULT_LIMIT = 20

# --- Search ---
SEARCH_QUERY_MAX_LENGTH = 255

# --- Upload ---
UPLOAD_MAX_FILES_PER_REQUEST = 10
