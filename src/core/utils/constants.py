"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_UPSTREAM_HTTP = "UPSTREAM_HTTP_ERROR"
ERROR_CODE_UPSTREAM_TRANSPORT = "UPSTREAM_TRANSPORT_ERROR"
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"

# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 100

# Number of page links shown at once in the pagination control
PAGES_TO_SHOW = 10

# ============================================================================
# Upstream Users API
# ============================================================================

DEFAULT_USERS_API_BASE_URL = "http://localhost:3000"
USERS_PAGES_PATH = "/users/pages"
TRANSPORT_ERROR_STATUS = 500

# ============================================================================
# HTTP Response Configuration
# ============================================================================

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
CACHE_CONTROL = "no-store"
ALLOWED_METHODS: Final[tuple[str, ...]] = ("GET", "HEAD")

# ============================================================================
# Page Presentation
# ============================================================================

PAGE_TITLE = "Users"
PAGE_DESCRIPTION = "Paginated list of users"
BOOTSTRAP_CSS_URL = (
    "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"
)

USER_TABLE_COLUMNS: Final[tuple[tuple[str, str], ...]] = (
    ("id", "ID"),
    ("first_name", "First name"),
    ("last_name", "Last name"),
    ("phone", "Phone"),
    ("email", "Email"),
    ("updated_at", "Updated at"),
)

# ============================================================================
# Observability
# ============================================================================

SERVICE_NAME = "user-directory-page"
METRICS_NAMESPACE = "UserDirectory"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_USERS_API_BASE_URL = "USERS_API_BASE_URL"
ENV_USERS_API_TIMEOUT_SECONDS = "USERS_API_TIMEOUT_SECONDS"
