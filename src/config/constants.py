"""
Constants, enums, and static values.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class VerificationStep(str, Enum):
    """Verification run steps, executed strictly in order."""
    CONNECTING = "connecting"
    RETRIEVING = "retrieving"
    TESTING = "testing"
    DONE = "done"


class VerificationStepDescription(str, Enum):
    """Verification run step descriptions."""
    CONNECTING = "Establish connection to the route source"
    RETRIEVING = "Retrieve GET routes for the service build"
    TESTING = "Test every route against the base URL"
    DONE = "Aggregate route outcomes into the report"


def log_verification_step(step: VerificationStep) -> None:
    """Log the start of a verification step."""
    description = VerificationStepDescription[step.name].value
    logger.info(f"{step.value}: {description}")


# HTTP probing
ACCEPT_HEADER = "application/json"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

ERROR_STATUS_CODE = 0
ERROR_STATUS_MESSAGE = "Error"

STATUS_MESSAGES: dict[int, str] = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}

# Path placeholder sample values
ID_PLACEHOLDERS = frozenset({"id", "userId"})
UUID_PLACEHOLDER = "uuid"
SAMPLE_ID = "1"
SAMPLE_UUID = "550e8400-e29b-41d4-a716-446655440000"
SAMPLE_DEFAULT = "test"

ROUTE_METHOD = "GET"
