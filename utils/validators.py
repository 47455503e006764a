"""
Input format helpers shared by the resolution dependencies and services
"""
import re
from datetime import datetime, timezone

from utils.errors import InvalidIdFormat, InvalidDeadlineFormat

# RFC 4122 versions 1-8 plus the nil UUID, hyphenated, any case
VALID_ID_PATTERN = re.compile(
    r'^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}'
    r'|00000000-0000-0000-0000-000000000000)$',
    re.IGNORECASE,
)


def is_valid_id(value) -> bool:
    """Check that value is a string in UUID format"""
    if not value or not isinstance(value, str):
        return False
    return VALID_ID_PATTERN.match(value) is not None


def ensure_valid_id(value) -> str:
    """Return value unchanged or raise InvalidIdFormat"""
    if not is_valid_id(value):
        raise InvalidIdFormat()
    return value


def parse_deadline(value) -> datetime:
    """
    Parse an ISO-8601 date or datetime string into an aware datetime.

    Date-only values ("2024-01-01") mean midnight UTC. Naive datetimes are
    taken as UTC. A trailing "Z" is accepted.

    Raises:
        InvalidDeadlineFormat: if value is not a parseable string
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        if not isinstance(value, str) or not value.strip():
            raise InvalidDeadlineFormat()
        text = value.strip()
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidDeadlineFormat()

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
