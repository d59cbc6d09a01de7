"""HTTP route prefixes and paths."""

from typing import Final


WEBINAR_PREFIX: Final[str] = '/webinars'
WEBINAR_SEATS: Final[str] = '/{webinar_id}/seats'
HEALTH: Final[str] = '/health'
