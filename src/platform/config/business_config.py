"""Business logic configuration and constants."""

from typing import Final


class WebinarLimits:
    """Webinar capacity limits."""

    MAX_SEATS: Final[int] = 1000
    MIN_SEATS: Final[int] = 1
