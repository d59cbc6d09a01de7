"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.webinar.app.command import change_seats_use_case
from src.service.webinar.driving_adapter.http_controller.auth import current_user


WIRE_MODULES: list[ModuleType] = [
    change_seats_use_case,
    current_user,
]
