"""Process-level services."""

from .robonomics import (
    RobonomicsContext,
    RobonomicsState,
    get_robonomics,
    init_robonomics,
)

__all__ = [
    "RobonomicsContext",
    "RobonomicsState",
    "get_robonomics",
    "init_robonomics",
]
