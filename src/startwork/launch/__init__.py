"""Start-work launch trigger."""

from __future__ import annotations

from startwork.launch.trigger import (
    START_WORK_ACTION,
    START_WORK_CONTROLLER,
    LaunchTrigger,
    build_route,
)

__all__ = [
    "LaunchTrigger",
    "START_WORK_ACTION",
    "START_WORK_CONTROLLER",
    "build_route",
]
