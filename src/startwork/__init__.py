"""startwork: Launch an IDE from a task-board card via a custom-URI deep link."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
