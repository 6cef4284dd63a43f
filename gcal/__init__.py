"""
gcal - list Google Calendar events from the command line

Components:
- dates/: date expression parsing and range resolution
- commands/: verb registry, scoped flag sets, and the command router
- auth/: client credentials, token storage, OAuth authorization
- calendar/: event source and text rendering

Usage:
    gcal list                 # today's events
    gcal list -1w now         # the last week
    gcal list 3/1/24 3/10/24  # an explicit range
"""

from pathlib import Path

__version__ = "0.3.0"

# Path constants
CONFIG_DIR = Path("~/.config/gcal").expanduser()
CONFIG_PATH = CONFIG_DIR / "gcal.yaml"

__all__ = [
    "__version__",
    "CONFIG_DIR",
    "CONFIG_PATH",
]
