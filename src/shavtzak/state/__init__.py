"""State/store layer.

This package is the single source of truth for the roster: every
mutation goes through :class:`RosterStore`, which persists the full
snapshot and notifies subscribers.
"""

from shavtzak.state.events import RosterSection, changed_sections
from shavtzak.state.store import Listener, RosterStore

__all__ = [
    "Listener",
    "RosterSection",
    "RosterStore",
    "changed_sections",
]
