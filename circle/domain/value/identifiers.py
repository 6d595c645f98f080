"""Strongly typed identifiers for Circle domain entities.

Friend references are stored as identifiers too, so NewType keeps user ids
from being mixed up with arbitrary UUIDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
