"""Strongly typed identifiers for Masacarri domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

PageId = NewType("PageId", UUID)
CommentId = NewType("CommentId", UUID)
UserId = NewType("UserId", UUID)
