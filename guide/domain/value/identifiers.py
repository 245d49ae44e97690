"""Strongly typed identifiers for Guidepedia domain entities.

Using NewType keeps a user id from being passed where an article id is
expected while still being a plain UUID at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ArticleId = NewType("ArticleId", UUID)
CategoryId = NewType("CategoryId", UUID)
CommentId = NewType("CommentId", UUID)
