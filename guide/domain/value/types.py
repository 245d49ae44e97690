"""Domain value objects for Guidepedia.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from guide.domain.value.common import RootValueObject


class EntityType(str, Enum):
    """Entity types that can be looked up by identifier."""

    USER = "User"
    ARTICLE = "Article"
    CATEGORY = "Category"


class RelationKind(str, Enum):
    """Kinds of toggleable many-to-many relationships.

    - reaction: a user reacts to (likes) an article
    - save: a user bookmarks an article for later
    - subscription: a user follows another user
    """

    REACTION = "reaction"
    SAVE = "save"
    SUBSCRIPTION = "subscription"


class CategoryName(RootValueObject[str]):
    """Unique category name, e.g. 'tech' or 'travel-guides'."""

    @field_validator("root")
    @classmethod
    def validate_category_name(cls, v: str) -> str:
        """Validate category name is non-blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Category name must be 1-100 characters")
        return v


class Login(RootValueObject[str]):
    """Unique login a user signs in with.

    Letters, digits, dots, dashes and underscores, 3-50 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_login(cls, v: str) -> str:
        """Validate login format."""
        if not re.match(r"^[A-Za-z0-9._-]{3,50}$", v):
            raise ValueError(
                "Login must be 3-50 characters: letters, digits, '.', '-' or '_'"
            )
        return v
