"""Domain value objects for Circle.

Value objects are immutable and defined by their values, not identity.
"""

from typing import Annotated

from pydantic import Field, StringConstraints, field_validator

from circle.domain.value.common import RootValueObject, ValueObject

# Hobby tags are free-form; surrounding whitespace is not significant.
Hobby = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Username(RootValueObject[str]):
    """Unique, human-readable user name.

    Must contain at least one non-whitespace character and be at most
    255 characters long.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Username cannot be null or empty")
        if len(v) > 255:
            raise ValueError("Username must be at most 255 characters")
        return v


class UserDraft(ValueObject):
    """User-supplied fields for creating or replacing a user.

    Identity, creation time and friendships are never taken from a draft.
    A missing hobby set is normalized to an empty one by UserService.
    """

    username: Username
    age: int = Field(ge=1)
    hobbies: frozenset[Hobby] | None = None
