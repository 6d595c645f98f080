"""User response models shared by the user use cases."""

from pydantic import Field

from circle.application.usecase.base import CamelModel
from circle.domain.service import UserView


class UserResponse(CamelModel):
    """User transfer shape.

    Friends are listed by ID only.
    """

    id: str
    username: str
    age: int
    hobbies: list[str] = Field(default_factory=list)
    popularity_score: float
    friend_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_view(cls, view: UserView) -> "UserResponse":
        """Convert domain UserView to response model.

        Args:
            view: Domain user view

        Returns:
            API response model with sorted hobbies and friend IDs
        """
        return cls(
            id=str(view.id),
            username=view.username.root,
            age=view.age,
            hobbies=sorted(view.hobbies),
            popularity_score=view.popularity_score,
            friend_ids=sorted(str(fid) for fid in view.friend_ids),
        )
