"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.user import User
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by exact username."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by exact email."""
        pass

    @abstractmethod
    async def find_by_username_or_email(
        self, username: str | None, email: str | None
    ) -> Optional[User]:
        """Find a user whose username or email matches.

        Used for the combined uniqueness check on signup.
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user."""
        pass

    @abstractmethod
    async def add_question(
        self, user_id: UserId, question_id: QuestionId
    ) -> Optional[User]:
        """Append a question ID to the user's questions."""
        pass

    @abstractmethod
    async def add_answer(self, user_id: UserId, answer_id: AnswerId) -> Optional[User]:
        """Append an answer ID to the user's answers."""
        pass

    @abstractmethod
    async def add_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[User]:
        """Append a comment ID to the user's comments."""
        pass
