"""In-memory user repository for testing."""

from typing import Optional

from qna.domain.model.user import User
from qna.domain.repository.user import UserRepository
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username_or_email(
        self, username: str | None, email: str | None
    ) -> Optional[User]:
        """Find the first user whose username or email matches."""
        for user in self._users.values():
            if (username is not None and user.username == username) or (
                email is not None and user.email == email
            ):
                return user
        return None

    async def save(self, user: User) -> User:
        """Insert a new user."""
        self._users[user.id] = user
        return user

    async def add_question(
        self, user_id: UserId, question_id: QuestionId
    ) -> Optional[User]:
        """Append a question ID."""
        return self._append(user_id, "questions", question_id)

    async def add_answer(self, user_id: UserId, answer_id: AnswerId) -> Optional[User]:
        """Append an answer ID."""
        return self._append(user_id, "answers", answer_id)

    async def add_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[User]:
        """Append a comment ID."""
        return self._append(user_id, "comments", comment_id)

    def _append(self, user_id: UserId, field: str, value) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={field: [*getattr(user, field), value]})
        self._users[user_id] = updated
        return updated
