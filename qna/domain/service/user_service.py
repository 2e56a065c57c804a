"""User domain service."""

from uuid import uuid4

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model.user import User, UserProfile
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    UserRepository,
)
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            question_repository: Question repository, for profiles
            answer_repository: Answer repository, for profiles
            comment_repository: Comment repository, for profiles
        """
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.comment_repository = comment_repository

    async def create_user(
        self, username: str | None, email: str | None, password_hash: str | None
    ) -> User:
        """Create a user.

        Args:
            username: Username
            email: Email address
            password_hash: bcrypt hash of the password, never the plaintext

        Returns:
            Created user

        Raises:
            ValidationError: Listing every missing or invalid field
        """
        with logfire.span("user_service.create_user", username=username):
            user = User.build(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=password_hash,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), username=username)
            return saved

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID."""
        return await self.user_repository.find_by_id(user_id)

    async def find_by_username(self, username: str) -> User | None:
        """Find a user by exact username."""
        return await self.user_repository.find_by_username(username)

    async def find_by_email(self, email: str) -> User | None:
        """Find a user by exact email."""
        return await self.user_repository.find_by_email(email)

    async def username_or_email_taken(
        self, username: str | None, email: str | None
    ) -> bool:
        """Check whether a username or an email is already registered."""
        existing = await self.user_repository.find_by_username_or_email(
            username, email
        )
        return existing is not None

    async def add_question(self, user: User, question_id: QuestionId) -> User:
        """Record a question as authored by the user.

        Raises:
            NotFoundError: If the user no longer exists
        """
        updated = await self.find_by_id_and_add_question(user.id, question_id)
        if updated is None:
            raise NotFoundError("User", str(user.id))
        return updated

    async def add_answer(self, user: User, answer_id: AnswerId) -> User:
        """Record an answer as authored by the user.

        Raises:
            NotFoundError: If the user no longer exists
        """
        updated = await self.find_by_id_and_add_answer(user.id, answer_id)
        if updated is None:
            raise NotFoundError("User", str(user.id))
        return updated

    async def add_comment(self, user: User, comment_id: CommentId) -> User:
        """Record a comment as authored by the user.

        Raises:
            NotFoundError: If the user no longer exists
        """
        updated = await self.find_by_id_and_add_comment(user.id, comment_id)
        if updated is None:
            raise NotFoundError("User", str(user.id))
        return updated

    async def find_by_id_and_add_question(
        self, user_id: UserId, question_id: QuestionId
    ) -> User | None:
        """Append a question ID to a user, None if the user does not exist."""
        with logfire.span(
            "user_service.find_by_id_and_add_question",
            user_id=str(user_id),
            question_id=str(question_id),
        ):
            return await self.user_repository.add_question(user_id, question_id)

    async def find_by_id_and_add_answer(
        self, user_id: UserId, answer_id: AnswerId
    ) -> User | None:
        """Append an answer ID to a user, None if the user does not exist."""
        with logfire.span(
            "user_service.find_by_id_and_add_answer",
            user_id=str(user_id),
            answer_id=str(answer_id),
        ):
            return await self.user_repository.add_answer(user_id, answer_id)

    async def find_by_id_and_add_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> User | None:
        """Append a comment ID to a user, None if the user does not exist."""
        with logfire.span(
            "user_service.find_by_id_and_add_comment",
            user_id=str(user_id),
            comment_id=str(comment_id),
        ):
            return await self.user_repository.add_comment(user_id, comment_id)

    async def get_profile_by_id(self, user_id: UserId) -> UserProfile | None:
        """Get a user with their questions, answers and comments resolved.

        Args:
            user_id: User ID

        Returns:
            Profile if the user exists, None otherwise
        """
        with logfire.span("user_service.get_profile_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
                return None

            questions = await self.question_repository.find_by_ids(user.questions)
            answers = await self.answer_repository.find_by_ids(user.answers)
            comments = await self.comment_repository.find_by_ids(user.comments)
            return UserProfile(
                id=user.id,
                username=user.username,
                email=user.email,
                questions=questions,
                answers=answers,
                comments=comments,
            )
