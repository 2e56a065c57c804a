"""PostgreSQL implementation of User repository."""

from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import func, insert, literal, or_, select, update
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model.user import User
from qna.domain.repository.user import UserRepository
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId
from qna.persistence.mappers import row_to_user, user_to_dict
from qna.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._fetch_one(stmt)

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        stmt = select(users_table).where(users_table.c.username == username)
        return await self._fetch_one(stmt)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email)
        return await self._fetch_one(stmt)

    async def find_by_username_or_email(
        self, username: str | None, email: str | None
    ) -> Optional[User]:
        """Find the first user whose username or email matches."""
        conditions = []
        if username is not None:
            conditions.append(users_table.c.username == username)
        if email is not None:
            conditions.append(users_table.c.email == email)
        if not conditions:
            return None

        stmt = select(users_table).where(or_(*conditions)).limit(1)
        return await self._fetch_one(stmt)

    async def save(self, user: User) -> User:
        """Insert a new user."""
        with logfire.span(
            "user_repository.save", user_id=str(user.id), username=user.username
        ):
            stmt = insert(users_table).values(**user_to_dict(user))
            await self.session.execute(stmt)
            await self.session.flush()
            return user

    async def add_question(
        self, user_id: UserId, question_id: QuestionId
    ) -> Optional[User]:
        """Append a question ID in place."""
        return await self._append(user_id, users_table.c.questions, question_id)

    async def add_answer(self, user_id: UserId, answer_id: AnswerId) -> Optional[User]:
        """Append an answer ID in place."""
        return await self._append(user_id, users_table.c.answers, answer_id)

    async def add_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[User]:
        """Append a comment ID in place."""
        return await self._append(user_id, users_table.c.comments, comment_id)

    async def _append(self, user_id: UserId, column, value: UUID) -> Optional[User]:
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(
                {
                    column: func.array_append(
                        column, literal(value, PG_UUID(as_uuid=True))
                    )
                }
            )
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_user(row._asdict()) if row else None

    async def _fetch_one(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None
