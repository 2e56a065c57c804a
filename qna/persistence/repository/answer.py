"""PostgreSQL implementation of Answer repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import Text, any_, case, desc, func, insert, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model.answer import Answer
from qna.domain.repository.answer import AnswerRepository
from qna.domain.value import AnswerId, CommentId, VoterId
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository.

    Vote toggles are a single conditional UPDATE ... RETURNING, so the
    membership check and the write happen in one statement.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> list[Answer]:
        """Find answers by ID, most recent first."""
        if not answer_ids:
            return []

        stmt = (
            select(answers_table)
            .where(answers_table.c.id.in_(list(answer_ids)))
            .order_by(desc(answers_table.c.ans_date_time))
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            stmt = insert(answers_table).values(**answer_to_dict(answer))
            await self.session.execute(stmt)
            await self.session.flush()
            return answer

    async def add_comment(
        self, answer_id: AnswerId, comment_id: CommentId
    ) -> Optional[Answer]:
        """Append a comment ID in place."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(
                comments=func.array_append(
                    answers_table.c.comments,
                    literal(comment_id, UUID(as_uuid=True)),
                )
            )
            .returning(answers_table)
        )
        return await self._execute_update(stmt)

    async def toggle_upvote(
        self, answer_id: AnswerId, voter_id: VoterId
    ) -> Optional[Answer]:
        """Toggle an upvote in a single statement."""
        with logfire.span("answer_repository.toggle_upvote", answer_id=str(answer_id)):
            return await self._toggle(
                answer_id,
                voter_id,
                own=answers_table.c.up_votes,
                other=answers_table.c.down_votes,
            )

    async def toggle_downvote(
        self, answer_id: AnswerId, voter_id: VoterId
    ) -> Optional[Answer]:
        """Toggle a downvote in a single statement."""
        with logfire.span(
            "answer_repository.toggle_downvote", answer_id=str(answer_id)
        ):
            return await self._toggle(
                answer_id,
                voter_id,
                own=answers_table.c.down_votes,
                other=answers_table.c.up_votes,
            )

    async def _toggle(self, answer_id: AnswerId, voter_id: VoterId, own, other):
        """Withdraw the vote if present in ``own``, else move it there.

        Both CASE expressions read the pre-update row.
        """
        voter = literal(voter_id, Text)
        already_voted = voter == any_(own)
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(
                {
                    own: case(
                        (already_voted, func.array_remove(own, voter)),
                        else_=func.array_append(own, voter),
                    ),
                    other: case(
                        (already_voted, other),
                        else_=func.array_remove(other, voter),
                    ),
                }
            )
            .returning(answers_table)
        )
        return await self._execute_update(stmt)

    async def _execute_update(self, stmt) -> Optional[Answer]:
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_answer(row._asdict()) if row else None
