"""PostgreSQL implementation of Question repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import desc, distinct, func, insert, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model.question import Question
from qna.domain.repository.question import QuestionRepository
from qna.domain.value import AnswerId, QuestionId, TagId
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Question not found", question_id=str(question_id))
                return None

            return row_to_question(row._asdict())

    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> list[Question]:
        """Find questions by ID, most recently asked first."""
        if not question_ids:
            return []

        stmt = (
            select(questions_table)
            .where(questions_table.c.id.in_(list(question_ids)))
            .order_by(desc(questions_table.c.ask_date_time))
        )
        return await self._fetch_all(stmt)

    async def find_all(self) -> list[Question]:
        """Find all questions, most recently asked first."""
        with logfire.span("question_repository.find_all"):
            stmt = select(questions_table).order_by(
                desc(questions_table.c.ask_date_time)
            )
            questions = await self._fetch_all(stmt)
            logfire.info("Found questions", count=len(questions))
            return questions

    async def find_unanswered(self) -> list[Question]:
        """Find questions without answers, most recently asked first."""
        stmt = (
            select(questions_table)
            .where(func.cardinality(questions_table.c.answers) == 0)
            .order_by(desc(questions_table.c.ask_date_time))
        )
        return await self._fetch_all(stmt)

    async def save(self, question: Question) -> Question:
        """Insert a new question."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            title=question.title,
        ):
            stmt = insert(questions_table).values(**question_to_dict(question))
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Question saved successfully", question_id=str(question.id))
            return question

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment views by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
            .returning(questions_table)
        )
        return await self._execute_update(stmt)

    async def add_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Append an answer ID in place."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                answers=func.array_append(
                    questions_table.c.answers,
                    literal(answer_id, UUID(as_uuid=True)),
                )
            )
            .returning(questions_table)
        )
        return await self._execute_update(stmt)

    async def count_by_tag(self) -> dict[TagId, int]:
        """Count questions per referenced tag with a single GROUP BY."""
        with logfire.span("question_repository.count_by_tag"):
            tag_ids = select(
                questions_table.c.id.label("question_id"),
                func.unnest(questions_table.c.tags).label("tag_id"),
            ).subquery()
            stmt = select(
                tag_ids.c.tag_id,
                func.count(distinct(tag_ids.c.question_id)).label("qcnt"),
            ).group_by(tag_ids.c.tag_id)
            result = await self.session.execute(stmt)
            return {TagId(row.tag_id): row.qcnt for row in result.fetchall()}

    async def _fetch_all(self, stmt) -> list[Question]:
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def _execute_update(self, stmt) -> Optional[Question]:
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_question(row._asdict()) if row else None
