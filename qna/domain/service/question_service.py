"""Question domain service."""

from datetime import datetime
from typing import Mapping, Sequence
from uuid import uuid4

import logfire

from qna.domain.error import NotFoundError
from qna.domain.model.question import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import (
    AnswerId,
    QuestionId,
    QuestionOrder,
    SearchQuery,
    TagCount,
    TagId,
)

from .answer_service import AnswerService
from .base import Service
from .tag_service import TagService


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_service: AnswerService,
        tag_service: TagService,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_service: Answer service, used to order by activity
            tag_service: Tag service, used for per-tag counts
        """
        self.question_repository = question_repository
        self.answer_service = answer_service
        self.tag_service = tag_service

    async def create_question(
        self,
        title: str | None,
        text: str | None,
        tags: Sequence[TagId] | None,
        asked_by: str | None,
        ask_date_time: datetime | None,
    ) -> Question:
        """Create a question with no views and no answers.

        Args:
            title: Question title
            text: Question body
            tags: Tag IDs, may be empty
            asked_by: Author username
            ask_date_time: When the question was asked

        Returns:
            Created question

        Raises:
            ValidationError: Listing every missing or invalid field
        """
        with logfire.span(
            "question_service.create_question", title=title, asked_by=asked_by
        ):
            question = Question.build(
                id=QuestionId(uuid4()),
                title=title,
                text=text,
                tags=list(dict.fromkeys(tags)) if tags is not None else None,
                asked_by=asked_by,
                ask_date_time=ask_date_time,
            )
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created", question_id=str(saved.id), tags=len(saved.tags)
            )
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID without counting a view."""
        return await self.question_repository.find_by_id(question_id)

    async def increment_views(self, question: Question) -> Question:
        """Count one view of a question.

        Args:
            question: Question being viewed

        Returns:
            The question as persisted after the increment

        Raises:
            NotFoundError: If the question no longer exists
        """
        updated = await self.find_by_id_and_increment_views(question.id)
        if updated is None:
            raise NotFoundError("Question", str(question.id))
        return updated

    async def add_answer(self, question: Question, answer_id: AnswerId) -> Question:
        """Attach an answer to a question.

        Args:
            question: Answered question
            answer_id: New answer's ID

        Returns:
            The question as persisted after the append

        Raises:
            NotFoundError: If the question no longer exists
        """
        with logfire.span(
            "question_service.add_answer",
            question_id=str(question.id),
            answer_id=str(answer_id),
        ):
            updated = await self.question_repository.add_answer(question.id, answer_id)
            if updated is None:
                logfire.error(
                    "Question not found for answer", question_id=str(question.id)
                )
                raise NotFoundError("Question", str(question.id))
            return updated

    async def find_by_id_and_increment_views(
        self, question_id: QuestionId
    ) -> Question | None:
        """Atomically count a view and fetch the question.

        Args:
            question_id: Question ID

        Returns:
            Updated question, None if it does not exist
        """
        with logfire.span(
            "question_service.find_by_id_and_increment_views",
            question_id=str(question_id),
        ):
            updated = await self.question_repository.increment_views(question_id)
            if updated is None:
                logfire.warn("Question not found", question_id=str(question_id))
            else:
                logfire.debug(
                    "Question view counted",
                    question_id=str(question_id),
                    views=updated.views,
                )
            return updated

    async def get_newest_questions(self) -> list[Question]:
        """All questions, most recently asked first."""
        return await self.question_repository.find_all()

    async def get_unanswered_questions(self) -> list[Question]:
        """Questions without answers, most recently asked first."""
        return await self.question_repository.find_unanswered()

    async def get_active_questions(self) -> list[Question]:
        """All questions, most recent activity first.

        Activity is the later of the ask date and the latest answer date.
        Equal activity falls back to the ask date, most recent first.
        """
        with logfire.span("question_service.get_active_questions"):
            questions = await self.question_repository.find_all()
            keyed = []
            for question in questions:
                answers = await self.answer_service.get_most_recent(question.answers)
                latest = AnswerService.get_latest_answer_date(answers)
                activity = question.ask_date_time
                if latest is not None and latest > activity:
                    activity = latest
                keyed.append(((activity, question.ask_date_time), question))
            keyed.sort(key=lambda item: item[0], reverse=True)
            return [question for _, question in keyed]

    async def get_questions_by_order(
        self, order: QuestionOrder = QuestionOrder.NEWEST
    ) -> list[Question]:
        """List questions in the given order.

        Args:
            order: newest, active or unanswered

        Returns:
            Ordered questions
        """
        with logfire.span("question_service.get_questions_by_order", order=order.value):
            if order is QuestionOrder.ACTIVE:
                return await self.get_active_questions()
            if order is QuestionOrder.UNANSWERED:
                return await self.get_unanswered_questions()
            return await self.get_newest_questions()

    async def get_question_count_by_tag(self) -> list[TagCount]:
        """Number of questions per tag, for tags used by at least one question."""
        return await self.tag_service.get_tags_with_question_count()

    @staticmethod
    def filter_questions_by_search(
        questions: Sequence[Question],
        tag_names: Mapping[QuestionId, list[str]],
        search: str | None,
    ) -> list[Question]:
        """Keep the questions matching a search string, preserving order.

        Args:
            questions: Ordered questions
            tag_names: Tag names of each question
            search: Raw search string, ``[tag]`` tokens and title keywords

        Returns:
            Matching questions in their original order
        """
        query = SearchQuery.parse(search)
        if query.is_empty:
            return list(questions)
        return [
            question
            for question in questions
            if query.matches(question.title, tag_names.get(question.id, []))
        ]
