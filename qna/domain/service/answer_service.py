"""Answer domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from qna.domain.model.answer import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, CommentId, QuestionId, VoterId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def create_answer(
        self,
        question_id: QuestionId | None,
        text: str | None,
        ans_by: str | None,
        ans_date_time: datetime | None,
    ) -> Answer:
        """Create an answer with no votes and no comments.

        Args:
            question_id: Question being answered
            text: Answer text
            ans_by: Author username
            ans_date_time: When the answer was posted

        Returns:
            Created answer

        Raises:
            ValidationError: Listing every missing or invalid field
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            ans_by=ans_by,
        ):
            answer = Answer.build(
                id=AnswerId(uuid4()),
                question_id=question_id,
                text=text,
                ans_by=ans_by,
                ans_date_time=ans_date_time,
            )
            saved = await self.answer_repository.save(answer)
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID."""
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            logfire.warn("Answer not found", answer_id=str(answer_id))
        return answer

    async def get_most_recent(self, answer_ids: Sequence[AnswerId]) -> list[Answer]:
        """Get the given answers, most recent first.

        Args:
            answer_ids: Answer IDs to resolve

        Returns:
            Answers whose ID is in ``answer_ids``, sorted by answer date descending
        """
        if not answer_ids:
            return []
        return await self.answer_repository.find_by_ids(answer_ids)

    @staticmethod
    def get_latest_answer_date(answers: Sequence[Answer]) -> datetime | None:
        """Latest answer date of an in-memory list, None when it is empty."""
        return max((answer.ans_date_time for answer in answers), default=None)

    async def find_by_id_and_add_comment(
        self, answer_id: AnswerId, comment_id: CommentId
    ) -> Answer | None:
        """Append a comment to an answer.

        Args:
            answer_id: Answer ID
            comment_id: Comment ID

        Returns:
            Updated answer, None if the answer does not exist
        """
        with logfire.span(
            "answer_service.find_by_id_and_add_comment",
            answer_id=str(answer_id),
            comment_id=str(comment_id),
        ):
            updated = await self.answer_repository.add_comment(answer_id, comment_id)
            if updated is None:
                logfire.warn("Answer not found for comment", answer_id=str(answer_id))
            return updated

    async def find_by_id_and_add_upvote(
        self, answer_id: AnswerId, voter_id: VoterId
    ) -> Answer | None:
        """Toggle an upvote.

        Upvoting again withdraws the upvote. Upvoting a downvoted answer
        moves the vote.

        Args:
            answer_id: Answer ID
            voter_id: Voting user

        Returns:
            Updated answer, None if the answer does not exist
        """
        with logfire.span(
            "answer_service.find_by_id_and_add_upvote",
            answer_id=str(answer_id),
            voter_id=voter_id,
        ):
            updated = await self.answer_repository.toggle_upvote(answer_id, voter_id)
            if updated is None:
                logfire.warn("Answer not found for upvote", answer_id=str(answer_id))
            else:
                logfire.info(
                    "Upvote toggled",
                    answer_id=str(answer_id),
                    upvoted=voter_id in updated.up_votes,
                    score=updated.score,
                )
            return updated

    async def find_by_id_and_add_downvote(
        self, answer_id: AnswerId, voter_id: VoterId
    ) -> Answer | None:
        """Toggle a downvote.

        Symmetric to :meth:`find_by_id_and_add_upvote`.
        """
        with logfire.span(
            "answer_service.find_by_id_and_add_downvote",
            answer_id=str(answer_id),
            voter_id=voter_id,
        ):
            updated = await self.answer_repository.toggle_downvote(answer_id, voter_id)
            if updated is None:
                logfire.warn("Answer not found for downvote", answer_id=str(answer_id))
            else:
                logfire.info(
                    "Downvote toggled",
                    answer_id=str(answer_id),
                    downvoted=voter_id in updated.down_votes,
                    score=updated.score,
                )
            return updated
