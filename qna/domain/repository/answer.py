"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from qna.domain.model.answer import Answer
from qna.domain.value import AnswerId, CommentId, VoterId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Mutations are single find-and-update operations so concurrent
    requests on the same answer never lose an update.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> list[Answer]:
        """Find answers by ID, sorted by answer date (most recent first).

        Args:
            answer_ids: IDs to look up; unknown IDs are skipped

        Returns:
            Matching answers, newest first
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        pass

    @abstractmethod
    async def add_comment(
        self, answer_id: AnswerId, comment_id: CommentId
    ) -> Optional[Answer]:
        """Append a comment ID to an answer.

        Returns:
            The updated answer, None if the answer does not exist
        """
        pass

    @abstractmethod
    async def toggle_upvote(
        self, answer_id: AnswerId, voter_id: VoterId
    ) -> Optional[Answer]:
        """Toggle a voter's upvote, clearing any downvote by the same voter.

        Returns:
            The updated answer, None if the answer does not exist
        """
        pass

    @abstractmethod
    async def toggle_downvote(
        self, answer_id: AnswerId, voter_id: VoterId
    ) -> Optional[Answer]:
        """Toggle a voter's downvote, clearing any upvote by the same voter.

        Returns:
            The updated answer, None if the answer does not exist
        """
        pass
