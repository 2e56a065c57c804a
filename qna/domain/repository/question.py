"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from qna.domain.model.question import Question
from qna.domain.value import AnswerId, QuestionId, TagId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> list[Question]:
        """Find questions by ID, most recently asked first."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Question]:
        """Find all questions, most recently asked first."""
        pass

    @abstractmethod
    async def find_unanswered(self) -> list[Question]:
        """Find questions without answers, most recently asked first."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Insert a new question."""
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment the view counter by one.

        Returns:
            The updated question, None if the question does not exist
        """
        pass

    @abstractmethod
    async def add_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Append an answer ID to a question.

        Returns:
            The updated question, None if the question does not exist
        """
        pass

    @abstractmethod
    async def count_by_tag(self) -> dict[TagId, int]:
        """Count questions per tag.

        Only tags referenced by at least one question appear.

        Returns:
            Mapping of tag ID to number of questions carrying it
        """
        pass
