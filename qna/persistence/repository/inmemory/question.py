"""In-memory question repository for testing."""

from collections import Counter
from typing import Optional, Sequence

from qna.domain.model.question import Question
from qna.domain.repository.question import QuestionRepository
from qna.domain.value import AnswerId, QuestionId, TagId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> list[Question]:
        """Find questions by ID, most recently asked first."""
        wanted = set(question_ids)
        return _newest_first(q for q in self._questions.values() if q.id in wanted)

    async def find_all(self) -> list[Question]:
        """Find all questions, most recently asked first."""
        return _newest_first(self._questions.values())

    async def find_unanswered(self) -> list[Question]:
        """Find questions without answers, most recently asked first."""
        return _newest_first(q for q in self._questions.values() if not q.answers)

    async def save(self, question: Question) -> Question:
        """Insert a new question."""
        self._questions[question.id] = question
        return question

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Increment views by 1."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.model_copy(update={"views": question.views + 1})
        self._questions[question_id] = updated
        return updated

    async def add_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Append an answer ID."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.model_copy(
            update={"answers": [*question.answers, answer_id]}
        )
        self._questions[question_id] = updated
        return updated

    async def count_by_tag(self) -> dict[TagId, int]:
        """Count questions per referenced tag."""
        counts: Counter[TagId] = Counter()
        for question in self._questions.values():
            counts.update(set(question.tags))
        return dict(counts)


def _newest_first(questions) -> list[Question]:
    return sorted(questions, key=lambda q: q.ask_date_time, reverse=True)
