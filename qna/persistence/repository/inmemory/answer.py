"""In-memory answer repository for testing."""

from typing import Optional, Sequence

from qna.domain.model.answer import Answer
from qna.domain.repository.answer import AnswerRepository
from qna.domain.value import AnswerId, CommentId, VoterId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing.

    Each mutation reads and writes without awaiting in between, so it is
    atomic with respect to other coroutines.
    """

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> list[Answer]:
        """Find answers by ID, most recent first."""
        wanted = set(answer_ids)
        answers = [a for a in self._answers.values() if a.id in wanted]
        answers.sort(key=lambda a: a.ans_date_time, reverse=True)
        return answers

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        self._answers[answer.id] = answer
        return answer

    async def add_comment(
        self, answer_id: AnswerId, comment_id: CommentId
    ) -> Optional[Answer]:
        """Append a comment ID."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        updated = answer.model_copy(update={"comments": [*answer.comments, comment_id]})
        self._answers[answer_id] = updated
        return updated

    async def toggle_upvote(
        self, answer_id: AnswerId, voter_id: VoterId
    ) -> Optional[Answer]:
        """Toggle an upvote."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        up, down = _toggle(answer.up_votes, answer.down_votes, voter_id)
        updated = answer.model_copy(update={"up_votes": up, "down_votes": down})
        self._answers[answer_id] = updated
        return updated

    async def toggle_downvote(
        self, answer_id: AnswerId, voter_id: VoterId
    ) -> Optional[Answer]:
        """Toggle a downvote."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        down, up = _toggle(answer.down_votes, answer.up_votes, voter_id)
        updated = answer.model_copy(update={"up_votes": up, "down_votes": down})
        self._answers[answer_id] = updated
        return updated


def _toggle(
    own: list[VoterId], other: list[VoterId], voter_id: VoterId
) -> tuple[list[VoterId], list[VoterId]]:
    if voter_id in own:
        return [v for v in own if v != voter_id], list(other)
    return [*own, voter_id], [v for v in other if v != voter_id]
