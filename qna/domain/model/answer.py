"""Answer entity.

Answers respond to a single question and collect votes and comments.
"""

from pydantic import Field, model_validator

from qna.domain.model.common import DomainModel
from qna.domain.value import AnswerId, CommentId, QuestionId, Timestamp, VoterId


class Answer(DomainModel):
    """Answer entity.

    Voting rules:
    - A voter appears in at most one of up_votes / down_votes
    - Voting again the same way withdraws the vote
    - Voting the other way moves the vote
    """

    id: AnswerId
    question_id: QuestionId
    text: str = Field(min_length=1)
    ans_by: str = Field(min_length=1)  # Author username
    ans_date_time: Timestamp
    up_votes: list[VoterId] = Field(default_factory=list)
    down_votes: list[VoterId] = Field(default_factory=list)
    comments: list[CommentId] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_single_vote_per_voter(self) -> "Answer":
        """Validate that nobody has voted both ways."""
        both = set(self.up_votes) & set(self.down_votes)
        if both:
            raise ValueError(f"Voters in both vote sets: {', '.join(sorted(both))}")
        return self

    @property
    def score(self) -> int:
        return len(self.up_votes) - len(self.down_votes)
