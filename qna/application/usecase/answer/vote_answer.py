"""Vote answer use case."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel

from qna.domain.error import NotFoundError
from qna.domain.service import AnswerService
from qna.domain.value import AnswerId, VoterId


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"


class VoteAnswerRequest(BaseModel):
    """Vote answer request."""

    answer_id: str
    direction: VoteDirection
    user_id: str  # From the session token


class VoteAnswerResponse(BaseModel):
    """Vote sets after the toggle."""

    up_votes: list[str]
    down_votes: list[str]


class VoteAnswerUseCase:
    """Use case for toggling an up- or downvote on an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize vote answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: VoteAnswerRequest) -> VoteAnswerResponse:
        """Execute vote flow.

        Args:
            request: Vote answer request

        Returns:
            Vote sets of the answer after the toggle

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer_id = AnswerId(UUID(request.answer_id))
        voter_id = VoterId(request.user_id)

        if request.direction == VoteDirection.UP:
            answer = await self.answer_service.find_by_id_and_add_upvote(
                answer_id, voter_id
            )
        else:
            answer = await self.answer_service.find_by_id_and_add_downvote(
                answer_id, voter_id
            )

        if answer is None:
            raise NotFoundError("Answer", request.answer_id)

        return VoteAnswerResponse(
            up_votes=list(answer.up_votes), down_votes=list(answer.down_votes)
        )
