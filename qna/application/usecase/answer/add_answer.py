"""Add answer use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.domain.error import NotFoundError
from qna.domain.model import Answer
from qna.domain.service import AnswerService, QuestionService, UserService
from qna.domain.value import QuestionId, UserId, utc_now


class AnswerResponse(BaseModel):
    """Answer body with votes and comment IDs."""

    id: str
    question_id: str
    text: str
    ans_by: str
    ans_date_time: datetime
    up_votes: list[str]
    down_votes: list[str]
    score: int
    comments: list[str]

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerResponse":
        return cls(
            id=str(answer.id),
            question_id=str(answer.question_id),
            text=answer.text,
            ans_by=answer.ans_by,
            ans_date_time=answer.ans_date_time,
            up_votes=list(answer.up_votes),
            down_votes=list(answer.down_votes),
            score=answer.score,
            comments=[str(comment_id) for comment_id in answer.comments],
        )


class AddAnswerRequest(BaseModel):
    """Add answer request."""

    question_id: str
    text: str
    ans_date_time: datetime | None = None
    user_id: str  # From the session token
    username: str  # From the session token


class AddAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> None:
        """Initialize add answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: AddAnswerRequest) -> AnswerResponse:
        """Execute add answer flow.

        Args:
            request: Add answer request

        Returns:
            Created answer

        Raises:
            NotFoundError: If the question or the answering user does not exist
            ValidationError: If the answer is invalid
        """
        question_id = QuestionId(UUID(request.question_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "add_answer.execute",
            question_id=request.question_id,
            username=request.username,
        ):
            question = await self.question_service.get_question_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", request.question_id)

            user = await self.user_service.get_user_by_id(user_id)
            if user is None:
                raise NotFoundError("User", request.user_id)

            answer = await self.answer_service.create_answer(
                question_id=question.id,
                text=request.text,
                ans_by=request.username,
                ans_date_time=request.ans_date_time or utc_now(),
            )
            await self.question_service.add_answer(question, answer.id)
            await self.user_service.add_answer(user, answer.id)

            return AnswerResponse.from_answer(answer)
