"""Get profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.answer.add_answer import AnswerResponse
from qna.application.usecase.comment.add_comment import CommentResponse
from qna.domain.error import NotFoundError
from qna.domain.service import UserService
from qna.domain.value import UserId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # From the session token


class ProfileQuestion(BaseModel):
    """Question as listed on a profile."""

    id: str
    title: str
    text: str
    tags: list[str]
    asked_by: str
    ask_date_time: datetime
    views: int
    answers: list[str]


class GetProfileResponse(BaseModel):
    """The logged-in user with their content. No password hash."""

    id: str
    username: str
    email: str
    questions: list[ProfileQuestion]
    answers: list[AnswerResponse]
    comments: list[CommentResponse]


class GetProfileUseCase:
    """Use case for the logged-in user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the user does not exist
            ValueError: If the user ID is malformed
        """
        profile = await self.user_service.get_profile_by_id(
            UserId(UUID(request.user_id))
        )
        if profile is None:
            raise NotFoundError("User", request.user_id)

        return GetProfileResponse(
            id=str(profile.id),
            username=profile.username,
            email=profile.email,
            questions=[
                ProfileQuestion(
                    id=str(q.id),
                    title=q.title,
                    text=q.text,
                    tags=[str(t) for t in q.tags],
                    asked_by=q.asked_by,
                    ask_date_time=q.ask_date_time,
                    views=q.views,
                    answers=[str(a) for a in q.answers],
                )
                for q in profile.questions
            ],
            answers=[AnswerResponse.from_answer(a) for a in profile.answers],
            comments=[CommentResponse.from_comment(c) for c in profile.comments],
        )
