"""Add question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.base import BaseUseCase
from qna.domain.error import NotFoundError
from qna.domain.model import Question, Tag
from qna.domain.service import QuestionService, TagService, UserService
from qna.domain.value import UserId, utc_now


class TagResponse(BaseModel):
    """Tag as embedded in question bodies."""

    id: str
    name: str

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagResponse":
        return cls(id=str(tag.id), name=tag.name.root)


class QuestionResponse(BaseModel):
    """Question body with tags resolved and answers as IDs."""

    id: str
    title: str
    text: str
    tags: list[TagResponse]
    asked_by: str
    ask_date_time: datetime
    views: int
    answers: list[str]

    @classmethod
    def from_question(cls, question: Question, tags: list[Tag]) -> "QuestionResponse":
        return cls(
            id=str(question.id),
            title=question.title,
            text=question.text,
            tags=[TagResponse.from_tag(tag) for tag in tags],
            asked_by=question.asked_by,
            ask_date_time=question.ask_date_time,
            views=question.views,
            answers=[str(answer_id) for answer_id in question.answers],
        )


class AddQuestionRequest(BaseModel):
    """Add question request."""

    title: str
    text: str
    tags: list[str] = []
    ask_date_time: datetime | None = None
    user_id: str  # From the session token
    username: str  # From the session token


class AddQuestionUseCase(BaseUseCase):
    """Use case for asking a question."""

    def __init__(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize add question use case.

        Args:
            question_service: Question domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: AddQuestionRequest) -> QuestionResponse:
        """Execute add question flow.

        Steps:
        1. Load the asking user
        2. Resolve tag names, creating new tags (via TagService)
        3. Create the question (via QuestionService)
        4. Record it on the user (via UserService)

        Args:
            request: Add question request

        Returns:
            Created question

        Raises:
            NotFoundError: If the asking user does not exist
            ValidationError: If the question is invalid
        """
        with logfire.span(
            "add_question.execute", title=request.title, tags=request.tags
        ):
            user_id = UserId(UUID(request.user_id))
            user = await self.user_service.get_user_by_id(user_id)
            if user is None:
                raise NotFoundError("User", request.user_id)

            tags = await self.tag_service.find_or_create_many(request.tags)
            tags = list({tag.id: tag for tag in tags}.values())
            question = await self.question_service.create_question(
                title=request.title,
                text=request.text,
                tags=[tag.id for tag in tags],
                asked_by=request.username,
                ask_date_time=request.ask_date_time or utc_now(),
            )
            await self.user_service.add_question(user, question.id)

            logfire.info("Question added", question_id=str(question.id))
            return QuestionResponse.from_question(question, tags)
