"""Get question by ID use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.application.usecase.answer.add_answer import AnswerResponse
from qna.domain.error import NotFoundError
from qna.domain.service import AnswerService, QuestionService, TagService
from qna.domain.value import QuestionId

from .add_question import QuestionResponse


class GetQuestionByIdRequest(BaseModel):
    """Get question by ID request."""

    question_id: str


class QuestionDetailResponse(QuestionResponse):
    """Question body with its answers resolved, most recent first."""

    answers: list[AnswerResponse]


class GetQuestionByIdUseCase:
    """Use case for viewing a question.

    Every successful read counts one view.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        tag_service: TagService,
    ) -> None:
        """Initialize get question by ID use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            tag_service: Tag domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.tag_service = tag_service

    async def execute(self, request: GetQuestionByIdRequest) -> QuestionDetailResponse:
        """Execute get question flow.

        Args:
            request: Get question request

        Returns:
            The question after counting the view

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(UUID(request.question_id))

        with logfire.span(
            "get_question_by_id.execute", question_id=request.question_id
        ):
            question = await self.question_service.find_by_id_and_increment_views(
                question_id
            )
            if question is None:
                raise NotFoundError("Question", request.question_id)

            tags = await self.tag_service.get_tags_by_ids(question.tags)
            answers = await self.answer_service.get_most_recent(question.answers)

            base = QuestionResponse.from_question(question, tags)
            return QuestionDetailResponse(
                **base.model_dump(exclude={"answers"}),
                answers=[AnswerResponse.from_answer(answer) for answer in answers],
            )
