"""List questions use case."""

import logfire
from pydantic import BaseModel

from qna.domain.service import QuestionService, TagService
from qna.domain.value import QuestionOrder

from .add_question import QuestionResponse


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    order: QuestionOrder = QuestionOrder.NEWEST
    search: str | None = None


class ListQuestionsUseCase:
    """Use case for the question listing.

    Questions are ordered first and then filtered by the search string.
    """

    def __init__(
        self,
        question_service: QuestionService,
        tag_service: TagService,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            tag_service: Tag domain service
        """
        self.question_service = question_service
        self.tag_service = tag_service

    async def execute(self, request: ListQuestionsRequest) -> list[QuestionResponse]:
        """Execute list questions flow.

        Args:
            request: Order and optional search string

        Returns:
            Matching questions in the requested order
        """
        with logfire.span(
            "list_questions.execute",
            order=request.order.value,
            search=request.search,
        ):
            questions = await self.question_service.get_questions_by_order(
                request.order
            )

            tag_ids = {tag_id for question in questions for tag_id in question.tags}
            found = await self.tag_service.get_tags_by_ids(list(tag_ids))
            tags = {tag.id: tag for tag in found}
            tag_names = {
                question.id: [tags[t].name.root for t in question.tags if t in tags]
                for question in questions
            }

            matched = self.question_service.filter_questions_by_search(
                questions, tag_names, request.search
            )
            logfire.info(
                "Questions listed", total=len(questions), matched=len(matched)
            )
            return [
                QuestionResponse.from_question(
                    question, [tags[t] for t in question.tags if t in tags]
                )
                for question in matched
            ]
