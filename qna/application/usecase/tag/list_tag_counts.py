"""List tag counts use case."""

from pydantic import BaseModel

from qna.domain.service import QuestionService


class TagCountResponse(BaseModel):
    """Tag name with the number of questions carrying it."""

    name: str
    qcnt: int


class ListTagCountsUseCase:
    """Use case for listing tags with their question counts."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize list tag counts use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self) -> list[TagCountResponse]:
        """Execute list tag counts flow.

        Returns:
            One entry per tag used by at least one question
        """
        counts = await self.question_service.get_question_count_by_tag()
        return [TagCountResponse(name=c.name, qcnt=c.qcnt) for c in counts]
