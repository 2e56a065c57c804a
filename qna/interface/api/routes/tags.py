"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from qna.application.usecase.tag import ListTagCountsUseCase, TagCountResponse

router = APIRouter(prefix="/tag", tags=["tags"], route_class=DishkaRoute)


@router.get(
    "/getTagsWithQuestionNumber",
    response_model=list[TagCountResponse],
    summary="List tags with question counts",
    description="Tags used by at least one question, with the number of questions.",
)
async def get_tags_with_question_number(
    use_case: FromDishka[ListTagCountsUseCase],
) -> list[TagCountResponse]:
    """List tags with the number of questions carrying each."""
    with logfire.span("api.get_tags_with_question_number"):
        return await use_case.execute()
