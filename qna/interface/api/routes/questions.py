"""Question routes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from qna.application.usecase.question import (
    AddQuestionRequest,
    AddQuestionUseCase,
    GetQuestionByIdRequest,
    GetQuestionByIdUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    QuestionDetailResponse,
    QuestionResponse,
)
from qna.domain.value import QuestionOrder
from qna.interface.api.session import current_session
from qna.util.jwt import TokenPayload

router = APIRouter(prefix="/question", tags=["questions"], route_class=DishkaRoute)


class AddQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str
    text: str
    tags: list[str]
    ask_date_time: datetime | None = None


@router.post("/addQuestion", response_model=QuestionResponse)
async def add_question(
    request: AddQuestionAPIRequest,
    use_case: FromDishka[AddQuestionUseCase],
    session: TokenPayload = Depends(current_session),
) -> QuestionResponse:
    """Ask a question as the logged-in user.

    Unknown tag names are created on the fly.

    Args:
        request: Question data
        use_case: Add question use case from DI
        session: Logged-in user from the session cookie

    Returns:
        Created question
    """
    return await use_case.execute(
        AddQuestionRequest(
            title=request.title,
            text=request.text,
            tags=request.tags,
            ask_date_time=request.ask_date_time,
            user_id=session.user_id,
            username=session.username,
        )
    )


@router.get("/getQuestionById/{qid}", response_model=QuestionDetailResponse)
async def get_question_by_id(
    qid: str, use_case: FromDishka[GetQuestionByIdUseCase]
) -> QuestionDetailResponse:
    """Get a question with its answers, counting one view.

    Args:
        qid: Question ID
        use_case: Get question by ID use case from DI

    Returns:
        Question with answers, most recent first
    """
    return await use_case.execute(GetQuestionByIdRequest(question_id=qid))


@router.get("/getQuestion", response_model=list[QuestionResponse])
async def get_questions(
    use_case: FromDishka[ListQuestionsUseCase],
    order: QuestionOrder = QuestionOrder.NEWEST,
    search: str | None = None,
) -> list[QuestionResponse]:
    """List questions.

    Args:
        use_case: List questions use case from DI
        order: newest (default), active or unanswered
        search: ``[tag]`` tokens and title keywords

    Returns:
        Questions in the requested order, filtered by the search

    Example:
        GET /question/getQuestion?order=unanswered&search=[javascript]
    """
    with logfire.span("api.get_questions", order=order.value, search=search):
        return await use_case.execute(ListQuestionsRequest(order=order, search=search))
