"""Answer routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from qna.application.usecase.answer import (
    AddAnswerRequest,
    AddAnswerUseCase,
    AnswerResponse,
    VoteAnswerRequest,
    VoteAnswerResponse,
    VoteAnswerUseCase,
    VoteDirection,
)
from qna.interface.api.session import current_session
from qna.util.jwt import TokenPayload

router = APIRouter(prefix="/answer", tags=["answers"], route_class=DishkaRoute)


class AddAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    qid: str
    text: str
    ans_date_time: datetime | None = None


@router.post("/addAnswer", response_model=AnswerResponse)
async def add_answer(
    request: AddAnswerAPIRequest,
    use_case: FromDishka[AddAnswerUseCase],
    session: TokenPayload = Depends(current_session),
) -> AnswerResponse:
    """Answer a question as the logged-in user.

    Args:
        request: Question ID and answer text
        use_case: Add answer use case from DI
        session: Logged-in user from the session cookie

    Returns:
        Created answer
    """
    return await use_case.execute(
        AddAnswerRequest(
            question_id=request.qid,
            text=request.text,
            ans_date_time=request.ans_date_time,
            user_id=session.user_id,
            username=session.username,
        )
    )


async def _vote(
    aid: str,
    direction: VoteDirection,
    use_case: VoteAnswerUseCase,
    session: TokenPayload,
) -> VoteAnswerResponse:
    return await use_case.execute(
        VoteAnswerRequest(answer_id=aid, direction=direction, user_id=session.user_id)
    )


@router.post("/upvote/{aid}", response_model=VoteAnswerResponse)
async def upvote(
    aid: str,
    use_case: FromDishka[VoteAnswerUseCase],
    session: TokenPayload = Depends(current_session),
) -> VoteAnswerResponse:
    """Toggle the logged-in user's upvote on an answer."""
    return await _vote(aid, VoteDirection.UP, use_case, session)


@router.post("/downvote/{aid}", response_model=VoteAnswerResponse)
async def downvote(
    aid: str,
    use_case: FromDishka[VoteAnswerUseCase],
    session: TokenPayload = Depends(current_session),
) -> VoteAnswerResponse:
    """Toggle the logged-in user's downvote on an answer."""
    return await _vote(aid, VoteDirection.DOWN, use_case, session)
