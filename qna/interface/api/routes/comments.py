"""Comment routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from qna.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentResponse,
)
from qna.interface.api.session import current_session
from qna.util.jwt import TokenPayload

router = APIRouter(prefix="/comment", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on an answer."""

    aid: str
    text: str
    comment_date_time: datetime | None = None


@router.post("/addComment", response_model=CommentResponse)
async def add_comment(
    request: AddCommentAPIRequest,
    use_case: FromDishka[AddCommentUseCase],
    session: TokenPayload = Depends(current_session),
) -> CommentResponse:
    """Comment on an answer as the logged-in user.

    Args:
        request: Answer ID and comment text
        use_case: Add comment use case from DI
        session: Logged-in user from the session cookie

    Returns:
        Created comment
    """
    return await use_case.execute(
        AddCommentRequest(
            answer_id=request.aid,
            text=request.text,
            comment_date_time=request.comment_date_time,
            user_id=session.user_id,
            username=session.username,
        )
    )
