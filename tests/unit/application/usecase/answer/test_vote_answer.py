"""Unit tests for VoteAnswerUseCase."""

from uuid import uuid4

import pytest

from qna.application.usecase.answer import (
    VoteAnswerRequest,
    VoteAnswerUseCase,
    VoteDirection,
)
from qna.domain.error import NotFoundError
from qna.domain.repository import AnswerRepository
from qna.domain.value import QuestionId
from tests.harness import create_env_fixture, make_answer

unit_env = create_env_fixture()


async def _vote(unit_env, answer_id, direction, user_id="u1"):
    use_case = await unit_env.get(VoteAnswerUseCase)
    return await use_case.execute(
        VoteAnswerRequest(
            answer_id=str(answer_id), direction=direction, user_id=user_id
        )
    )


class TestVoteAnswer:
    """Tests for toggling votes through the use case."""

    @pytest.mark.asyncio
    async def test_upvote_then_downvote(self, unit_env):
        # Arrange
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.save(make_answer(QuestionId(uuid4())))

        # Act
        up = await _vote(unit_env, answer.id, VoteDirection.UP)
        down = await _vote(unit_env, answer.id, VoteDirection.DOWN)

        # Assert
        assert up.up_votes == ["u1"] and up.down_votes == []
        assert down.up_votes == [] and down.down_votes == ["u1"]

    @pytest.mark.asyncio
    async def test_repeat_vote_withdraws(self, unit_env):
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.save(make_answer(QuestionId(uuid4())))

        await _vote(unit_env, answer.id, VoteDirection.DOWN)
        result = await _vote(unit_env, answer.id, VoteDirection.DOWN)

        assert result.up_votes == [] and result.down_votes == []

    @pytest.mark.asyncio
    async def test_unknown_answer_is_not_found(self, unit_env):
        with pytest.raises(NotFoundError):
            await _vote(unit_env, uuid4(), VoteDirection.UP)
