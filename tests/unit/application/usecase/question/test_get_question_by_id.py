"""Unit tests for GetQuestionByIdUseCase."""

from uuid import uuid4

import pytest

from qna.application.usecase.answer import AddAnswerRequest, AddAnswerUseCase
from qna.application.usecase.question import (
    AddQuestionRequest,
    AddQuestionUseCase,
    GetQuestionByIdRequest,
    GetQuestionByIdUseCase,
)
from qna.domain.error import NotFoundError
from tests.harness import NOW, create_env_fixture, days_ago, signup_user

unit_env = create_env_fixture()


class TestGetQuestionById:
    """Tests for viewing a question."""

    @pytest.mark.asyncio
    async def test_each_view_is_counted(self, unit_env):
        # Arrange
        user = await signup_user(unit_env)
        add_question = await unit_env.get(AddQuestionUseCase)
        use_case = await unit_env.get(GetQuestionByIdUseCase)
        question = await add_question.execute(
            AddQuestionRequest(
                title="Title", text="Body", user_id=user.user_id, username="alice"
            )
        )

        # Act
        first = await use_case.execute(GetQuestionByIdRequest(question_id=question.id))
        second = await use_case.execute(
            GetQuestionByIdRequest(question_id=question.id)
        )

        # Assert
        assert first.views == 1
        assert second.views == 2

    @pytest.mark.asyncio
    async def test_answers_are_resolved_newest_first(self, unit_env):
        """Answers should be embedded, most recent first."""
        # Arrange
        user = await signup_user(unit_env)
        add_question = await unit_env.get(AddQuestionUseCase)
        add_answer = await unit_env.get(AddAnswerUseCase)
        use_case = await unit_env.get(GetQuestionByIdUseCase)
        question = await add_question.execute(
            AddQuestionRequest(
                title="Title",
                text="Body",
                tags=["react"],
                user_id=user.user_id,
                username="alice",
            )
        )
        for text, when in (("Old", days_ago(1)), ("New", NOW)):
            await add_answer.execute(
                AddAnswerRequest(
                    question_id=question.id,
                    text=text,
                    ans_date_time=when,
                    user_id=user.user_id,
                    username="alice",
                )
            )

        # Act
        result = await use_case.execute(GetQuestionByIdRequest(question_id=question.id))

        # Assert
        assert [answer.text for answer in result.answers] == ["New", "Old"]
        assert [tag.name for tag in result.tags] == ["react"]

    @pytest.mark.asyncio
    async def test_unknown_question_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetQuestionByIdUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetQuestionByIdRequest(question_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_id_raises_value_error(self, unit_env):
        use_case = await unit_env.get(GetQuestionByIdUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(GetQuestionByIdRequest(question_id="not-a-uuid"))
