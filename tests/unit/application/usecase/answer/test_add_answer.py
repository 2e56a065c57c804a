"""Unit tests for AddAnswerUseCase."""

from uuid import UUID, uuid4

import pytest

from qna.application.usecase.answer import AddAnswerRequest, AddAnswerUseCase
from qna.application.usecase.question import AddQuestionRequest, AddQuestionUseCase
from qna.domain.error import NotFoundError, ValidationError
from qna.domain.service import QuestionService, UserService
from tests.harness import NOW, create_env_fixture, signup_user

unit_env = create_env_fixture()


async def _ask(unit_env, user_id: str) -> str:
    add_question = await unit_env.get(AddQuestionUseCase)
    question = await add_question.execute(
        AddQuestionRequest(title="Title", text="Body", user_id=user_id, username="alice")
    )
    return question.id


class TestAddAnswer:
    """Tests for the add answer flow."""

    @pytest.mark.asyncio
    async def test_answer_is_linked_to_question_and_user(self, unit_env):
        # Arrange
        user = await signup_user(unit_env)
        question_id = await _ask(unit_env, user.user_id)
        use_case = await unit_env.get(AddAnswerUseCase)
        question_service = await unit_env.get(QuestionService)
        user_service = await unit_env.get(UserService)

        # Act
        answer = await use_case.execute(
            AddAnswerRequest(
                question_id=question_id,
                text="An answer",
                ans_date_time=NOW,
                user_id=user.user_id,
                username="alice",
            )
        )

        # Assert
        assert answer.ans_by == "alice"
        assert answer.question_id == question_id
        assert answer.up_votes == [] and answer.down_votes == []
        assert answer.score == 0
        question = await question_service.get_question_by_id(UUID(question_id))
        assert [str(a) for a in question.answers] == [answer.id]
        stored_user = await user_service.get_user_by_id(UUID(user.user_id))
        assert [str(a) for a in stored_user.answers] == [answer.id]

    @pytest.mark.asyncio
    async def test_unknown_question_is_not_found(self, unit_env):
        user = await signup_user(unit_env)
        use_case = await unit_env.get(AddAnswerUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AddAnswerRequest(
                    question_id=str(uuid4()),
                    text="An answer",
                    user_id=user.user_id,
                    username="alice",
                )
            )

    @pytest.mark.asyncio
    async def test_empty_text_fails_validation(self, unit_env):
        user = await signup_user(unit_env)
        question_id = await _ask(unit_env, user.user_id)
        use_case = await unit_env.get(AddAnswerUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                AddAnswerRequest(
                    question_id=question_id,
                    text="",
                    user_id=user.user_id,
                    username="alice",
                )
            )
