"""Unit tests for ListQuestionsUseCase."""

from datetime import timedelta

import pytest

from qna.application.usecase.answer import AddAnswerRequest, AddAnswerUseCase
from qna.application.usecase.question import (
    AddQuestionRequest,
    AddQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from qna.domain.value import QuestionOrder
from tests.harness import NOW, create_env_fixture, days_ago, signup_user

unit_env = create_env_fixture()


async def _seed(unit_env) -> None:
    """Newest react question, yesterday's answered one, older javascript one."""
    user = await signup_user(unit_env)
    add_question = await unit_env.get(AddQuestionUseCase)
    add_answer = await unit_env.get(AddAnswerUseCase)

    seeds = [
        ("How to manage React state", ["react"], NOW - timedelta(hours=1)),
        ("React hooks and effects", ["react"], days_ago(1)),
        ("JavaScript closures explained", ["javascript"], days_ago(2)),
    ]
    created = []
    for title, tags, when in seeds:
        created.append(
            await add_question.execute(
                AddQuestionRequest(
                    title=title,
                    text="Body",
                    tags=tags,
                    ask_date_time=when,
                    user_id=user.user_id,
                    username="alice",
                )
            )
        )
    await add_answer.execute(
        AddAnswerRequest(
            question_id=created[1].id,
            text="Use useEffect",
            ans_date_time=NOW,
            user_id=user.user_id,
            username="alice",
        )
    )


async def _titles(unit_env, order=QuestionOrder.NEWEST, search=None) -> list[str]:
    use_case = await unit_env.get(ListQuestionsUseCase)
    result = await use_case.execute(ListQuestionsRequest(order=order, search=search))
    return [question.title for question in result]


class TestListQuestions:
    """Tests for ordering and searching questions."""

    @pytest.mark.asyncio
    async def test_newest(self, unit_env):
        await _seed(unit_env)

        assert await _titles(unit_env) == [
            "How to manage React state",
            "React hooks and effects",
            "JavaScript closures explained",
        ]

    @pytest.mark.asyncio
    async def test_active(self, unit_env):
        await _seed(unit_env)

        assert await _titles(unit_env, QuestionOrder.ACTIVE) == [
            "React hooks and effects",
            "How to manage React state",
            "JavaScript closures explained",
        ]

    @pytest.mark.asyncio
    async def test_unanswered(self, unit_env):
        await _seed(unit_env)

        assert await _titles(unit_env, QuestionOrder.UNANSWERED) == [
            "How to manage React state",
            "JavaScript closures explained",
        ]

    @pytest.mark.asyncio
    async def test_search_by_tag(self, unit_env):
        await _seed(unit_env)

        assert await _titles(unit_env, search="[javascript]") == [
            "JavaScript closures explained"
        ]

    @pytest.mark.asyncio
    async def test_search_by_keyword_keeps_order(self, unit_env):
        await _seed(unit_env)

        assert await _titles(unit_env, QuestionOrder.ACTIVE, search="react") == [
            "React hooks and effects",
            "How to manage React state",
        ]

    @pytest.mark.asyncio
    async def test_search_applies_after_unanswered_filter(self, unit_env):
        await _seed(unit_env)

        assert await _titles(
            unit_env, QuestionOrder.UNANSWERED, search="[react]"
        ) == ["How to manage React state"]

    @pytest.mark.asyncio
    async def test_search_without_match(self, unit_env):
        await _seed(unit_env)

        assert await _titles(unit_env, search="[python]") == []

    @pytest.mark.asyncio
    async def test_empty_store(self, unit_env):
        assert await _titles(unit_env) == []
