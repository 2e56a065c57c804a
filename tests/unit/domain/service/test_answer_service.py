"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from qna.domain.error import ValidationError
from qna.domain.service import AnswerService
from qna.domain.value import AnswerId, CommentId, QuestionId, VoterId
from tests.harness import NOW, days_ago, make_answer, create_env_fixture

unit_env = create_env_fixture()


async def _create_answer(answer_service: AnswerService, **overrides):
    data = {
        "question_id": QuestionId(uuid4()),
        "text": "Use a closure",
        "ans_by": "bob",
        "ans_date_time": NOW,
    }
    data.update(overrides)
    return await answer_service.create_answer(**data)


class TestCreateAnswer:
    """Tests for create_answer."""

    @pytest.mark.asyncio
    async def test_new_answer_has_no_votes_or_comments(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        answer = await _create_answer(answer_service)

        assert answer.up_votes == []
        assert answer.down_votes == []
        assert answer.comments == []
        assert await answer_service.get_answer_by_id(answer.id) == answer

    @pytest.mark.asyncio
    async def test_missing_fields_are_all_reported(self, unit_env):
        """Missing text and author should both be reported."""
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(ValidationError) as exc_info:
            await _create_answer(answer_service, text=None, ans_by=None)

        assert {e.path for e in exc_info.value.errors} == {"text", "ans_by"}


class TestVoting:
    """Tests for the up/downvote toggles."""

    @pytest.mark.asyncio
    async def test_upvote_twice_withdraws_vote(self, unit_env):
        """Upvoting again should remove the upvote."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer = await _create_answer(answer_service)
        voter = VoterId("u1")

        # Act
        first = await answer_service.find_by_id_and_add_upvote(answer.id, voter)
        second = await answer_service.find_by_id_and_add_upvote(answer.id, voter)

        # Assert
        assert first.up_votes == [voter]
        assert second.up_votes == []
        assert second.down_votes == []

    @pytest.mark.asyncio
    async def test_downvote_twice_withdraws_vote(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        answer = await _create_answer(answer_service)
        voter = VoterId("u1")

        await answer_service.find_by_id_and_add_downvote(answer.id, voter)
        result = await answer_service.find_by_id_and_add_downvote(answer.id, voter)

        assert result.down_votes == []
        assert result.up_votes == []

    @pytest.mark.asyncio
    async def test_switching_moves_the_vote(self, unit_env):
        """Downvoting an upvoted answer should move the vote."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer = await _create_answer(answer_service)
        voter = VoterId("u1")
        await answer_service.find_by_id_and_add_upvote(answer.id, voter)

        # Act
        result = await answer_service.find_by_id_and_add_downvote(answer.id, voter)

        # Assert
        assert result.up_votes == []
        assert result.down_votes == [voter]
        assert result.score == -1

    @pytest.mark.asyncio
    async def test_votes_of_other_voters_are_kept(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        answer = await _create_answer(answer_service)

        await answer_service.find_by_id_and_add_upvote(answer.id, VoterId("u1"))
        await answer_service.find_by_id_and_add_downvote(answer.id, VoterId("u2"))
        result = await answer_service.find_by_id_and_add_upvote(
            answer.id, VoterId("u2")
        )

        assert result.up_votes == [VoterId("u1"), VoterId("u2")]
        assert result.down_votes == []

    @pytest.mark.asyncio
    async def test_voting_unknown_answer_returns_none(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        result = await answer_service.find_by_id_and_add_upvote(
            AnswerId(uuid4()), VoterId("u1")
        )

        assert result is None


class TestComments:
    """Tests for find_by_id_and_add_comment."""

    @pytest.mark.asyncio
    async def test_comment_ids_are_appended(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        answer = await _create_answer(answer_service)
        first, second = CommentId(uuid4()), CommentId(uuid4())

        await answer_service.find_by_id_and_add_comment(answer.id, first)
        result = await answer_service.find_by_id_and_add_comment(answer.id, second)

        assert result.comments == [first, second]

    @pytest.mark.asyncio
    async def test_unknown_answer_returns_none(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        result = await answer_service.find_by_id_and_add_comment(
            AnswerId(uuid4()), CommentId(uuid4())
        )

        assert result is None


class TestMostRecent:
    """Tests for get_most_recent and get_latest_answer_date."""

    @pytest.mark.asyncio
    async def test_get_most_recent_sorts_newest_first(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        old = await _create_answer(answer_service, ans_date_time=days_ago(2))
        new = await _create_answer(answer_service, ans_date_time=NOW)
        await _create_answer(answer_service, ans_date_time=days_ago(1))

        answers = await answer_service.get_most_recent([old.id, new.id])

        assert [a.id for a in answers] == [new.id, old.id]

    @pytest.mark.asyncio
    async def test_get_most_recent_of_nothing_is_empty(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        assert await answer_service.get_most_recent([]) == []

    def test_latest_answer_date(self):
        """The latest date should win regardless of list order."""
        question_id = QuestionId(uuid4())
        answers = [
            make_answer(question_id, ans_date_time=days_ago(3)),
            make_answer(question_id, ans_date_time=days_ago(1)),
            make_answer(question_id, ans_date_time=days_ago(2)),
        ]

        assert AnswerService.get_latest_answer_date(answers) == days_ago(1)

    def test_latest_answer_date_of_empty_list_is_none(self):
        assert AnswerService.get_latest_answer_date([]) is None
