"""End-to-end tests for the question routes."""

from datetime import timedelta
from uuid import uuid4

from tests.harness import NOW, days_ago


def _ask(client, title, tags, when=None, text="Body"):
    payload = {"title": title, "text": text, "tags": tags}
    if when is not None:
        payload["ask_date_time"] = when.isoformat()
    response = client.post("/question/addQuestion", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def _seed(client):
    """Newest react question, yesterday's answered one, older javascript one."""
    newest = _ask(
        client, "How to manage React state", ["react"], NOW - timedelta(hours=1)
    )
    answered = _ask(client, "React hooks and effects", ["react"], days_ago(1))
    oldest = _ask(client, "JavaScript closures explained", ["javascript"], days_ago(2))
    response = client.post(
        "/answer/addAnswer",
        json={
            "qid": answered["id"],
            "text": "Use useEffect",
            "ans_date_time": NOW.isoformat(),
        },
    )
    assert response.status_code == 200
    return newest, answered, oldest


def _titles(client, **params):
    response = client.get("/question/getQuestion", params=params)
    assert response.status_code == 200
    return [question["title"] for question in response.json()]


class TestAddQuestion:
    """Tests for POST /question/addQuestion."""

    def test_add_question(self, logged_in):
        # Act
        question = _ask(logged_in, "Title", ["react", "javascript"], NOW)

        # Assert
        assert question["title"] == "Title"
        assert question["asked_by"] == "alice"
        assert question["views"] == 0
        assert question["answers"] == []
        assert [tag["name"] for tag in question["tags"]] == ["react", "javascript"]

        profile = logged_in.get("/user/profile").json()
        assert [q["id"] for q in profile["questions"]] == [question["id"]]

    def test_requires_session(self, client):
        response = client.post(
            "/question/addQuestion", json={"title": "T", "text": "B", "tags": []}
        )

        assert response.status_code == 401

    def test_session_is_checked_before_body(self, client):
        response = client.post(
            "/question/addQuestion", json={"text": "Body", "tags": []}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Missing token"}

    def test_missing_title_is_reported_on_body(self, logged_in):
        response = logged_in.post(
            "/question/addQuestion", json={"text": "Body", "tags": []}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert len(body["errors"]) == 1
        assert body["errors"][0]["path"] == ".body"

    def test_malformed_tags_are_reported_on_tags(self, logged_in):
        response = logged_in.post(
            "/question/addQuestion",
            json={"title": "T", "text": "Body", "tags": "react"},
        )

        assert response.status_code == 400
        assert [e["path"] for e in response.json()["errors"]] == [".body.tags"]

    def test_empty_title_fails_entity_validation(self, logged_in):
        response = logged_in.post(
            "/question/addQuestion", json={"title": "", "text": "Body", "tags": []}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == "title"


class TestGetQuestionById:
    """Tests for GET /question/getQuestionById/{qid}."""

    def test_every_read_counts_a_view(self, logged_in):
        question = _ask(logged_in, "Title", [])
        url = f"/question/getQuestionById/{question['id']}"

        views = [logged_in.get(url).json()["views"] for _ in range(3)]

        assert views == [1, 2, 3]

    def test_answers_are_embedded(self, logged_in):
        _, answered, _ = _seed(logged_in)

        response = logged_in.get(f"/question/getQuestionById/{answered['id']}")

        assert response.status_code == 200
        [answer] = response.json()["answers"]
        assert answer["text"] == "Use useEffect"
        assert answer["ans_by"] == "alice"

    def test_unknown_question(self, client):
        response = client.get(f"/question/getQuestionById/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"message": "Question not found"}

    def test_malformed_id_is_a_server_error(self, client):
        response = client.get("/question/getQuestionById/not-an-id")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}

    def test_reading_needs_no_session(self, logged_in):
        question = _ask(logged_in, "Title", [])
        logged_in.post("/user/logout")

        response = logged_in.get(f"/question/getQuestionById/{question['id']}")

        assert response.status_code == 200


class TestGetQuestions:
    """Tests for GET /question/getQuestion."""

    def test_default_order_is_newest(self, logged_in):
        _seed(logged_in)

        assert _titles(logged_in) == [
            "How to manage React state",
            "React hooks and effects",
            "JavaScript closures explained",
        ]

    def test_active(self, logged_in):
        _seed(logged_in)

        assert _titles(logged_in, order="active") == [
            "React hooks and effects",
            "How to manage React state",
            "JavaScript closures explained",
        ]

    def test_unanswered(self, logged_in):
        _seed(logged_in)

        assert _titles(logged_in, order="unanswered") == [
            "How to manage React state",
            "JavaScript closures explained",
        ]

    def test_search_by_tag(self, logged_in):
        _seed(logged_in)

        assert _titles(logged_in, search="[javascript]") == [
            "JavaScript closures explained"
        ]

    def test_search_by_keyword_with_order(self, logged_in):
        _seed(logged_in)

        assert _titles(logged_in, order="active", search="react") == [
            "React hooks and effects",
            "How to manage React state",
        ]

    def test_search_tag_or_keyword(self, logged_in):
        _seed(logged_in)

        assert _titles(logged_in, search="[javascript] hooks") == [
            "React hooks and effects",
            "JavaScript closures explained",
        ]

    def test_search_without_match(self, logged_in):
        _seed(logged_in)

        assert _titles(logged_in, search="python") == []

    def test_unknown_order_is_rejected(self, client):
        response = client.get("/question/getQuestion", params={"order": "oldest"})

        assert response.status_code == 400
