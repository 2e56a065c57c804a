"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from qna.domain.model import Answer, Comment, Question, Tag, User
from qna.domain.value import (
    AnswerId,
    CommentId,
    QuestionId,
    TagId,
    TagName,
    UserId,
    VoterId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(id=TagId(_uuid(row["id"])), name=TagName(row["name"]))


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {"id": tag.id, "name": tag.name.root}


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        text=row["text"],
        commented_by=row["commented_by"],
        comment_date_time=row["comment_date_time"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        text=row["text"],
        ans_by=row["ans_by"],
        ans_date_time=row["ans_date_time"],
        up_votes=[VoterId(v) for v in row.get("up_votes") or []],
        down_votes=[VoterId(v) for v in row.get("down_votes") or []],
        comments=[CommentId(_uuid(c)) for c in row.get("comments") or []],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        text=row["text"],
        tags=[TagId(_uuid(t)) for t in row.get("tags") or []],
        asked_by=row["asked_by"],
        ask_date_time=row["ask_date_time"],
        views=row["views"],
        answers=[AnswerId(_uuid(a)) for a in row.get("answers") or []],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    return question.model_dump()


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        questions=[QuestionId(_uuid(q)) for q in row.get("questions") or []],
        answers=[AnswerId(_uuid(a)) for a in row.get("answers") or []],
        comments=[CommentId(_uuid(c)) for c in row.get("comments") or []],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()
