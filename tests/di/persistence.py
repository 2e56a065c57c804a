"""Mock persistence providers for testing."""

from dishka import Scope, provide

from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from qna.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryQuestionRepository,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from qna.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that state survives across the requests
    of one container. Each test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()

    @provide(scope=Scope.APP)
    def get_answer_repository(self) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_tag_repository(self) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository()
