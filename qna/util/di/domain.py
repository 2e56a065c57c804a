"""Domain layer DI providers."""

from dishka import Scope, provide

from qna.config import AuthSettings
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from qna.domain.service import (
    AnswerService,
    CommentService,
    JWTService,
    QuestionService,
    TagService,
    UserService,
)
from qna.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, question_repository: QuestionRepository
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository, question_repository=question_repository
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_service: AnswerService,
        tag_service: TagService,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_service=answer_service,
            tag_service=tag_service,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
            comment_repository=comment_repository,
        )
