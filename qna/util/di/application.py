"""Application layer DI providers."""

from dishka import Scope, provide

from qna.application.usecase.answer import AddAnswerUseCase, VoteAnswerUseCase
from qna.application.usecase.comment import AddCommentUseCase
from qna.application.usecase.question import (
    AddQuestionUseCase,
    GetQuestionByIdUseCase,
    ListQuestionsUseCase,
)
from qna.application.usecase.tag import ListTagCountsUseCase
from qna.application.usecase.user import (
    GetProfileUseCase,
    LoginUseCase,
    SignupUseCase,
)
from qna.config import AuthSettings
from qna.domain.service import (
    AnswerService,
    CommentService,
    JWTService,
    QuestionService,
    TagService,
    UserService,
)
from qna.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(
            user_service=user_service,
            jwt_service=jwt_service,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_add_question_use_case(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        user_service: UserService,
    ) -> AddQuestionUseCase:
        """Provide add question use case."""
        return AddQuestionUseCase(
            question_service=question_service,
            tag_service=tag_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_by_id_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        tag_service: TagService,
    ) -> GetQuestionByIdUseCase:
        """Provide get question by ID use case."""
        return GetQuestionByIdUseCase(
            question_service=question_service,
            answer_service=answer_service,
            tag_service=tag_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService, tag_service: TagService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, tag_service=tag_service
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_add_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> AddAnswerUseCase:
        """Provide add answer use case."""
        return AddAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_answer_use_case(
        self, answer_service: AnswerService
    ) -> VoteAnswerUseCase:
        """Provide vote answer use case."""
        return VoteAnswerUseCase(answer_service=answer_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        comment_service: CommentService,
        answer_service: AnswerService,
        user_service: UserService,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service,
            answer_service=answer_service,
            user_service=user_service,
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tag_counts_use_case(
        self, question_service: QuestionService
    ) -> ListTagCountsUseCase:
        """Provide list tag counts use case."""
        return ListTagCountsUseCase(question_service=question_service)
