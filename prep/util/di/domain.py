"""Domain layer DI providers."""

import jwt
from dishka import Scope, provide

from prep.config import PLACEHOLDER_SECRET, LimitsSettings, Settings
from prep.domain.repository import (
    CourseRepository,
    QuestionRepository,
    SolvedQuestionRepository,
    UserRepository,
)
from prep.domain.service import (
    CourseService,
    IdentityProviderClient,
    IdentityService,
    QuestionParser,
    QuestionParserService,
    QuestionService,
    SessionService,
    SolvedQuestionService,
    UserService,
)
from prep.util.di.base import ProviderBase
from prep.util.error import ConfigurationError


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_session_service(self, settings: Settings) -> SessionService:
        """Provide session token domain service.

        APP-scoped so the JWKS client caches signing keys across requests.

        Raises:
            ConfigurationError: If production would verify tokens with the
                placeholder shared secret
        """
        auth_settings = settings.auth
        if (
            settings.environment == "production"
            and not auth_settings.jwks_url
            and auth_settings.session_secret == PLACEHOLDER_SECRET
        ):
            raise ConfigurationError("AUTH__JWKS_URL")

        jwks_client = (
            jwt.PyJWKClient(auth_settings.jwks_url) if auth_settings.jwks_url else None
        )
        return SessionService(auth_settings=auth_settings, jwks_client=jwks_client)

    @provide
    def get_identity_service(
        self, identity_client: IdentityProviderClient
    ) -> IdentityService:
        """Provide identity provider domain service."""
        return IdentityService(identity_client=identity_client)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_course_service(
        self, course_repository: CourseRepository, limits: LimitsSettings
    ) -> CourseService:
        """Provide course domain service."""
        return CourseService(course_repository=course_repository, limits=limits)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_solved_question_service(
        self, solved_question_repository: SolvedQuestionRepository
    ) -> SolvedQuestionService:
        """Provide solved question domain service."""
        return SolvedQuestionService(
            solved_question_repository=solved_question_repository
        )

    @provide
    def get_question_parser_service(
        self, parser: QuestionParser
    ) -> QuestionParserService:
        """Provide question parser domain service."""
        return QuestionParserService(parser=parser)
