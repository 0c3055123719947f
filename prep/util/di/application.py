"""Application layer DI providers."""

from dishka import Scope, provide

from prep.application.usecase.admin import (
    AdminGuard,
    CreateDefaultCourseUseCase,
    CreateDefaultQuestionUseCase,
    ListDefaultQuestionsUseCase,
    RemoveDefaultQuestionUseCase,
    UpdateDefaultQuestionUseCase,
)
from prep.application.usecase.auth import SyncUserUseCase
from prep.application.usecase.bookmark import (
    AddBookmarkUseCase,
    ListBookmarksUseCase,
    RemoveBookmarkUseCase,
)
from prep.application.usecase.caller import CallerResolver
from prep.application.usecase.course import (
    CreateCourseUseCase,
    DeleteCourseUseCase,
    ListCoursesUseCase,
)
from prep.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    ListQuestionsUseCase,
    ParseQuestionUseCase,
)
from prep.application.usecase.solved import (
    ListSolvedUseCase,
    MarkSolvedUseCase,
    UnmarkSolvedUseCase,
)
from prep.application.usecase.user import GetCurrentUserUseCase
from prep.config import AuthSettings
from prep.domain.service import (
    CourseService,
    IdentityService,
    QuestionParserService,
    QuestionService,
    SessionService,
    SolvedQuestionService,
    UserService,
)
from prep.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_caller_resolver(
        self, session_service: SessionService, user_service: UserService
    ) -> CallerResolver:
        """Provide session token resolver."""
        return CallerResolver(session_service=session_service, user_service=user_service)

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_sync_user_use_case(
        self,
        caller_resolver: CallerResolver,
        identity_service: IdentityService,
        user_service: UserService,
    ) -> SyncUserUseCase:
        """Provide sync user use case."""
        return SyncUserUseCase(
            caller_resolver=caller_resolver,
            identity_service=identity_service,
            user_service=user_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        caller_resolver: CallerResolver,
        course_service: CourseService,
        solved_question_service: SolvedQuestionService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            caller_resolver=caller_resolver,
            course_service=course_service,
            solved_question_service=solved_question_service,
        )

    # Course use cases
    @provide(scope=Scope.REQUEST)
    def get_list_courses_use_case(
        self,
        caller_resolver: CallerResolver,
        course_service: CourseService,
        question_service: QuestionService,
        solved_question_service: SolvedQuestionService,
    ) -> ListCoursesUseCase:
        """Provide list courses use case."""
        return ListCoursesUseCase(
            caller_resolver=caller_resolver,
            course_service=course_service,
            question_service=question_service,
            solved_question_service=solved_question_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_course_use_case(
        self,
        caller_resolver: CallerResolver,
        identity_service: IdentityService,
        user_service: UserService,
        course_service: CourseService,
    ) -> CreateCourseUseCase:
        """Provide create course use case."""
        return CreateCourseUseCase(
            caller_resolver=caller_resolver,
            identity_service=identity_service,
            user_service=user_service,
            course_service=course_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_course_use_case(
        self,
        caller_resolver: CallerResolver,
        user_service: UserService,
        course_service: CourseService,
    ) -> DeleteCourseUseCase:
        """Provide delete course use case."""
        return DeleteCourseUseCase(
            caller_resolver=caller_resolver,
            user_service=user_service,
            course_service=course_service,
        )

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self,
        caller_resolver: CallerResolver,
        course_service: CourseService,
        question_service: QuestionService,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            caller_resolver=caller_resolver,
            course_service=course_service,
            question_service=question_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self,
        caller_resolver: CallerResolver,
        user_service: UserService,
        course_service: CourseService,
        question_service: QuestionService,
        solved_question_service: SolvedQuestionService,
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            caller_resolver=caller_resolver,
            user_service=user_service,
            course_service=course_service,
            question_service=question_service,
            solved_question_service=solved_question_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_parse_question_use_case(
        self, question_parser_service: QuestionParserService
    ) -> ParseQuestionUseCase:
        """Provide parse question use case."""
        return ParseQuestionUseCase(question_parser_service=question_parser_service)

    # Bookmark use cases
    @provide(scope=Scope.REQUEST)
    def get_add_bookmark_use_case(
        self,
        caller_resolver: CallerResolver,
        user_service: UserService,
        question_service: QuestionService,
    ) -> AddBookmarkUseCase:
        """Provide add bookmark use case."""
        return AddBookmarkUseCase(
            caller_resolver=caller_resolver,
            user_service=user_service,
            question_service=question_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_bookmark_use_case(
        self, caller_resolver: CallerResolver, user_service: UserService
    ) -> RemoveBookmarkUseCase:
        """Provide remove bookmark use case."""
        return RemoveBookmarkUseCase(
            caller_resolver=caller_resolver, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_bookmarks_use_case(
        self, caller_resolver: CallerResolver
    ) -> ListBookmarksUseCase:
        """Provide list bookmarks use case."""
        return ListBookmarksUseCase(caller_resolver=caller_resolver)

    # Solved question use cases
    @provide(scope=Scope.REQUEST)
    def get_mark_solved_use_case(
        self,
        caller_resolver: CallerResolver,
        question_service: QuestionService,
        solved_question_service: SolvedQuestionService,
    ) -> MarkSolvedUseCase:
        """Provide mark solved use case."""
        return MarkSolvedUseCase(
            caller_resolver=caller_resolver,
            question_service=question_service,
            solved_question_service=solved_question_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_unmark_solved_use_case(
        self,
        caller_resolver: CallerResolver,
        solved_question_service: SolvedQuestionService,
    ) -> UnmarkSolvedUseCase:
        """Provide unmark solved use case."""
        return UnmarkSolvedUseCase(
            caller_resolver=caller_resolver,
            solved_question_service=solved_question_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_solved_use_case(
        self,
        caller_resolver: CallerResolver,
        question_service: QuestionService,
        solved_question_service: SolvedQuestionService,
    ) -> ListSolvedUseCase:
        """Provide list solved questions use case."""
        return ListSolvedUseCase(
            caller_resolver=caller_resolver,
            question_service=question_service,
            solved_question_service=solved_question_service,
        )

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_admin_guard(
        self,
        caller_resolver: CallerResolver,
        identity_service: IdentityService,
        auth_settings: AuthSettings,
    ) -> AdminGuard:
        """Provide admin access guard."""
        return AdminGuard(
            caller_resolver=caller_resolver,
            identity_service=identity_service,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_default_course_use_case(
        self, admin_guard: AdminGuard, course_service: CourseService
    ) -> CreateDefaultCourseUseCase:
        """Provide create default course use case."""
        return CreateDefaultCourseUseCase(
            admin_guard=admin_guard, course_service=course_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_default_questions_use_case(
        self,
        admin_guard: AdminGuard,
        course_service: CourseService,
        question_service: QuestionService,
    ) -> ListDefaultQuestionsUseCase:
        """Provide list default course questions use case."""
        return ListDefaultQuestionsUseCase(
            admin_guard=admin_guard,
            course_service=course_service,
            question_service=question_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_default_question_use_case(
        self,
        admin_guard: AdminGuard,
        course_service: CourseService,
        question_service: QuestionService,
    ) -> CreateDefaultQuestionUseCase:
        """Provide create default course question use case."""
        return CreateDefaultQuestionUseCase(
            admin_guard=admin_guard,
            course_service=course_service,
            question_service=question_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_default_question_use_case(
        self,
        admin_guard: AdminGuard,
        course_service: CourseService,
        question_service: QuestionService,
    ) -> UpdateDefaultQuestionUseCase:
        """Provide update default course question use case."""
        return UpdateDefaultQuestionUseCase(
            admin_guard=admin_guard,
            course_service=course_service,
            question_service=question_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_default_question_use_case(
        self,
        admin_guard: AdminGuard,
        course_service: CourseService,
        question_service: QuestionService,
    ) -> RemoveDefaultQuestionUseCase:
        """Provide remove default course question use case."""
        return RemoveDefaultQuestionUseCase(
            admin_guard=admin_guard,
            course_service=course_service,
            question_service=question_service,
        )
