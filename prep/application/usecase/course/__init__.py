"""Course use cases."""

from .create_course import CreateCourseRequest, CreateCourseResponse, CreateCourseUseCase
from .delete_course import DeleteCourseRequest, DeleteCourseResponse, DeleteCourseUseCase
from .list_courses import (
    CourseQuestionInfo,
    CourseWithQuestions,
    ListCoursesRequest,
    ListCoursesResponse,
    ListCoursesUseCase,
)

__all__ = [
    "CourseQuestionInfo",
    "CourseWithQuestions",
    "CreateCourseRequest",
    "CreateCourseResponse",
    "CreateCourseUseCase",
    "DeleteCourseRequest",
    "DeleteCourseResponse",
    "DeleteCourseUseCase",
    "ListCoursesRequest",
    "ListCoursesResponse",
    "ListCoursesUseCase",
]
