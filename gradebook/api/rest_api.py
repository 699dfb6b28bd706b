"""
REST API implementation for the Gradebook package using FastAPI.
"""

import logging
from typing import Dict, Any, List
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from fastapi import FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..core.entities import Student, Course, Grade
from ..core.exceptions import InvalidArgumentError, ResourceNotFoundError, DuplicateEntityError
from ..services import RecordStore

logger = logging.getLogger(__name__)


# Pydantic models for API
class StudentCreate(BaseModel):
    student_id: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=1, max_length=200)


class StudentResponse(BaseModel):
    student_id: str
    name: str
    email: str


class CourseCreate(BaseModel):
    course_code: str = Field(..., min_length=1, max_length=20)
    course_name: str = Field(..., min_length=1, max_length=200)
    credits: int = Field(..., ge=1, le=30)


class CourseResponse(BaseModel):
    course_code: str
    course_name: str
    credits: int


class GradeCreate(BaseModel):
    student_id: str = Field(..., min_length=1)
    course_code: str = Field(..., min_length=1)
    grade_value: float = Field(..., ge=0.0, le=100.0)


class GradeResponse(BaseModel):
    student_id: str
    course_code: str
    grade_value: float
    letter_grade: str
    grade_points: float


class GPAResponse(BaseModel):
    student_id: str
    gpa: float


class CourseAverageResponse(BaseModel):
    course_code: str
    average: float


class StatisticsResponse(BaseModel):
    success: bool
    message: str
    statistics: Dict[str, Any]


def _to_http_exception(error: InvalidArgumentError) -> HTTPException:
    """Map a domain error onto the matching HTTP status."""
    logger.debug("Rejected request: %s", error)
    if isinstance(error, ResourceNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, DuplicateEntityError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


class GradebookRestAPI:
    """REST API exposing a record store."""

    def __init__(self, record_store: RecordStore):
        self._store = record_store

        # Create FastAPI app
        self.app = FastAPI(
            title="Gradebook API",
            description="An in-memory academic records manager",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        # Add CORS middleware
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        # Setup routes
        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes."""

        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            """Root endpoint."""
            return {
                "message": "Gradebook API",
                "version": __version__,
                "docs": "/docs"
            }

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        # Student endpoints
        @self.app.post("/students", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Create a new student."""
            try:
                student = Student(
                    student_id=student_data.student_id,
                    name=student_data.name,
                    email=student_data.email
                )
                self._store.add_student(student)
            except InvalidArgumentError as e:
                raise _to_http_exception(e)
            return self._student_to_response(student)

        @self.app.get("/students", response_model=List[StudentResponse])
        async def list_students():
            """List all students."""
            return [self._student_to_response(student) for student in self._store.get_all_students()]

        @self.app.get("/students/{student_id}", response_model=StudentResponse)
        async def get_student(student_id: str):
            """Get a student by student ID."""
            student = self._store.get_student(student_id)
            if not student:
                raise HTTPException(status_code=404, detail="Student not found")
            return self._student_to_response(student)

        @self.app.delete("/students/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
        async def delete_student(student_id: str):
            """Delete a student together with their grades."""
            if not self._store.remove_student(student_id):
                raise HTTPException(status_code=404, detail="Student not found")
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        @self.app.get("/students/{student_id}/grades", response_model=List[GradeResponse])
        async def get_student_grades(student_id: str):
            """Get all grades for a student."""
            if not self._store.get_student(student_id):
                raise HTTPException(status_code=404, detail="Student not found")
            return [self._grade_to_response(grade) for grade in self._store.get_grades_for_student(student_id)]

        @self.app.get("/students/{student_id}/gpa", response_model=GPAResponse)
        async def get_student_gpa(student_id: str):
            """Get a student's credit-weighted GPA."""
            try:
                gpa = self._store.calculate_gpa(student_id)
            except InvalidArgumentError as e:
                raise _to_http_exception(e)
            return GPAResponse(student_id=student_id, gpa=gpa)

        # Course endpoints
        @self.app.post("/courses", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
        async def create_course(course_data: CourseCreate):
            """Create a new course."""
            try:
                course = Course(
                    course_code=course_data.course_code,
                    course_name=course_data.course_name,
                    credits=course_data.credits
                )
                self._store.add_course(course)
            except InvalidArgumentError as e:
                raise _to_http_exception(e)
            return self._course_to_response(course)

        @self.app.get("/courses", response_model=List[CourseResponse])
        async def list_courses():
            """List all courses."""
            return [self._course_to_response(course) for course in self._store.get_all_courses()]

        @self.app.get("/courses/{course_code}", response_model=CourseResponse)
        async def get_course(course_code: str):
            """Get a course by code."""
            course = self._store.get_course(course_code)
            if not course:
                raise HTTPException(status_code=404, detail="Course not found")
            return self._course_to_response(course)

        @self.app.delete("/courses/{course_code}", status_code=status.HTTP_204_NO_CONTENT)
        async def delete_course(course_code: str):
            """Delete a course together with its grades."""
            if not self._store.remove_course(course_code):
                raise HTTPException(status_code=404, detail="Course not found")
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        @self.app.get("/courses/{course_code}/grades", response_model=List[GradeResponse])
        async def get_course_grades(course_code: str):
            """Get all grades recorded in a course."""
            if not self._store.get_course(course_code):
                raise HTTPException(status_code=404, detail="Course not found")
            return [self._grade_to_response(grade) for grade in self._store.get_grades_for_course(course_code)]

        @self.app.get("/courses/{course_code}/average", response_model=CourseAverageResponse)
        async def get_course_average(course_code: str):
            """Get the mean grade value of a course."""
            try:
                average = self._store.calculate_course_average(course_code)
            except InvalidArgumentError as e:
                raise _to_http_exception(e)
            return CourseAverageResponse(course_code=self._store.get_course(course_code).course_code,
                                         average=average)

        # Grade endpoints
        @self.app.post("/grades", response_model=GradeResponse)
        async def record_grade(grade_data: GradeCreate):
            """Record a grade, replacing any earlier grade for the same student and course."""
            try:
                grade = self._store.record_grade(
                    grade_data.student_id,
                    grade_data.course_code,
                    grade_data.grade_value
                )
            except InvalidArgumentError as e:
                raise _to_http_exception(e)
            return self._grade_to_response(grade)

        @self.app.get("/grades", response_model=List[GradeResponse])
        async def list_grades():
            """List all grades."""
            return [self._grade_to_response(grade) for grade in self._store.get_all_grades()]

        # Statistics endpoints
        @self.app.get("/statistics", response_model=StatisticsResponse)
        async def get_statistics():
            """Get record store statistics."""
            return StatisticsResponse(
                success=True,
                message="Statistics retrieved successfully",
                statistics=self._store.get_statistics()
            )

    def _student_to_response(self, student: Student) -> StudentResponse:
        """Convert Student entity to response model."""
        return StudentResponse(**student.to_dict())

    def _course_to_response(self, course: Course) -> CourseResponse:
        """Convert Course entity to response model."""
        return CourseResponse(**course.to_dict())

    def _grade_to_response(self, grade: Grade) -> GradeResponse:
        """Convert Grade entity to response model."""
        return GradeResponse(**grade.to_dict())
