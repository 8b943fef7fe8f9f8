"""
Admin routes. Gated for the Admin role (GET, POST, PATCH, DELETE).
"""

from fastapi import APIRouter, Depends, Query

from records_api.schemas.common import SUCCESS, MessageResponse
from records_api.schemas.course import (
    CourseCreate,
    CourseResponse,
    CourseUpdate,
    CurriculumCourseLink,
    CurriculumCreate,
    CurriculumResponse,
    CurriculumUpdate,
)
from records_api.schemas.people import PersonCreate, PersonResponse, PersonUpdate
from records_api.services.course import CourseService, CurriculumService
from records_api.services.people import PeopleService
from records_api.api.dependencies.services import (
    get_course_service,
    get_curriculum_service,
    get_people_service,
)

router = APIRouter()


# Courses

@router.get("/courses", response_model=list[CourseResponse])
async def list_courses(
    course_service: CourseService = Depends(get_course_service),
):
    """All courses that have not been deleted."""
    courses = await course_service.list_courses()
    return [CourseResponse.from_model(c) for c in courses]


@router.post("/courses", response_model=MessageResponse)
async def create_course(
    data: CourseCreate,
    course_service: CourseService = Depends(get_course_service),
):
    await course_service.create(data)
    return SUCCESS


@router.patch("/courses", response_model=CourseResponse)
async def update_course(
    data: CourseUpdate,
    course_service: CourseService = Depends(get_course_service),
):
    course = await course_service.update(data)
    return CourseResponse.from_model(course)


@router.delete("/courses", response_model=MessageResponse)
async def delete_course(
    name: str = Query(..., min_length=1),
    course_service: CourseService = Depends(get_course_service),
):
    """Soft delete every course with the given name."""
    await course_service.delete_by_name(name)
    return SUCCESS


# Students and teachers

@router.get("/students", response_model=list[PersonResponse])
async def list_students(
    people_service: PeopleService = Depends(get_people_service),
):
    people = await people_service.list_members("student")
    return [PersonResponse.model_validate(p) for p in people]


@router.post("/students", response_model=MessageResponse)
async def create_student(
    data: PersonCreate,
    people_service: PeopleService = Depends(get_people_service),
):
    await people_service.create_member("student", data)
    return SUCCESS


@router.patch("/students", response_model=PersonResponse)
async def update_student(
    data: PersonUpdate,
    people_service: PeopleService = Depends(get_people_service),
):
    person = await people_service.update_member("student", data)
    return PersonResponse.model_validate(person)


@router.get("/teachers", response_model=list[str])
async def list_teachers(
    people_service: PeopleService = Depends(get_people_service),
):
    """Emails of active teachers."""
    return await people_service.member_emails("teacher")


@router.post("/teachers", response_model=MessageResponse)
async def create_teacher(
    data: PersonCreate,
    people_service: PeopleService = Depends(get_people_service),
):
    await people_service.create_member("teacher", data)
    return SUCCESS


@router.patch("/teachers", response_model=PersonResponse)
async def update_teacher(
    data: PersonUpdate,
    people_service: PeopleService = Depends(get_people_service),
):
    person = await people_service.update_member("teacher", data)
    return PersonResponse.model_validate(person)


@router.get("/users", response_model=list[PersonResponse])
async def list_users(
    role: str = Query(...),
    people_service: PeopleService = Depends(get_people_service),
):
    """Active members of a role (``student`` or ``teacher``)."""
    people = await people_service.list_members(role)
    return [PersonResponse.model_validate(p) for p in people]


@router.delete("/users", response_model=MessageResponse)
async def archive_user(
    email: str = Query(..., min_length=1),
    role: str = Query(...),
    people_service: PeopleService = Depends(get_people_service),
):
    """Archive a student or teacher; their details are kept."""
    await people_service.archive_member(role, email)
    return SUCCESS


# Curricula

@router.get("/curricula", response_model=list[CurriculumResponse])
async def list_curricula(
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
):
    curricula = await curriculum_service.list_curricula()
    return [CurriculumResponse.from_model(c) for c in curricula]


@router.post("/curricula", response_model=MessageResponse)
async def create_curriculum(
    data: CurriculumCreate,
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
):
    await curriculum_service.create(data)
    return SUCCESS


@router.patch("/curricula", response_model=CurriculumResponse)
async def update_curriculum(
    data: CurriculumUpdate,
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
):
    curriculum = await curriculum_service.update(data)
    return CurriculumResponse.from_model(curriculum)


@router.delete("/curricula", response_model=MessageResponse)
async def delete_curriculum(
    name: str = Query(..., min_length=1),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
):
    await curriculum_service.delete_by_name(name)
    return SUCCESS


@router.post("/curricula/courses", response_model=CurriculumResponse)
async def add_curriculum_course(
    data: CurriculumCourseLink,
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
):
    """Count a course towards a curriculum."""
    curriculum = await curriculum_service.add_course(data)
    return CurriculumResponse.from_model(curriculum)
