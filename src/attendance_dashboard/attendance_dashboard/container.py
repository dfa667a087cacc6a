from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.report import AttendanceReportService
from .attendance.service import AttendanceService
from .campus.service import CampusService
from .classes.memory_class_repository import MemoryClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_DASHBOARD_DEPARTMENT
from .courses.memory_course_repository import MemoryCourseRepository
from .courses.service import CourseService
from .dashboard.service import DashboardService
from .database.seed_data import SeedData
from .database.store import InMemoryStore
from .enrollments.memory_enrollment_repository import MemoryEnrollmentRepository
from .enrollments.service import EnrollmentService
from .users.memory_user_repository import MemoryUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: InMemoryStore
    debug: bool

    users_repo: MemoryUserRepository
    courses_repo: MemoryCourseRepository
    classes_repo: MemoryClassRepository
    enrollments_repo: MemoryEnrollmentRepository
    attendance_repo: MemoryAttendanceRepository

    auth_service: AuthService
    user_service: UserService
    course_service: CourseService
    class_service: ClassService
    enrollment_service: EnrollmentService
    attendance_service: AttendanceService
    attendance_report_service: AttendanceReportService
    dashboard_service: DashboardService
    campus_service: CampusService


def build_container(
    *,
    seed: Optional[SeedData] = None,
    random_seed: Optional[int] = None,
    dashboard_department: str = DEFAULT_DASHBOARD_DEPARTMENT,
    debug: bool = False,
) -> Container:
    store = InMemoryStore(seed, debug=debug)

    users_repo = MemoryUserRepository(store)
    courses_repo = MemoryCourseRepository(store)
    classes_repo = MemoryClassRepository(store)
    enrollments_repo = MemoryEnrollmentRepository(store)
    attendance_repo = MemoryAttendanceRepository(store)

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo)
    course_service = CourseService(courses_repo, users_repo, user_service)
    class_service = ClassService(classes_repo, courses_repo, user_service)
    enrollment_service = EnrollmentService(enrollments_repo, courses_repo)
    attendance_service = AttendanceService(attendance_repo, debug=debug)
    attendance_report_service = AttendanceReportService(attendance_repo)
    dashboard_service = DashboardService(
        users_repo,
        courses_repo,
        attendance_repo,
        class_service,
        user_service,
        rng=random.Random(random_seed),
        default_department=dashboard_department,
    )
    campus_service = CampusService(store.departments, courses_repo, user_service)

    return Container(
        store=store,
        debug=debug,
        users_repo=users_repo,
        courses_repo=courses_repo,
        classes_repo=classes_repo,
        enrollments_repo=enrollments_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        user_service=user_service,
        course_service=course_service,
        class_service=class_service,
        enrollment_service=enrollment_service,
        attendance_service=attendance_service,
        attendance_report_service=attendance_report_service,
        dashboard_service=dashboard_service,
        campus_service=campus_service,
    )
