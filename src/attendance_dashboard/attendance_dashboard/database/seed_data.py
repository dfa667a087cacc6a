"""Static seed tables for the in-memory store.

The tables here are constants: the store deep-copies them on every reset and
never mutates them.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import sunday_first_index
from ..core.enums import AttendanceStatus, Role, StudentType
from ..courses.model import Course
from ..attendance.model import AttendanceRecord
from ..users.model import User

ATTENDANCE_START_DATE = date(2025, 1, 15)
# Generated classes never fall after this date.
ATTENDANCE_CUTOFF_DATE = date(2025, 5, 25)
DEFAULT_RECORDS_PER_SUBJECT = 5
DEFAULT_ATTENDANCE_SEED = 2025


@dataclass(frozen=True)
class Department:
    id: str
    name: str
    total_semesters: int
    # academic year -> semester -> subject ids
    academic_years: dict[str, dict[int, tuple[str, ...]]]

    def subject_ids_for(self, academic_year: str, semester: int) -> tuple[str, ...]:
        return self.academic_years.get(academic_year, {}).get(semester, ())


ADMINS: tuple[User, ...] = (
    User(
        id=1,
        username="admin",
        password="admin123",
        name="System Administrator",
        email="admin@college.edu",
        role=Role.ADMIN,
        created_at="2023-01-01T00:00:00.000Z",
    ),
)

DEPARTMENTS: dict[str, Department] = {
    "MCA": Department(
        id="MCA",
        name="Master of Computer Applications",
        total_semesters=4,
        academic_years={
            "2024-2025": {
                1: ("MCA101", "MCA102", "MCA103", "MCA104", "MCA105", "MCA106"),
                2: ("MCA201", "MCA202"),
                3: (),
                4: (),
            },
        },
    ),
    "CSE": Department(
        id="CSE",
        name="B.Tech Computer Science Engineering",
        total_semesters=8,
        academic_years={
            "2024-2025": {
                1: ("CSE101", "CSE102"),
                2: ("CSE201", "CSE202"),
                3: ("CSE301", "CSE302"),
            },
        },
    ),
}


def _subject(code: str, name: str, semester: int, department: str, faculty_id: Optional[int] = None) -> Course:
    return Course(
        id=code,
        name=name,
        code=code,
        credits=4,
        semester=semester,
        department=department,
        faculty_id=faculty_id,
    )


SUBJECTS: tuple[Course, ...] = (
    _subject("MCA101", "Mathematical Foundations", 1, "MCA"),
    _subject("MCA102", "Computer Architecture", 1, "MCA"),
    _subject("MCA103", "Java Programming", 1, "MCA", 2),
    _subject("MCA104", "Database Management", 1, "MCA", 3),
    _subject("MCA105", "Operating Systems", 1, "MCA", 2),
    _subject("MCA106", "Data Structures with C", 1, "MCA", 3),
    _subject("MCA201", "Advanced Java", 2, "MCA", 2),
    _subject("MCA202", "Web Technologies", 2, "MCA", 3),
    _subject("CSE101", "Intro to Programming (CSE)", 1, "CSE", 10),
    _subject("CSE102", "Discrete Maths (CSE)", 1, "CSE", 11),
    _subject("CSE201", "Data Structures (CSE)", 2, "CSE", 10),
    _subject("CSE202", "Digital Logic Design (CSE)", 2, "CSE", 11),
    _subject("CSE301", "Algorithms (CSE)", 3, "CSE", 10),
    _subject("CSE302", "OOP with Python (CSE)", 3, "CSE", 11),
)


def _faculty(user_id: int, username: str, name: str, email: str, department: str, subject_ids: Sequence[str], created: str) -> User:
    return User(
        id=user_id,
        username=username,
        password="faculty123",
        name=name,
        email=email,
        role=Role.FACULTY,
        created_at=f"{created}T00:00:00.000Z",
        department=department,
        subject_ids=tuple(subject_ids),
    )


FACULTY: tuple[User, ...] = (
    _faculty(2, "haritha", "Haritha L.", "haritha@college.edu", "MCA", ("MCA103", "MCA105", "MCA201"), "2023-01-15"),
    _faculty(3, "manasa", "Manasa Devi P.", "manasa@college.edu", "MCA", ("MCA104", "MCA106", "MCA202"), "2023-01-20"),
    _faculty(10, "anand_cse", "Dr. Anand K.", "anand.cse@college.edu", "CSE", ("CSE201", "CSE301"), "2022-08-10"),
    _faculty(11, "sunita_cse", "Prof. Sunita M.", "sunita.cse@college.edu", "CSE", ("CSE101", "CSE102", "CSE302"), "2022-09-01"),
)


def _student(
    user_id: int,
    registration_number: str,
    name: str,
    email: str,
    department: str,
    semester: int,
    created: str,
    student_type: StudentType = StudentType.REGULAR,
) -> User:
    return User(
        id=user_id,
        username=registration_number.lower(),
        password="student123",
        name=name,
        email=email,
        role=Role.STUDENT,
        created_at=f"{created}T00:00:00.000Z",
        department=department,
        registration_number=registration_number,
        semester=semester,
        student_type=student_type,
    )


STUDENTS: tuple[User, ...] = (
    _student(101, "24VV1F0001", "ALLUMALLI HARSHITHA", "harshitha@college.edu", "MCA", 1, "2024-07-15"),
    _student(102, "24VV1F0022", "KELLA MANASA", "manasa.k@college.edu", "MCA", 1, "2024-07-15"),
    _student(103, "24VV1F0008", "TARUN BOMMALI", "tarunbommali@college.edu", "MCA", 1, "2024-07-15"),
    _student(104, "24VV1F0010", "BURIDI DINESH VENKAT", "dinesh@college.edu", "MCA", 2, "2024-01-17"),
    _student(201, "24CS1F0001", "Ajay Kumar", "ajay.cse@college.edu", "CSE", 1, "2024-08-01"),
    _student(202, "24CS1F0002", "Priya Sharma", "priya.cse@college.edu", "CSE", 1, "2024-08-01"),
    _student(203, "23CS1F0050", "Rohan Das", "rohan.cse@college.edu", "CSE", 3, "2023-08-01"),
    _student(204, "23CS1F0051", "Anita Singh", "anita.cse@college.edu", "CSE", 3, "2023-08-01", StudentType.DETAINED),
)

COMBINED_USERS: tuple[User, ...] = ADMINS + FACULTY + STUDENTS

_STATUSES = (
    AttendanceStatus.PRESENT,
    AttendanceStatus.ABSENT,
    AttendanceStatus.LATE,
    AttendanceStatus.EXCUSED,
)


def generate_mock_attendance(
    students: Iterable[User],
    subjects: Sequence[Course],
    faculty: Sequence[User] = FACULTY,
    *,
    records_per_subject: int = DEFAULT_RECORDS_PER_SUBJECT,
    rng: Optional[random.Random] = None,
) -> list[AttendanceRecord]:
    """Build synthetic attendance for each student's current-semester subjects.

    Dates start at ATTENDANCE_START_DATE, spaced two days apart with up to four
    days of jitter, and anything past ATTENDANCE_CUTOFF_DATE is dropped.
    Roughly three in four records are ``present``.
    """

    rng = rng or random.Random()
    faculty_names = {f.id: f.name for f in faculty}
    attendance: list[AttendanceRecord] = []

    for student in students:
        student_subjects = [
            s for s in subjects if s.department == student.department and s.semester == student.semester
        ]
        for subject in student_subjects:
            for i in range(records_per_subject):
                class_date = ATTENDANCE_START_DATE + timedelta(days=i * 2 + rng.randrange(5))
                if class_date > ATTENDANCE_CUTOFF_DATE:
                    continue

                status = rng.choice(_STATUSES)
                if rng.random() < 0.75:
                    status = AttendanceStatus.PRESENT

                attendance.append(
                    AttendanceRecord(
                        id=f"{subject.code}_{student.registration_number}_{i}",
                        date=class_date,
                        subject=subject.name,
                        subject_code=subject.code,
                        student_id=student.id,
                        registration_number=student.registration_number,
                        student_name=student.name,
                        status=status,
                        instructor=faculty_names.get(subject.faculty_id, "N/A"),
                        faculty_id=subject.faculty_id,
                        time="09:00 AM - 10:30 AM" if i % 2 == 0 else "11:00 AM - 12:30 PM",
                        duration=1.5,
                        notes="Prior permission" if status == AttendanceStatus.EXCUSED else "",
                        class_id=f"{subject.id}_{sunday_first_index(class_date)}",
                        department=student.department,
                    )
                )
    return attendance


INITIAL_ATTENDANCE: tuple[AttendanceRecord, ...] = tuple(
    generate_mock_attendance(STUDENTS, SUBJECTS, rng=random.Random(DEFAULT_ATTENDANCE_SEED))
)


@dataclass(frozen=True)
class SeedData:
    """Bundle of seed tables a store is built from."""

    users: tuple[User, ...] = COMBINED_USERS
    courses: tuple[Course, ...] = SUBJECTS
    attendance: tuple[AttendanceRecord, ...] = INITIAL_ATTENDANCE
    departments: dict[str, Department] = field(default_factory=lambda: dict(DEPARTMENTS))

    @classmethod
    def generated(cls, *, seed: Optional[int] = None, records_per_subject: int = DEFAULT_RECORDS_PER_SUBJECT) -> "SeedData":
        """Seed data with attendance regenerated from the given random seed."""
        rng = random.Random(seed)
        attendance = generate_mock_attendance(STUDENTS, SUBJECTS, rng=rng, records_per_subject=records_per_subject)
        return cls(attendance=tuple(attendance))
