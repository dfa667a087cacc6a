from __future__ import annotations

import random

from src.attendance_dashboard.attendance_dashboard.common.datetime_utils import sunday_first_index
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.database.seed_data import (
    ATTENDANCE_CUTOFF_DATE,
    ATTENDANCE_START_DATE,
    COMBINED_USERS,
    INITIAL_ATTENDANCE,
    STUDENTS,
    SUBJECTS,
    SeedData,
    generate_mock_attendance,
)
from src.attendance_dashboard.attendance_dashboard.database.store import InMemoryStore


def _mutate(api):
    api.dispatch("POST", "/api/users", {"username": "x", "password": "pw", "name": "X", "role": "admin"})
    api.dispatch("POST", "/api/courses", {"name": "ML", "code": "MCA301"})
    api.dispatch(
        "POST",
        "/api/classes",
        {"courseId": "MCA101", "day": "Monday", "startTime": "09:00", "endTime": "10:30"},
    )
    api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "MCA101"})
    api.dispatch("POST", "/api/attendance", {"studentId": 101, "classId": "C1", "date": "2025-03-01", "status": "late"})


def test_reset_restores_seed_state(api):
    initial = {
        path: api.dispatch("GET", path).json()
        for path in ("/api/users", "/api/courses", "/api/classes", "/api/enrollments", "/api/attendance")
    }

    _mutate(api)
    api.reset()

    for path, body in initial.items():
        assert api.dispatch("GET", path).json() == body


def test_reset_is_idempotent_and_restarts_sequences(api):
    _mutate(api)
    api.reset()
    api.reset()

    res = api.dispatch("POST", "/api/users", {"username": "y", "password": "pw", "name": "Y", "role": "admin"})
    assert res.json()["id"] == 205
    assert api.dispatch("POST", "/api/courses", {"name": "ML", "code": "MCA301"}).json()["id"] == "NEW_COURSE_15"
    assert api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "MCA101"}).json()["id"] == 1


def test_mutations_never_touch_seed_constants(api):
    seed_status = INITIAL_ATTENDANCE[0].status
    _mutate(api)
    api.dispatch(
        "POST",
        "/api/attendance",
        {
            "studentId": INITIAL_ATTENDANCE[0].student_id,
            "classId": INITIAL_ATTENDANCE[0].class_id,
            "date": INITIAL_ATTENDANCE[0].date.isoformat(),
            "status": "excused",
        },
    )

    assert len(COMBINED_USERS) == 13
    assert len(SUBJECTS) == 14
    assert len(INITIAL_ATTENDANCE) == 140
    assert INITIAL_ATTENDANCE[0].status == seed_status


def test_store_copies_seed_records():
    store = InMemoryStore()

    assert store.users == list(COMBINED_USERS)
    assert store.users[0] is not COMBINED_USERS[0]
    assert store.classes == []
    assert store.enrollments == []


def test_store_from_custom_seed():
    store = InMemoryStore(SeedData.generated(seed=1, records_per_subject=2))

    assert len(store.attendance) == 56
    assert store.user_ids.peek() == 205


def test_generator_is_deterministic_for_a_seed():
    first = generate_mock_attendance(STUDENTS, SUBJECTS, rng=random.Random(2025))
    second = generate_mock_attendance(STUDENTS, SUBJECTS, rng=random.Random(2025))

    assert first == second
    assert tuple(first) == INITIAL_ATTENDANCE


def test_generated_records_follow_layout():
    records = generate_mock_attendance(STUDENTS, SUBJECTS, rng=random.Random(99))

    assert len(records) == 140
    for r in records:
        index = int(r.id.rsplit("_", 1)[1])
        assert r.id == f"{r.subject_code}_{r.registration_number}_{index}"
        assert ATTENDANCE_START_DATE <= r.date <= ATTENDANCE_CUTOFF_DATE
        assert r.class_id == f"{r.subject_code}_{sunday_first_index(r.date)}"
        assert r.time == ("09:00 AM - 10:30 AM" if index % 2 == 0 else "11:00 AM - 12:30 PM")
        assert r.duration == 1.5
        assert r.notes == ("Prior permission" if r.status == AttendanceStatus.EXCUSED else "")


def test_generated_instructor_is_subject_faculty():
    records = generate_mock_attendance(STUDENTS, SUBJECTS, rng=random.Random(3))

    by_code = {r.subject_code: r.instructor for r in records}
    assert by_code["MCA101"] == "N/A"
    assert by_code["MCA103"] == "Haritha L."
    assert by_code["CSE301"] == "Dr. Anand K."


def test_generator_with_no_records_per_subject():
    assert generate_mock_attendance(STUDENTS, SUBJECTS, records_per_subject=0, rng=random.Random(1)) == []
