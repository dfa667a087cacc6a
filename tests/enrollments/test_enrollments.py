from __future__ import annotations


def test_enrollment_is_unique_per_student_and_course(api):
    first = api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "MCA101"})
    second = api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "MCA101"})

    assert first.status == 201
    assert first.json()["id"] == 1
    assert second.status == 409
    assert second.json() == {"message": "Student already enrolled in this course"}
    assert len(api.dispatch("GET", "/api/enrollments").json()) == 1


def test_same_student_different_course_is_allowed(api):
    api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "MCA101"})
    res = api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "MCA102"})

    assert res.status == 201
    assert res.json()["id"] == 2


def test_enrollments_for_course(api):
    api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "MCA101"})
    api.dispatch("POST", "/api/enrollments", {"studentId": 102, "courseId": "MCA101"})
    api.dispatch("POST", "/api/enrollments", {"studentId": 102, "courseId": "MCA102"})

    res = api.dispatch("GET", "/api/enrollments/course/MCA101")

    assert [e["studentId"] for e in res.json()] == [101, 102]
    assert api.dispatch("GET", "/api/enrollments/course/UNKNOWN").json() == []


def test_enrollment_requires_student_id(api):
    res = api.dispatch("POST", "/api/enrollments", {"courseId": "MCA101"})

    assert res.status == 400


def test_enrollment_in_created_course_is_unique_by_id_or_code(api):
    api.dispatch("POST", "/api/courses", {"name": "Machine Learning", "code": "MCA301", "department": "MCA"})

    by_code = api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "MCA301"})
    by_id = api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "NEW_COURSE_15"})

    assert by_code.status == 201
    assert by_code.json()["courseId"] == "NEW_COURSE_15"
    assert by_id.status == 409
    assert [e["studentId"] for e in api.dispatch("GET", "/api/enrollments/course/MCA301").json()] == [101]
    assert [e["studentId"] for e in api.dispatch("GET", "/api/enrollments/course/NEW_COURSE_15").json()] == [101]


def test_enrollment_in_unknown_course_keeps_raw_id(api):
    res = api.dispatch("POST", "/api/enrollments", {"studentId": 101, "courseId": "ELECTIVE1"})

    assert res.status == 201
    assert res.json()["courseId"] == "ELECTIVE1"
    assert [e["id"] for e in api.dispatch("GET", "/api/enrollments/course/ELECTIVE1").json()] == [1]
