from __future__ import annotations

from datetime import date

from src.attendance_dashboard.attendance_dashboard.core.constants import WEEKDAYS


def _slot(course_id: str, day: str) -> dict:
    return {
        "courseId": course_id,
        "day": day,
        "startTime": "09:00",
        "endTime": "10:30",
        "roomNumber": "MCA-R1",
    }


def test_classes_start_empty(api):
    assert api.dispatch("GET", "/api/classes").json() == []


def test_create_class_and_list_enriched(api):
    created = api.dispatch("POST", "/api/classes", _slot("MCA103", "Monday"))

    assert created.status == 201
    assert created.json()["id"] == 1

    classes = api.dispatch("GET", "/api/classes").json()
    assert len(classes) == 1
    assert classes[0]["courseName"] == "Java Programming"
    assert classes[0]["facultyName"] == "Haritha L."


def test_classes_for_course(api):
    api.dispatch("POST", "/api/classes", _slot("MCA103", "Monday"))
    api.dispatch("POST", "/api/classes", _slot("MCA104", "Tuesday"))

    classes = api.dispatch("GET", "/api/classes/course/MCA104").json()

    assert [c["id"] for c in classes] == [2]
    assert classes[0]["facultyName"] == "Manasa Devi P."


def test_classes_today_is_not_shadowed(api):
    today = WEEKDAYS[date.today().weekday()]
    other = WEEKDAYS[(date.today().weekday() + 1) % 7]
    api.dispatch("POST", "/api/classes", _slot("MCA103", today))
    api.dispatch("POST", "/api/classes", _slot("MCA104", other))

    classes = api.dispatch("GET", "/api/classes/today").json()

    assert [c["day"] for c in classes] == [today]


def test_invalid_day_is_rejected(api):
    res = api.dispatch("POST", "/api/classes", _slot("MCA103", "Funday"))

    assert res.status == 400
    assert api.dispatch("GET", "/api/classes").json() == []


def test_subpaths_do_not_accept_post(api):
    res = api.dispatch("POST", "/api/classes/today", _slot("MCA103", "Monday"))

    assert res.status == 404


def test_classes_for_created_course_by_id_or_code(api):
    course = api.dispatch("POST", "/api/courses", {"name": "Machine Learning", "code": "MCA301", "department": "MCA"})
    assert course.json()["id"] == "NEW_COURSE_15"
    api.dispatch("POST", "/api/classes", _slot("MCA301", "Wednesday"))

    by_id = api.dispatch("GET", "/api/classes/course/NEW_COURSE_15").json()
    by_code = api.dispatch("GET", "/api/classes/course/MCA301").json()

    assert [c["id"] for c in by_id] == [1]
    assert by_code == by_id
    assert by_id[0]["courseName"] == "Machine Learning"


def test_classes_for_unknown_course_match_raw_id(api):
    api.dispatch("POST", "/api/classes", _slot("ELECTIVE1", "Friday"))

    classes = api.dispatch("GET", "/api/classes/course/ELECTIVE1").json()

    assert [c["courseId"] for c in classes] == ["ELECTIVE1"]
    assert classes[0]["courseName"] is None
