"""Example: drive the mock API without Flask.

Logs in through the dispatcher, then reads a student's attendance through the
query client the way a dashboard screen would.
"""

from src.attendance_dashboard.attendance_dashboard.api.query_client import QueryClient
from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.main import build_api


def main():
    dispatcher = build_api(build_container(random_seed=7))
    client = QueryClient(dispatcher)

    res = dispatcher.dispatch("POST", "/api/login", {"username": "24vv1f0001", "password": "student123"})
    student = res.json()
    print(res.status, student["name"])

    records = client.query("/api/attendance/range", {"studentId": student["id"], "startDate": "2025-01-01"})
    print(f"{len(records)} attendance records")
    print(client.query("/api/attendance/summary", {"studentId": student["id"]}))


if __name__ == "__main__":
    main()
