from __future__ import annotations

import copy
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..classes.model import ClassSlot
from ..courses.model import Course
from ..enrollments.model import Enrollment
from ..users.model import User
from .seed_data import Department, SeedData


class IdSequence:
    """Monotonic id generator, independent of the collection it numbers."""

    def __init__(self, start: int = 1):
        self._next = int(start)

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        return self._next


class InMemoryStore:
    """Mutable collections backing the mock API.

    Every collection is a deep copy of the seed tables, so mutating the store
    never touches the seed constants. Only repositories read or write the
    collections; they look them up on every call so a ``reset()`` is visible
    immediately.
    """

    def __init__(self, seed: Optional[SeedData] = None, *, debug: bool = False):
        self._seed = seed or SeedData()
        self._debug = bool(debug)

        self.users: list[User] = []
        self.courses: list[Course] = []
        self.classes: list[ClassSlot] = []
        self.attendance: list[AttendanceRecord] = []
        self.enrollments: list[Enrollment] = []

        self.user_ids = IdSequence()
        self.course_ids = IdSequence()
        self.class_ids = IdSequence()
        self.attendance_ids = IdSequence()
        self.enrollment_ids = IdSequence()

        self._load()

    @property
    def departments(self) -> dict[str, Department]:
        return self._seed.departments

    def _load(self) -> None:
        self.users = copy.deepcopy(list(self._seed.users))
        self.courses = copy.deepcopy(list(self._seed.courses))
        self.classes = []
        self.attendance = copy.deepcopy(list(self._seed.attendance))
        self.enrollments = []

        self.user_ids = IdSequence(max((u.id for u in self.users), default=0) + 1)
        self.course_ids = IdSequence(len(self.courses) + 1)
        self.class_ids = IdSequence(1)
        self.attendance_ids = IdSequence(1)
        self.enrollment_ids = IdSequence(1)

    def reset(self) -> None:
        """Restore every collection to the seed state."""
        self._load()
        if self._debug:
            print("[mock-api] All mock stores have been reset.")
