from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassSlot, NewClassSlot


class ClassRepository(Protocol):
    def list_all(self, *, day: Optional[str] = None) -> Sequence[ClassSlot]:
        raise NotImplementedError

    def list_for_course(self, course_id: str) -> Sequence[ClassSlot]:
        raise NotImplementedError

    def create_class(self, new_class: NewClassSlot) -> ClassSlot:
        raise NotImplementedError
