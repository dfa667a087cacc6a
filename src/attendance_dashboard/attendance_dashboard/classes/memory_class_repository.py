from __future__ import annotations

from typing import Optional, Sequence

from ..database.store import InMemoryStore
from .model import ClassSlot, NewClassSlot
from .repository import ClassRepository


class MemoryClassRepository(ClassRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self, *, day: Optional[str] = None) -> Sequence[ClassSlot]:
        if day is None:
            return list(self._store.classes)
        return [c for c in self._store.classes if c.day == day]

    def list_for_course(self, course_id: str) -> Sequence[ClassSlot]:
        return [c for c in self._store.classes if c.course_id == course_id]

    def create_class(self, new_class: NewClassSlot) -> ClassSlot:
        slot = ClassSlot(
            id=self._store.class_ids.next(),
            course_id=new_class.course_id,
            day=new_class.day,
            start_time=new_class.start_time,
            end_time=new_class.end_time,
            room_number=new_class.room_number,
        )
        self._store.classes.append(slot)
        return slot
