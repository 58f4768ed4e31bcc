"""Service for teacher accounts and class rosters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from lifeskills_app.constants.roster_constants import CLASS_ROSTERS, TEACHER_ACCOUNTS
from lifeskills_app.core.models import Student, Teacher


class Roster:
    """Static lookup of teachers and the students of each class and room."""

    def __init__(
        self,
        teachers: Iterable[Teacher],
        students_by_class: Mapping[tuple[str, str], list[Student]],
    ) -> None:
        self._teachers = {teacher.username: teacher for teacher in teachers}
        self._students_by_class = {key: list(value) for key, value in students_by_class.items()}

    @classmethod
    def from_constants(cls) -> Roster:
        teachers = [
            Teacher(username=username, name=name, class_level=class_level, room=room)
            for username, name, class_level, room in TEACHER_ACCOUNTS
        ]
        students_by_class = {
            (class_level, room): [
                Student(id=index, name=name, class_level=class_level, room=room)
                for index, name in enumerate(names, start=1)
            ]
            for (class_level, room), names in CLASS_ROSTERS.items()
        }
        return cls(teachers, students_by_class)

    def authenticate(self, username: str, password: str) -> Teacher | None:
        """Placeholder check: the password is the username itself."""
        teacher = self._teachers.get(username.strip())
        if teacher is None or password != teacher.username:
            return None
        return teacher

    def students_for(self, teacher: Teacher) -> list[Student]:
        return list(self._students_by_class.get((teacher.class_level, teacher.room), []))
