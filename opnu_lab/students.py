"""
Student Module

Student record with a validated name and year of study, an ordered course
list and a flat per-year tuition.
"""

from typing import List, Optional, Tuple

from .logging_config import get_logger, log_action


logger = get_logger("opnu_lab.students")


class Student:
    """
    Student enrolled for a given year of study.

    Name and year are validated once, at construction, and cannot change
    afterwards. Courses may repeat and keep their insertion order.
    """

    MIN_YEAR = 1
    MAX_YEAR = 4
    COST_PER_YEAR = 20000

    def __init__(self, name: Optional[str], year: int):
        if name is None or not name.strip():
            log_action(logger, "warning", "Student rejected: empty name",
                       action="create_student", extra={"name": name, "year": year})
            raise ValueError("Student name cannot be empty")

        if year < self.MIN_YEAR or year > self.MAX_YEAR:
            log_action(logger, "warning", "Student rejected: year out of range",
                       action="create_student", resource=name, extra={"year": year})
            raise ValueError(
                f"Student year must be between {self.MIN_YEAR} and {self.MAX_YEAR}"
            )

        self._name = name
        self._year = year
        self._courses: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def year(self) -> int:
        return self._year

    def add_course(self, course_name: Optional[str]) -> None:
        """Append a course; None, empty and whitespace-only names are ignored"""
        if course_name is not None and course_name.strip():
            self._courses.append(course_name)
        else:
            log_action(logger, "debug", "Course ignored: empty name",
                       action="add_course", resource=self._name)

    def drop_all(self) -> None:
        """Remove every course"""
        self._courses.clear()

    def get_course_count(self) -> int:
        return len(self._courses)

    def get_courses(self) -> Tuple[str, ...]:
        """Get courses in enrollment order"""
        return tuple(self._courses)

    def get_name(self) -> str:
        return self._name

    def get_year(self) -> int:
        return self._year

    def get_tuition(self) -> int:
        """Total tuition: year of study times the cost per year"""
        return self._year * self.COST_PER_YEAR

    def __repr__(self) -> str:
        return f"Student(name={self._name!r}, year={self._year}, courses={self._courses!r})"
