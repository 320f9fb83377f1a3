"""In-memory roll of students backed by the record files."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import Category, Student, student_class
from .storage import StudentFiles


class DuplicateIdError(ValueError):
    """A student with the same ID is already on the roll."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"student ID {student_id} already exists")
        self.student_id = student_id


class SelectionError(ValueError):
    """A position, range or subject that does not name anything on the roll."""


@dataclass
class Statistics:
    """Head counts, per-student totals and per-subject averages."""

    counts: dict[Category, int] = field(default_factory=dict)
    totals: dict[Category, list[tuple[str, int]]] = field(default_factory=dict)
    averages: dict[Category, dict[str, float]] = field(default_factory=dict)


class Registry:
    """Students of every category, kept in step with their record files."""

    def __init__(self, files: StudentFiles) -> None:
        self.files = files
        self._students: dict[Category, list[Student]] = {
            category: [] for category in Category
        }

    def load_all(self) -> None:
        """Replace the roll with what the record files hold."""
        for category in Category:
            self._students[category] = self.files.load(category)

    def students(self, category: Category) -> list[Student]:
        """A copy of the students of one category, in roll order."""
        return list(self._students[Category(category)])

    def _category_of(self, student: Student) -> Category:
        category = type(student).CATEGORY
        if category is None:
            raise TypeError("cannot register an abstract Student")
        return category

    def add(self, student: Student) -> None:
        """Put a new student on the roll and append it to its file."""
        category = self._category_of(student)
        roll = self._students[category]
        if any(existing.student_id == student.student_id for existing in roll):
            raise DuplicateIdError(student.student_id)
        roll.append(student)
        self.files.append(student)

    def find(self, target: str) -> dict[Category, list[str]]:
        """Record lines in each file that contain the target text."""
        matches = {
            category: [
                line for line in self.files.read_lines(category) if target in line
            ]
            for category in Category
        }
        self.load_all()
        return matches

    def edit(self, category: Category, position: int, student: Student) -> None:
        """Replace the student at a 1-based position and rewrite the file."""
        category = Category(category)
        if not isinstance(student, student_class(category)):
            raise TypeError(
                f"{type(student).__name__} does not belong to {category.value}"
            )
        roll = self._students[category]
        if not 1 <= position <= len(roll):
            raise SelectionError(f"position {position} is out of range")
        if any(existing.student_id == student.student_id for existing in roll):
            raise DuplicateIdError(student.student_id)
        roll[position - 1] = student
        self.files.rewrite(category, roll)

    def delete_range(self, category: Category, first: int, last: int) -> list[Student]:
        """Remove students at 1-based positions first..last inclusive."""
        category = Category(category)
        roll = self._students[category]
        if last < first:
            raise SelectionError("the first position must not exceed the last")
        if not 1 <= first <= len(roll):
            raise SelectionError(f"first position {first} is out of range")
        if not 1 <= last <= len(roll):
            raise SelectionError(f"last position {last} is out of range")
        removed = roll[first - 1 : last]
        del roll[first - 1 : last]
        self.files.rewrite(category, roll)
        return removed

    def delete_file(self, category: Category) -> None:
        """Delete a category's record file and drop its students."""
        category = Category(category)
        self.files.remove(category)
        self._students[category] = []

    def statistics(self) -> Statistics:
        """Counts from the files, totals and subject averages from the roll."""
        stats = Statistics()
        for category in Category:
            count = sum(
                1 for line in self.files.read_lines(category) if "Name:" in line
            )
            stats.counts[category] = count
            roll = self._students[category]
            stats.totals[category] = [
                (student.name, student.total_score()) for student in roll
            ]
            if count and self.files.check(category):
                stats.averages[category] = {
                    subject: sum(getattr(s, subject) for s in roll) / count
                    for subject in student_class(category).GRADE_FIELDS
                }
        return stats

    def rank_by_total(self, category: Category) -> list[Student]:
        """Order a category by total score, highest first."""
        roll = self._students[Category(category)]
        roll.sort(key=lambda student: student.total_score(), reverse=True)
        return list(roll)

    def rank_by_subject(self, category: Category, subject: str) -> list[Student]:
        """Order a category by one subject's grade, highest first."""
        category = Category(category)
        if subject not in student_class(category).GRADE_FIELDS:
            raise SelectionError(f"{category.value} students have no {subject!r}")
        roll = self._students[category]
        roll.sort(key=lambda student: getattr(student, subject), reverse=True)
        return list(roll)