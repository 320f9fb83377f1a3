"""Record files on disk: one text file per student category."""

from __future__ import annotations

import enum
import os
from pathlib import Path
from typing import Iterable

from .models import Category, Student, student_class


class FileStatus(enum.Enum):
    """The outcome of checking a record file before it is read."""

    OK = "ok"
    MISSING = "missing"
    EMPTY = "empty"

    @property
    def message(self) -> str:
        return {
            "ok": "The file is ready.",
            "missing": "The file have not created yet!",
            "empty": "The file is empty!",
        }[self.value]

    def __bool__(self) -> bool:
        return self is FileStatus.OK


class StudentFiles:
    """The three record files kept together in one directory."""

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)

    def path_for(self, category: Category) -> Path:
        """Path of the record file that holds the given category."""
        return self.directory / Category(category).filename

    def check(self, category: Category) -> FileStatus:
        """Whether the category's file exists and holds any non-blank text."""
        path = self.path_for(category)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return FileStatus.MISSING
        if not text.strip():
            return FileStatus.EMPTY
        return FileStatus.OK

    def read_lines(self, category: Category) -> list[str]:
        """All lines of the category's file, or none if it fails the check."""
        if not self.check(category):
            return []
        text = self.path_for(category).read_text(encoding="utf-8")
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def append(self, student: Student) -> None:
        """Add one student's record line to the end of its category's file."""
        category = type(student).CATEGORY
        if category is None:
            raise TypeError("cannot store an abstract Student")
        path = self.path_for(category)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8", newline="\n") as handle:
            handle.write(student.to_record() + "\n")

    def rewrite(self, category: Category, students: Iterable[Student]) -> None:
        """Replace the category's file with the given students' records."""
        category = Category(category)
        students = list(students)
        expected = student_class(category)
        for student in students:
            if not isinstance(student, expected):
                raise TypeError(
                    f"{type(student).__name__} does not belong to {category.value}"
                )
        self.remove(category)
        for student in students:
            self.append(student)

    def remove(self, category: Category) -> None:
        """Delete the category's file; a missing file is left as it is."""
        self.path_for(category).unlink(missing_ok=True)

    def load(self, category: Category) -> list[Student]:
        """Parse every record in the category's file, in file order."""
        cls = student_class(category)
        return [
            cls.from_record(line)
            for line in self.read_lines(category)
            if line.strip()
        ]