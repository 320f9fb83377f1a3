"""Student records for the three school levels and their text line format."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, fields
from typing import ClassVar, Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Category(enum.Enum):
    """The three kinds of student, each kept in its own record file."""

    PRIMARY = "primary"
    HIGH = "high"
    COLLEGE = "college"

    @property
    def filename(self) -> str:
        return f"{self.value}_student.txt"

    @property
    def label(self) -> str:
        return {"primary": "小学生", "high": "中学生", "college": "大学生"}[self.value]


def _leading_int(text: str) -> int:
    """Read a leading integer the lenient way: garbage yields 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _field_value(line: str, key: str) -> str:
    """Return the text following the first ``key:`` up to the next space."""
    marker = f"{key}:"
    start = line.find(marker)
    if start < 0:
        raise ValueError(f"record has no {marker!r} field: {line!r}")
    start += len(marker)
    end = line.find(" ", start)
    return line[start:] if end < 0 else line[start:end]


@dataclass(frozen=True)
class Student:
    """Personal details shared by every kind of student."""

    CATEGORY: ClassVar[Category | None] = None
    GRADE_FIELDS: ClassVar[tuple[str, ...]] = ()
    DISPLAY_LABELS: ClassVar[dict[str, str]] = {}

    student_id: int
    name: str
    sex: str
    age: int
    class_name: str

    def grades(self) -> dict[str, int]:
        """Grades by subject, in the order they are recorded."""
        return {key: getattr(self, key) for key in self.GRADE_FIELDS}

    def total_score(self) -> int:
        return sum(self.grades().values())

    def _header(self) -> str:
        return (
            f"ID:{self.student_id} Name:{self.name} Sex:{self.sex} "
            f"Age:{self.age} Class:{self.class_name}"
        )

    def to_record(self) -> str:
        """The line written to the record file, without a newline."""
        parts = [self._header()]
        parts.extend(f"{key}:{value}" for key, value in self.grades().items())
        return " ".join(parts)

    def describe(self) -> str:
        """The line shown to the user when listing students."""
        parts = [self._header()]
        parts.extend(
            f"{self.DISPLAY_LABELS.get(key, key + ':')}{value}"
            for key, value in self.grades().items()
        )
        return " ".join(parts)

    @classmethod
    def _require_concrete(cls) -> None:
        if cls.CATEGORY is None:
            raise TypeError("Student is abstract; use a concrete student class")

    @classmethod
    def from_record(cls, line: str) -> "Student":
        """Parse a line in the record file format."""
        cls._require_concrete()
        line = line.rstrip("\r\n")
        grade_values = {
            key: _leading_int(_field_value(line, key)) for key in cls.GRADE_FIELDS
        }
        return cls(
            _leading_int(_field_value(line, "ID")),
            _field_value(line, "Name"),
            _field_value(line, "Sex"),
            _leading_int(_field_value(line, "Age")),
            _field_value(line, "Class"),
            **grade_values,
        )

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "Student":
        """Build a student from input words: ID, name, sex, age, class, grades."""
        cls._require_concrete()
        expected = 5 + len(cls.GRADE_FIELDS)
        if len(tokens) != expected:
            raise ValueError(f"expected {expected} values, got {len(tokens)}")
        student_id, name, sex, age, class_name, *grade_tokens = tokens
        try:
            return cls(
                int(student_id),
                name,
                sex,
                int(age),
                class_name,
                *(int(token) for token in grade_tokens),
            )
        except ValueError as exc:
            raise ValueError(f"invalid number in input: {exc}") from None


@dataclass(frozen=True)
class PrimaryStudent(Student):
    CATEGORY: ClassVar[Category] = Category.PRIMARY
    GRADE_FIELDS: ClassVar[tuple[str, ...]] = (
        "english_grade",
        "math_grade",
        "chinese_grade",
    )

    english_grade: int = 0
    math_grade: int = 0
    chinese_grade: int = 0


@dataclass(frozen=True)
class HighStudent(Student):
    CATEGORY: ClassVar[Category] = Category.HIGH
    GRADE_FIELDS: ClassVar[tuple[str, ...]] = (
        "english_grade",
        "math_grade",
        "chinese_grade",
        "geography_grade",
        "history_grade",
    )
    # The listing shows the history grade with no colon after its label.
    DISPLAY_LABELS: ClassVar[dict[str, str]] = {"history_grade": "history_grade"}

    english_grade: int = 0
    math_grade: int = 0
    chinese_grade: int = 0
    geography_grade: int = 0
    history_grade: int = 0


@dataclass(frozen=True)
class CollegeStudent(Student):
    CATEGORY: ClassVar[Category] = Category.COLLEGE
    GRADE_FIELDS: ClassVar[tuple[str, ...]] = (
        "profession_grade",
        "pro_eng_grade",
        "program_design_grade",
        "pro_math_grade",
    )

    profession_grade: int = 0
    pro_eng_grade: int = 0
    program_design_grade: int = 0
    pro_math_grade: int = 0


_CLASSES: dict[Category, type[Student]] = {
    Category.PRIMARY: PrimaryStudent,
    Category.HIGH: HighStudent,
    Category.COLLEGE: CollegeStudent,
}


def student_class(category: Category) -> type[Student]:
    """The student class that holds records of the given category."""
    return _CLASSES[Category(category)]


# Sanity check that every concrete class declares fields matching its grades.
for _cls in _CLASSES.values():
    assert set(_cls.GRADE_FIELDS) <= {f.name for f in fields(_cls)}
del _cls