import dataclasses

import pytest

from studentroll.models import (
    Category,
    CollegeStudent,
    HighStudent,
    PrimaryStudent,
    Student,
    student_class,
)


def _primary():
    return PrimaryStudent(1001, "Tom", "M", 10, "3A", 90, 80, 70)


def _high():
    return HighStudent(2002, "Ann", "F", 15, "9B", 88, 77, 66, 55, 44)


def _college():
    return CollegeStudent(3003, "Lee", "M", 20, "CS1", 91, 82, 73, 64)


@pytest.mark.parametrize(
    ("category", "cls", "filename"),
    [
        (Category.PRIMARY, PrimaryStudent, "primary_student.txt"),
        (Category.HIGH, HighStudent, "high_student.txt"),
        (Category.COLLEGE, CollegeStudent, "college_student.txt"),
    ],
)
def test_category_filenames(category, cls, filename):
    assert student_class(category) is cls
    assert category.filename == filename


def test_student_class_mapping():
    assert student_class(Category.PRIMARY) is PrimaryStudent
    assert student_class(Category.HIGH) is HighStudent
    assert student_class(Category.COLLEGE) is CollegeStudent


def test_primary_record_format():
    assert _primary().to_record() == (
        "ID:1001 Name:Tom Sex:M Age:10 Class:3A "
        "english_grade:90 math_grade:80 chinese_grade:70"
    )


def test_high_record_format():
    assert _high().to_record() == (
        "ID:2002 Name:Ann Sex:F Age:15 Class:9B english_grade:88 math_grade:77 "
        "chinese_grade:66 geography_grade:55 history_grade:44"
    )


def test_college_record_format():
    assert _college().to_record() == (
        "ID:3003 Name:Lee Sex:M Age:20 Class:CS1 profession_grade:91 "
        "pro_eng_grade:82 program_design_grade:73 pro_math_grade:64"
    )


def test_describe_matches_record_for_primary():
    student = _primary()
    assert student.describe() == student.to_record()


def test_high_describe_history_label_has_no_colon():
    assert _high().describe().endswith("geography_grade:55 history_grade44")


def test_grades_order():
    assert list(_college().grades()) == [
        "profession_grade",
        "pro_eng_grade",
        "program_design_grade",
        "pro_math_grade",
    ]


def test_total_score_primary():
    assert _primary().total_score() == 240


def test_total_score_matches_grade_sum():
    for student in (_primary(), _high(), _college()):
        assert student.total_score() == sum(student.grades().values())


def test_record_round_trip():
    primary = _primary()
    high = _high()
    college = _college()
    assert PrimaryStudent.from_record(primary.to_record()) == primary
    assert HighStudent.from_record(high.to_record()) == high
    assert CollegeStudent.from_record(college.to_record()) == college


def test_from_record_strips_newline():
    student = _primary()
    assert PrimaryStudent.from_record(student.to_record() + "\n") == student


def test_from_record_non_numeric_grade_reads_zero():
    line = "ID:5 Name:X Sex:F Age:9 Class:1 english_grade:abc math_grade:1 chinese_grade:2"
    parsed = PrimaryStudent.from_record(line)
    assert parsed.english_grade == 0
    assert parsed.math_grade == 1


def test_from_record_missing_field():
    with pytest.raises(ValueError):
        PrimaryStudent.from_record("ID:5 Name:X Sex:F Age:9 Class:1")


def test_from_tokens_high():
    tokens = ["2002", "Ann", "F", "15", "9B", "88", "77", "66", "55", "44"]
    assert HighStudent.from_tokens(tokens) == _high()


def test_from_tokens_wrong_count():
    with pytest.raises(ValueError):
        PrimaryStudent.from_tokens(["1", "Tom", "M", "10", "3A", "90"])


def test_from_tokens_bad_number():
    with pytest.raises(ValueError):
        CollegeStudent.from_tokens(["x", "Lee", "M", "20", "CS1", "1", "2", "3", "4"])


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Student.from_tokens(["1", "a", "b", "2", "c"])


def test_students_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _primary().name = "Other"