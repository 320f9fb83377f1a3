import pytest

from studentroll.models import Category, CollegeStudent, HighStudent, PrimaryStudent
from studentroll.storage import FileStatus, StudentFiles


@pytest.fixture
def files(tmp_path):
    return StudentFiles(tmp_path)


def _amy():
    return PrimaryStudent(1, "Amy", "F", 8, "3A", 90, 80, 70)


def test_path_for_uses_fixed_filenames(files, tmp_path):
    assert files.path_for(Category.PRIMARY) == tmp_path / "primary_student.txt"
    assert files.path_for(Category.HIGH) == tmp_path / "high_student.txt"
    assert files.path_for(Category.COLLEGE) == tmp_path / "college_student.txt"


def test_check_missing_file(files):
    assert files.check(Category.PRIMARY) is FileStatus.MISSING
    assert not files.check(Category.PRIMARY)


def test_check_empty_and_blank_files(files):
    files.path_for(Category.HIGH).write_text("", encoding="utf-8")
    assert files.check(Category.HIGH) is FileStatus.EMPTY
    files.path_for(Category.HIGH).write_text("  \n\t\n", encoding="utf-8")
    assert files.check(Category.HIGH) is FileStatus.EMPTY


def test_check_ok_after_append(files):
    files.append(_amy())
    assert files.check(Category.PRIMARY) is FileStatus.OK
    assert files.check(Category.HIGH) is FileStatus.MISSING


def test_status_messages(files):
    assert files.check(Category.PRIMARY).message == "The file have not created yet!"
    files.path_for(Category.PRIMARY).write_text("", encoding="utf-8")
    assert files.check(Category.PRIMARY).message == "The file is empty!"


def test_append_writes_record_line(files):
    files.append(_amy())
    text = files.path_for(Category.PRIMARY).read_text(encoding="utf-8")
    assert text == (
        "ID:1 Name:Amy Sex:F Age:8 Class:3A "
        "english_grade:90 math_grade:80 chinese_grade:70\n"
    )


def test_read_lines_matches_records(files):
    first = _amy()
    second = PrimaryStudent(2, "Bob", "M", 9, "3B", 60, 70, 80)
    files.append(first)
    files.append(second)
    assert files.read_lines(Category.PRIMARY) == [first.to_record(), second.to_record()]


def test_read_lines_of_missing_or_empty_file_is_empty(files):
    assert files.read_lines(Category.COLLEGE) == []
    files.path_for(Category.COLLEGE).write_text("\n", encoding="utf-8")
    assert files.read_lines(Category.COLLEGE) == []


def test_load_round_trip_each_category(files):
    students = {
        Category.PRIMARY: [_amy()],
        Category.HIGH: [HighStudent(5, "李雷", "M", 15, "C2", 88, 77, 66, 55, 44)],
        Category.COLLEGE: [
            CollegeStudent(7, "Cai", "F", 20, "CS1", 91, 82, 73, 64),
            CollegeStudent(8, "Dan", "M", 21, "CS2", 50, 60, 70, 80),
        ],
    }
    for group in students.values():
        for student in group:
            files.append(student)
    for category, expected in students.items():
        assert files.load(category) == expected


def test_load_missing_file_is_empty(files):
    assert files.load(Category.HIGH) == []


def test_rewrite_replaces_contents(files):
    files.append(_amy())
    replacement = [PrimaryStudent(3, "Cy", "M", 7, "1A", 1, 2, 3)]
    files.rewrite(Category.PRIMARY, replacement)
    assert files.load(Category.PRIMARY) == replacement


def test_rewrite_with_nothing_removes_file(files):
    files.append(_amy())
    files.rewrite(Category.PRIMARY, [])
    assert files.check(Category.PRIMARY) is FileStatus.MISSING


def test_rewrite_rejects_wrong_category(files):
    with pytest.raises(TypeError):
        files.rewrite(Category.HIGH, [_amy()])


def test_remove_deletes_and_tolerates_missing(files):
    files.append(_amy())
    files.remove(Category.PRIMARY)
    assert not files.path_for(Category.PRIMARY).exists()
    files.remove(Category.PRIMARY)
    assert files.check(Category.PRIMARY) is FileStatus.MISSING


def test_append_keeps_file_order(files):
    ids = [4, 2, 9]
    for student_id in ids:
        files.append(PrimaryStudent(student_id, "N", "F", 8, "A", 1, 1, 1))
    assert [s.student_id for s in files.load(Category.PRIMARY)] == ids