# studentroll

A console program for keeping student records. It looks after three kinds of
student. Each kind has its own text file in one directory, which is the
working directory unless you choose another one:

| Kind | File | Grades kept |
| --- | --- | --- |
| Primary school | `primary_student.txt` | English, maths, Chinese |
| High school | `high_student.txt` | English, maths, Chinese, geography, history |
| College | `college_student.txt` | Major subject, college English, programming design, advanced maths |

Each file holds one line per student, for example:

```
ID:1001 Name:Li Sex:F Age:10 Class:3A english_grade:90 math_grade:95 chinese_grade:88
```

Input is read as words separated by whitespace, so a name, sex or class must
be a single word.

## Installation

```
pip install .
```

## Running

```
studentroll
studentroll --dir path/to/records
```

`--dir` names the directory that holds the record files. It defaults to `.`.

When it starts, the program checks that all three record files exist and
contain some text. For each file that is missing or empty, it asks you to enter
one student of that kind. It keeps asking until every file has data, then
loads the students. If input ends before that, it exits with status 1.

The menu prompts are in Chinese. The choices are:

1. Add students. Pick a kind, give a count, then enter each student. An ID
   that is already taken, or a number that cannot be read, is reported and
   that student is skipped.
2. Search. Enter one word, such as `Name:Li`. Every record line that contains
   it is shown, for each kind.
3. Show every record line of every file.
4. Edit. Replace the student at a chosen position with newly entered details.
   The new ID must not already be on the roll. The file is then rewritten.
5. Delete. Either delete one record file or all three, or remove a range of
   positions `x y` from one kind. Enter the same number twice to remove one
   student, and `-1 -1` to go back.
6. Statistics. Head counts are taken from the lines in each file that contain
   `Name:`. You also get each student's total and the average of each subject.
7. Rankings. Each kind is listed by total score and then by each subject,
   highest first. Sorting changes the order the students are kept in.
0. Quit

When you quit, or when input ends, the program checks the files again. It
reports the first one that is missing or empty, which you will be asked to
fill the next time it starts. Otherwise it confirms that all files are
complete.

## Using it from Python

The pieces behind the console can be used directly.

- `studentroll.models`
  - The `Category` enum has the values `PRIMARY`, `HIGH` and `COLLEGE`, with
    `filename` and `label` properties.
  - The frozen dataclasses `PrimaryStudent`, `HighStudent` and
    `CollegeStudent` derive from `Student`.
  - `student_class(category)` returns the class for a kind.
  - A student offers `grades()`, `total_score()`, `to_record()` (the file
    line) and `describe()` (the listing line).
  - `from_record(line)` parses a file line. `from_tokens(tokens)` builds a
    student from input words and raises `ValueError` on a wrong count or a
    bad number.
- `studentroll.storage`
  - `StudentFiles(directory)` reads and writes the three files. It offers
    `path_for`, `check`, `read_lines`, `append`, `rewrite`, `remove` and
    `load`.
  - `check` returns a `FileStatus` (`OK`, `MISSING` or `EMPTY`), which is true
    only when it is `OK`.
- `studentroll.registry`
  - `Registry(files)` keeps the loaded students. It offers `load_all`,
    `students`, `add`, `find`, `edit`, `delete_range`, `delete_file`,
    `statistics`, `rank_by_total` and `rank_by_subject`. Positions start
    at 1.
  - `add` and `edit` raise `DuplicateIdError` when the ID is already taken.
    Bad positions, ranges or subject names raise `SelectionError`.
  - `statistics()` returns a `Statistics` holding `counts`, `totals` and
    `averages` keyed by `Category`.
- `studentroll.cli`
  - `Console(registry, stdin, stdout)` runs the menu through `initialise()`,
    `run()` and `end_check()`.
  - `show_menu(stdout)` writes the menu.
  - `main(argv=None)` is the command's entry point.

```python
from studentroll.models import Category, PrimaryStudent
from studentroll.storage import StudentFiles
from studentroll.registry import Registry

registry = Registry(StudentFiles("."))
registry.load_all()
registry.add(PrimaryStudent(1001, "Li", "F", 10, "3A", 90, 95, 88))
for student in registry.rank_by_total(Category.PRIMARY):
    print(student.describe())
```

## Tests

```
pip install .[test]
pytest
```