"""Interactive menu for keeping the student roll."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Callable, TextIO

from .models import Category, Student, student_class
from .registry import DuplicateIdError, Registry, SelectionError
from .storage import StudentFiles

_MENU = (
    "---------------------------------",
    "------- 1. 添加学生信息  --------",
    "------- 2. 查询学生信息  --------",
    "------- 3. 显示所有学生  --------",
    "------- 4. 编辑学生信息  --------",
    "------- 5. 删除学生信息  --------",
    "------- 6. 统计学生信息  --------",
    "------- 7. 学生成绩排名  --------",
    "------- 0. 退出程序      --------",
    "---------------------------------",
)

_SUBJECT_NAMES = {
    "english_grade": "英语",
    "math_grade": "数学",
    "chinese_grade": "语文",
    "geography_grade": "地理",
    "history_grade": "历史",
    "profession_grade": "专业课",
    "pro_eng_grade": "英语课",
    "program_design_grade": "课程设计",
    "pro_math_grade": "高数课",
}

_INPUT_PROMPTS = {
    Category.PRIMARY: "请依次输入：学号、姓名、性别、年龄、班级、英语成绩、数学成绩、语文成绩",
    Category.HIGH: (
        "请依次输入：学号、姓名、性别、年龄、班级、英语成绩、数学成绩、语文成绩、地理成绩、历史成绩"
    ),
    Category.COLLEGE: "请依次输入：学号、姓名、性别、年龄、班级、专业成绩、大英成绩、课设成绩、高数成绩",
}

_CATEGORIES = list(Category)


def show_menu(stdout: TextIO) -> None:
    """Write the main menu."""
    for line in _MENU:
        print(line, file=stdout)


class Console:
    """Reads whitespace-separated answers and drives the registry."""

    def __init__(self, registry: Registry, stdin: TextIO, stdout: TextIO) -> None:
        self.registry = registry
        self._stdin = stdin
        self._stdout = stdout
        self._pending: deque[str] = deque()

    # -- input and output -------------------------------------------------

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self._stdout)

    def _token(self) -> str:
        while not self._pending:
            line = self._stdin.readline()
            if not line:
                raise EOFError("input ended")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _int(self) -> int | None:
        try:
            return int(self._token())
        except ValueError:
            return None

    def _read_student(self, category: Category) -> Student:
        cls = student_class(category)
        self._say(_INPUT_PROMPTS[category])
        tokens = [self._token() for _ in range(5 + len(cls.GRADE_FIELDS))]
        return cls.from_tokens(tokens)

    def _list(self, students: list[Student], padded: bool = True) -> None:
        for index, student in enumerate(students, 1):
            prefix = f"{index:<4}" if padded else str(index)
            self._say(prefix + student.describe())

    def _choose_category(self) -> Category | None:
        while True:
            self._say(
                "请选择要操作的学生类", "1. 小学生", "2. 中学生", "3. 大学生", "0. 返回上一级"
            )
            choice = self._int()
            if choice == 0:
                return None
            if choice is not None and 1 <= choice <= 3:
                return _CATEGORIES[choice - 1]
            self._say("请输入0-3的整数！")

    # -- start and finish -------------------------------------------------

    def initialise(self) -> None:
        """Make sure every record file has data, then load the roll."""
        files = self.registry.files
        while True:
            missing = [c for c in Category if not files.check(c)]
            if not missing:
                self._say("文件检查完毕")
                break
            self._say("文件项缺失，请添加必要文件！")
            for category in missing:
                self._say(f"缺失{category.label}记录文件({category.filename})")
                self._say(f"请添加一位{category.label}以继续")
                try:
                    student = self._read_student(category)
                except ValueError as exc:
                    self._say(f"输入有误：{exc}")
                    continue
                files.append(student)
                self._say(f"您已添加1位{category.label}数据")
        self.registry.load_all()
        self._say("欢迎使用本系统，已初始化完毕！")

    def end_check(self) -> bool:
        """Report whether every record file is still complete."""
        files = self.registry.files
        for category in Category:
            if not files.check(category):
                self._say(f"{category.filename}缺失，下次使用该程序时将要添加")
                return False
        self._say("文件检查完毕,所有文件完整")
        return True

    def run(self) -> None:
        """Show the menu and carry out choices until the user quits."""
        actions: dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._find,
            3: self._show_all,
            4: self._edit,
            5: self._delete,
            6: self._statistics,
            7: self._rank,
        }
        try:
            while True:
                show_menu(self._stdout)
                choice = self._int()
                if choice == 0:
                    self._say("感谢您使用本系统")
                    return
                if choice not in actions:
                    self._say("请输入0-7的整数!")
                    continue
                actions[choice]()
        except EOFError:
            self._say("感谢您使用本系统")

    # -- menu actions -----------------------------------------------------

    def _add(self) -> None:
        category = self._choose_category()
        if category is None:
            return
        while True:
            self._say("请输入要添加的人数", "若要退出请输入-1")
            count = self._int()
            if count == -1:
                return
            if count is not None and count >= 0:
                break
            self._say("错误的数字范围，请按下任意键重新输入！")
        faults = 0
        for number in range(1, count + 1):
            try:
                student = self._read_student(category)
                self.registry.add(student)
            except DuplicateIdError:
                self._say(f"warning:该ID已经存在！ {number}号学生添加失败")
                faults += 1
            except ValueError as exc:
                self._say(f"输入有误：{exc} {number}号学生添加失败")
                faults += 1
            else:
                self._say(f"{number}号学生添加成功")
        self._say(f"您已添加{count - faults}位{category.label}数据", f"{faults}个学生添加失败")

    def _find(self) -> None:
        self._say("请输入要查找的标签与值(如：Name:James)", "若要退出，请输入exit")
        target = self._token()
        if target == "exit":
            return
        matches = self.registry.find(target)
        for category in Category:
            self._say(f"正在查询{category.label}类")
            lines = matches[category]
            self._say(*lines)
            if lines:
                self._say(f"在{category.label}中找到了{len(lines)}符合项")
            else:
                self._say(f"在{category.label}中未找到符合项")
            self._say("")

    def _show_all(self) -> None:
        for category in Category:
            self._say(f"正在显示所有{category.label}信息：")
            self._say(*self.registry.files.read_lines(category))

    def _edit(self) -> None:
        self._say("警告：您正在执行编辑操作！")
        category = self._choose_category()
        if category is None:
            return
        while True:
            if not self.registry.files.check(category):
                return
            roll = self.registry.students(category)
            self._list(roll)
            self._say("请输入要编辑的学生序号", "若要退出请输入-1")
            position = self._int()
            if position == -1:
                self._say("exit!")
                return
            if position is None or not 1 <= position <= len(roll):
                self._say("错误的序号范围！")
                continue
            try:
                student = self._read_student(category)
                self.registry.edit(category, position, student)
            except DuplicateIdError:
                self._say("该ID已经存在！")
                continue
            except (SelectionError, ValueError) as exc:
                self._say(f"输入有误：{exc}")
                continue
            self._say("编辑成功！")
            self._list(self.registry.students(category), padded=False)
            return

    def _delete(self) -> None:
        while True:
            self._say(
                "警告：您正在执行删除操作！", "1. 删除文件", "2. 删除某类学生单个数据", "0. 返回上一级"
            )
            choice = self._int()
            if choice == 0:
                return
            if choice == 1:
                if self._delete_files():
                    return
            elif choice == 2:
                category = self._choose_category()
                if category is not None:
                    self._delete_students(category)
                    return
            else:
                self._say("错误的数字范围，请按下任意键重新输入！")

    def _delete_files(self) -> bool:
        """Ask which files to delete; False means go back a level."""
        while True:
            self._say(
                "choose the file(s) you need to delete",
                *(f"{i}. {c.filename}" for i, c in enumerate(_CATEGORIES, 1)),
                "4. All",
                "0. Go back to the previous level",
            )
            choice = self._int()
            if choice == 0:
                return False
            if choice is not None and 1 <= choice <= 3:
                self.registry.delete_file(_CATEGORIES[choice - 1])
                return True
            if choice == 4:
                for category in Category:
                    self.registry.delete_file(category)
                return True
            self._say("错误的序号范围！")

    def _delete_students(self, category: Category) -> None:
        while True:
            if not self.registry.files.check(category):
                return
            self._list(self.registry.students(category))
            self._say(
                "请输入要删除的学生的序号区间 [x,y]",
                "若只删除一个学生信息，请输入两遍该序列号",
                "若退出此功能请输入两次-1",
            )
            first, last = self._int(), self._int()
            if first == -1 and last == -1:
                self._say("exit!")
                return
            if first is None or last is None:
                self._say("错误的序号范围！")
                continue
            if last < first:
                self._say("m不得大于n")
                continue
            try:
                self.registry.delete_range(category, first, last)
            except SelectionError as exc:
                self._say(f"错误的序号范围！{exc}")
                continue
            if first == last:
                self._say(f"已删除{first}号学生信息")
            else:
                self._say(f"已删除{first}至{last}之间的学生信息")
            self._list(self.registry.students(category), padded=False)
            return

    def _statistics(self) -> None:
        stats = self.registry.statistics()
        self._say("****************统计学生人数****************", "")
        for category in Category:
            self._say(f"                {category.label}有{stats.counts[category]}人")
        self._say("", "****************统计学生总分****************", "")
        for category in Category:
            self._say(f"{category.label}各人总分：")
            for name, total in stats.totals[category]:
                self._say(f"              {name:<6}的总分为：{total:>4}")
        self._say("", "**************统计学生单科成绩**************", "")
        for category in Category:
            averages = stats.averages.get(category)
            for subject in student_class(category).GRADE_FIELDS:
                self._say(
                    f"       ********{category.label}{_SUBJECT_NAMES[subject]}成绩********       "
                )
                if averages is None:
                    break
                self._say(f"                    {averages[subject]:g}", "")
            self._say("", "")

    def _rank(self) -> None:
        files = self.registry.files
        self._say("**************各学生总分排名**************")
        for category in Category:
            ranked = self.registry.rank_by_total(category)
            self._say(f"{category.label}：")
            if files.check(category):
                self._list(ranked)
        self._say("**************各学生单科排名**************", "")
        for category in Category:
            self._say(f"         ********{category.label}排名********         ")
            if not files.check(category):
                self._say("")
                continue
            for subject in student_class(category).GRADE_FIELDS:
                self._say(
                    f"       ********{category.label}{_SUBJECT_NAMES[subject]}排名********       "
                )
                self._list(self.registry.rank_by_subject(category, subject))
                self._say("")
            self._say("")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive roll keeper."""
    parser = argparse.ArgumentParser(prog="studentroll", description=__doc__)
    parser.add_argument(
        "--dir", default=".", help="directory holding the record files"
    )
    args = parser.parse_args(argv)
    registry = Registry(StudentFiles(args.dir))
    console = Console(registry, sys.stdin, sys.stdout)
    try:
        console.initialise()
    except EOFError:
        print("input ended before the record files were complete", file=sys.stderr)
        return 1
    console.run()
    console.end_check()
    return 0


if __name__ == "__main__":
    sys.exit(main())