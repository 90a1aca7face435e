import pytest

from attendance_register.attendance.model import DailyAttendance
from attendance_register.core.enums import AttendanceStatus, EditField, StoreKey, ViewType
from attendance_register.core.exceptions import NotFoundError, ValidationError

MONDAY = "2025-09-08"
SUNDAY = "2025-09-07"


@pytest.fixture
def roster(container):
    cls = container.class_service.create(name="10-A")
    container.student_service.import_roster(
        class_id=cls.class_id, text="StudentId,Name,FatherName,MotherName\nS2,Bela,B,C\nS1,Aman,E,F"
    )
    return cls.class_id


@pytest.fixture
def console(container, roster):
    console = container.console
    console.load()
    console.generate_sheet(class_id=roster, start_month="2025-09", end_month="2025-10")
    return console


def _pk(console, name):
    return next(s.student_pk for s in console.state.sheet.students if s.name == name)


def test_generate_sheet_switches_to_attendance_view(console):
    assert console.state.view == ViewType.ATTENDANCE
    assert [s.name for s in console.state.sheet.students] == ["Aman", "Bela"]
    assert [m.month_name for m in console.state.sheet.months] == ["September", "October"]
    assert console.state.month_index == 0


def test_generate_sheet_validation_keeps_previous_state(console):
    before = console.state.sheet
    with pytest.raises(ValidationError):
        console.generate_sheet(class_id="", start_month="2025-01", end_month="2025-01")
    assert console.state.sheet is before


def test_edits_buffer_until_save(console, store):
    pk = _pk(console, "Aman")
    cell = console.cycle(student_pk=pk, date_str=MONDAY)
    assert cell == DailyAttendance(AttendanceStatus.ABSENT)
    assert console.state.dirty
    assert store.raw(StoreKey.ATTENDANCE) is None

    console.save()
    assert not console.state.dirty
    assert store.raw(StoreKey.ATTENDANCE) == {pk: {MONDAY: {"status": "A", "in_time": "", "out_time": ""}}}


def test_discard_drops_unsaved_edits(console):
    pk = _pk(console, "Aman")
    console.apply_edit(student_pk=pk, date_str=MONDAY, field=EditField.STATUS, value="L")
    console.discard()
    assert console.cell(pk, MONDAY).status == AttendanceStatus.PRESENT


def test_cycle_runs_through_present_absent_leave(console):
    pk = _pk(console, "Bela")
    seen = [console.cycle(student_pk=pk, date_str=MONDAY).status for _ in range(4)]
    assert seen == [AttendanceStatus.ABSENT, AttendanceStatus.LEAVE, AttendanceStatus.PRESENT, AttendanceStatus.ABSENT]


def test_sundays_and_holidays_cannot_be_edited(console):
    pk = _pk(console, "Aman")
    with pytest.raises(ValidationError):
        console.cycle(student_pk=pk, date_str=SUNDAY)

    console.toggle_holiday(date=MONDAY, name="Founders Day")
    with pytest.raises(ValidationError):
        console.apply_edit(student_pk=pk, date_str=MONDAY, field="status", value="A")


def test_unknown_student_is_rejected(console):
    with pytest.raises(NotFoundError):
        console.cycle(student_pk="_ghost", date_str=MONDAY)


def test_holiday_toggle_commits_immediately_and_changes_summary(console, store):
    view = console.month_view()
    assert view.rows[0].summary.working_days == 26

    console.toggle_holiday(date=MONDAY, name="Founders Day")
    assert store.raw(StoreKey.HOLIDAYS)[0]["date"] == MONDAY

    view = console.month_view()
    assert view.rows[0].summary.working_days == 25
    assert view.rows[0].summary.percentage == "100.00"


def test_month_navigation(console):
    view = console.month_view(1)
    assert view.month.month_name == "October"
    assert console.state.month_index == 1
    with pytest.raises(ValidationError):
        console.select_month(2)


def test_students_view_needs_selected_class(container, roster):
    console = container.console
    with pytest.raises(ValidationError):
        console.select_view("students")

    console.select_class(roster)
    assert console.state.view == ViewType.STUDENTS
    console.select_view(ViewType.HOLIDAYS)
    assert console.state.selected_class_id is None


def test_stats(container, roster):
    container.holiday_service.create(date="2025-01-26", name="Republic Day")
    stats = container.console.stats()
    assert (stats.classes, stats.students, stats.holidays) == (1, 2, 1)


def test_edit_dates_are_normalised_to_the_sheet_key(console):
    pk = _pk(console, "Aman")
    cell = console.apply_edit(student_pk=pk, date_str="2025-9-8", field=EditField.STATUS, value="A")
    assert cell.status == AttendanceStatus.ABSENT
    assert list(console.state.live_overrides[pk]) == [MONDAY]
    assert console.cell(pk, "2025-9-8").status == AttendanceStatus.ABSENT

    row = next(r for r in console.month_view(0).rows if r.student.student_pk == pk)
    assert row.cells[7].glyph == "A"
    assert row.summary.absent == 1


def test_edits_outside_the_generated_months_are_rejected(console):
    pk = _pk(console, "Aman")
    with pytest.raises(ValidationError):
        console.apply_edit(student_pk=pk, date_str="2031-01-06", field=EditField.STATUS, value="L")
    with pytest.raises(ValidationError):
        console.cycle(student_pk=pk, date_str="2025-08-04")
    assert console.state.live_overrides == {}


def test_deleted_students_leave_the_open_sheet(container, console, roster, store):
    pk = _pk(console, "Aman")
    container.class_service.delete(class_id=roster)

    assert console.month_view(0).rows == ()
    with pytest.raises(NotFoundError):
        console.cycle(student_pk=pk, date_str=MONDAY)
    console.save()
    assert store.raw(StoreKey.ATTENDANCE) == {}


def test_removed_student_drops_out_of_the_sheet(container, console):
    pk = _pk(console, "Bela")
    container.student_service.delete(student_pk=pk)
    assert [r.student.name for r in console.month_view(0).rows] == ["Aman"]


def test_generate_sheet_for_unknown_class(console):
    before = console.state.sheet
    with pytest.raises(NotFoundError):
        console.generate_sheet(class_id="_missing", start_month="2025-09", end_month="2025-09")
    assert console.state.sheet is before
