from attendance_register.attendance.model import DailyAttendance
from attendance_register.attendance.sheet import month_descriptor
from attendance_register.attendance.summary import duration, monthly_summary
from attendance_register.core.enums import AttendanceStatus

# September 2025: 30 days, Sundays on 7, 14, 21, 28
SEPTEMBER = month_descriptor(2025, 9)
HOLIDAY = "2025-09-15"


def _working_dates():
    return [
        SEPTEMBER.date_str(d)
        for d in SEPTEMBER.days
        if d not in (7, 14, 21, 28) and SEPTEMBER.date_str(d) != HOLIDAY
    ]


def test_summary_counts_statuses_over_working_days():
    dates = _working_dates()
    assert len(dates) == 25
    statuses = [AttendanceStatus.PRESENT] * 20 + [AttendanceStatus.ABSENT] * 3 + [AttendanceStatus.LEAVE] * 2
    cells = {d: DailyAttendance(status=s) for d, s in zip(dates, statuses)}

    summary = monthly_summary(SEPTEMBER, lambda d: cells.get(d, DailyAttendance()), frozenset({HOLIDAY}))

    assert summary.working_days == 25
    assert summary.present == 20
    assert summary.absent == 3
    assert summary.leave == 2
    assert summary.percentage == "80.00"
    assert summary.is_low is False


def test_unset_working_day_counts_only_towards_working_days():
    summary = monthly_summary(SEPTEMBER, lambda d: DailyAttendance(), frozenset())
    assert summary.working_days == 26
    assert (summary.present, summary.absent, summary.leave) == (0, 0, 0)
    assert summary.percentage == "0.00"
    assert summary.is_low is True


def test_percentage_is_rounded_to_two_decimals_and_flagged_below_75():
    dates = _working_dates()
    cells = {d: DailyAttendance(status=AttendanceStatus.PRESENT) for d in dates[:18]}
    summary = monthly_summary(
        SEPTEMBER, lambda d: cells.get(d, DailyAttendance(AttendanceStatus.ABSENT)), frozenset({HOLIDAY})
    )
    assert summary.percentage == "72.00"
    assert summary.is_low is True


def test_month_without_working_days_has_zero_percentage():
    all_days = frozenset(SEPTEMBER.date_str(d) for d in SEPTEMBER.days)
    summary = monthly_summary(SEPTEMBER, lambda d: DailyAttendance(AttendanceStatus.PRESENT), all_days)
    assert summary.working_days == 0
    assert summary.percentage == "0.00"


def test_duration():
    assert duration("09:05", "16:45") == "07:40"
    assert duration("16:45", "09:05") == "-"
    assert duration("09:05", "09:05") == "-"
    assert duration("", "16:45") == "-"
    assert duration("09:05", "") == "-"
