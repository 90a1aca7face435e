from __future__ import annotations

import csv
import io
from typing import Optional

from flask import Flask, request

from ..common.http import login_required, ok, request_data
from ..console.controller import state_to_dict
from ..container import Container
from ..core.exceptions import ValidationError
from ..holidays.controller import holiday_to_dict
from .model import DailyAttendance, MonthDescriptor, MonthlySummary, MonthView


def cell_to_dict(cell: DailyAttendance) -> dict:
    return cell.to_dict()


def summary_to_dict(summary: MonthlySummary) -> dict:
    return {
        "present": summary.present,
        "absent": summary.absent,
        "leave": summary.leave,
        "working_days": summary.working_days,
        "percentage": summary.percentage,
        "is_low": summary.is_low,
    }


def month_to_dict(month: MonthDescriptor) -> dict:
    return {
        "year": month.year,
        "month": month.month_index,
        "month_name": month.month_name,
        "days": list(month.days),
    }


def month_view_to_dict(view: MonthView) -> dict:
    return {
        "month": month_to_dict(view.month),
        "headers": [
            {
                "day": h.day,
                "date": h.date,
                "weekday": h.weekday_initial,
                "is_sunday": h.is_sunday,
                "is_holiday": h.is_holiday,
                "holiday_name": h.holiday_name,
            }
            for h in view.headers
        ],
        "rows": [
            {
                "student": {
                    "id": r.student.student_pk,
                    "student_id": r.student.student_id,
                    "name": r.student.name,
                    "father_name": r.student.father_name,
                },
                "cells": [
                    {
                        "date": c.date,
                        "glyph": c.glyph,
                        "duration": c.duration,
                        "editable": c.editable,
                        **cell_to_dict(c.cell),
                    }
                    for c in r.cells
                ],
                "summary": summary_to_dict(r.summary),
            }
            for r in view.rows
        ],
        "holidays": [holiday_to_dict(h) for h in view.holidays],
    }


def _month_arg() -> Optional[int]:
    raw = request.args.get("month")
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("month must be an integer index")


def register(app: Flask, container: Container) -> None:
    console = container.console

    def _write_month_csv(*, view: MonthView, filename: str):
        """One line per student: status glyph per day followed by the monthly summary."""

        day_columns = [str(h.day) for h in view.headers]
        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=["student_id", "name", *day_columns, "present", "absent", "leave", "working_days", "percentage"],
        )
        writer.writeheader()
        for row in view.rows:
            line = {"student_id": row.student.student_id, "name": row.student.name}
            line.update({col: cell.glyph for col, cell in zip(day_columns, row.cells)})
            line.update(
                present=row.summary.present,
                absent=row.summary.absent,
                leave=row.summary.leave,
                working_days=row.summary.working_days,
                percentage=row.summary.percentage,
            )
            writer.writerow(line)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/attendance/sheet", methods=["POST"], endpoint="attendance_generate")
    @login_required
    def attendance_generate():
        data = request_data()
        sheet = console.generate_sheet(
            class_id=data.get("class_id", ""),
            start_month=data.get("start_month", ""),
            end_month=data.get("end_month", ""),
        )
        return ok(
            months=[month_to_dict(m) for m in sheet.months],
            students=len(sheet.students),
            state=state_to_dict(console.state),
        )

    @app.route("/api/attendance/sheet", methods=["GET"], endpoint="attendance_month")
    @login_required
    def attendance_month():
        view = console.month_view(_month_arg())
        return ok(sheet=month_view_to_dict(view), state=state_to_dict(console.state))

    @app.route("/api/attendance/sheet.csv", methods=["GET"], endpoint="attendance_month_csv")
    @login_required
    def attendance_month_csv():
        view = console.month_view(_month_arg())
        filename = f"attendance_{view.month.prefix.replace('-', '')}.csv"
        return _write_month_csv(view=view, filename=filename)

    @app.route("/api/attendance/cells/<student_pk>/<date_str>", methods=["GET"], endpoint="attendance_cell")
    @login_required
    def attendance_cell(student_pk: str, date_str: str):
        return ok(cell=cell_to_dict(console.cell(student_pk, date_str)))

    @app.route("/api/attendance/cells/<student_pk>/<date_str>", methods=["POST"], endpoint="attendance_edit")
    @login_required
    def attendance_edit(student_pk: str, date_str: str):
        data = request_data()
        cell = console.apply_edit(
            student_pk=student_pk,
            date_str=date_str,
            field=data.get("field", ""),
            value=data.get("value", ""),
        )
        return ok(cell=cell_to_dict(cell), state=state_to_dict(console.state))

    @app.route("/api/attendance/cells/<student_pk>/<date_str>/cycle", methods=["POST"], endpoint="attendance_cycle")
    @login_required
    def attendance_cycle(student_pk: str, date_str: str):
        cell = console.cycle(student_pk=student_pk, date_str=date_str)
        return ok(cell=cell_to_dict(cell), state=state_to_dict(console.state))

    @app.route("/api/attendance/holidays/<date_str>/toggle", methods=["POST"], endpoint="attendance_toggle_holiday")
    @login_required
    def attendance_toggle_holiday(date_str: str):
        data = request_data()
        result = console.toggle_holiday(
            date=date_str,
            name=data.get("name"),
            confirm_removal=str(data.get("confirm", "")).lower() in {"1", "true", "yes"},
        )
        body = {"action": result.action.value, "date": result.date}
        if result.holiday:
            body["holiday"] = holiday_to_dict(result.holiday)
        return ok(**body)

    @app.route("/api/attendance/save", methods=["POST"], endpoint="attendance_save")
    @login_required
    def attendance_save():
        cells = console.save()
        return ok(cells=cells, message="Attendance saved!")

    @app.route("/api/attendance/discard", methods=["POST"], endpoint="attendance_discard")
    @login_required
    def attendance_discard():
        return ok(state=state_to_dict(console.discard()))
