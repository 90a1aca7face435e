from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.store_attendance_repository import StoreAttendanceRepository
from .attendance.time_source import TimeDrawer
from .auth.service import AuthService
from .classes.service import ClassService
from .classes.store_class_repository import StoreClassRepository
from .console.session import ConsoleSession
from .core.enums import StoreKey
from .database.connection import DBConfig, DatabaseConnection
from .database.latency import SimulatedLatencyStore
from .database.mysql_record_store import MySQLRecordStore
from .database.record_store import RecordStore
from .holidays.service import HolidayService
from .holidays.store_holiday_repository import StoreHolidayRepository
from .institute.service import InstituteService
from .institute.store_institute_repository import StoreInstituteRepository
from .students.service import StudentService
from .students.store_student_repository import StoreStudentRepository


@dataclass(frozen=True)
class Container:
    store: RecordStore

    institute_repo: StoreInstituteRepository
    classes_repo: StoreClassRepository
    students_repo: StoreStudentRepository
    holidays_repo: StoreHolidayRepository
    attendance_repo: StoreAttendanceRepository

    auth_service: AuthService
    institute_service: InstituteService
    class_service: ClassService
    student_service: StudentService
    holiday_service: HolidayService
    console: ConsoleSession


def build_store(*, db_config: dict, latency_ms: int = 0, attendance_save_latency_ms: int = 0) -> RecordStore:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return SimulatedLatencyStore(
        MySQLRecordStore(conn),
        latency_ms=latency_ms,
        save_latency_ms={StoreKey.ATTENDANCE: attendance_save_latency_ms},
    )


def build_container(
    *,
    store: RecordStore,
    admin_username: str = "admin",
    admin_password: str = "password",
    draw_time: Optional[TimeDrawer] = None,
) -> Container:
    institute_repo = StoreInstituteRepository(store)
    classes_repo = StoreClassRepository(store)
    students_repo = StoreStudentRepository(store)
    holidays_repo = StoreHolidayRepository(store)
    attendance_repo = StoreAttendanceRepository(store)

    class_service = ClassService(classes_repo, students_repo)
    student_service = StudentService(students_repo, classes_repo)
    holiday_service = HolidayService(holidays_repo)

    return Container(
        store=store,
        institute_repo=institute_repo,
        classes_repo=classes_repo,
        students_repo=students_repo,
        holidays_repo=holidays_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(username=admin_username, password=admin_password),
        institute_service=InstituteService(institute_repo),
        class_service=class_service,
        student_service=student_service,
        holiday_service=holiday_service,
        console=ConsoleSession(
            classes=class_service,
            students=student_service,
            holidays=holiday_service,
            attendance=attendance_repo,
            draw_time=draw_time,
        ),
    )
