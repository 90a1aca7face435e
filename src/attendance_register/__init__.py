"""Attendance Register package.

Organized by feature modules (institute, classes, students, holidays,
attendance) with a thin Flask controller layer on top of service and
repository layers backed by a single key-value record store.
"""
