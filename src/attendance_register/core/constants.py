"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_INSTITUTE = {"name": "My Institute", "address": "123 Education Lane"}

DEFAULT_IN_TIME_RANGE = ("09:00", "10:00")
DEFAULT_OUT_TIME_RANGE = ("16:00", "17:00")

LOW_ATTENDANCE_THRESHOLD = 75.0

DEFAULT_STORE_LATENCY_MS = 200
DEFAULT_ATTENDANCE_SAVE_LATENCY_MS = 500

ROSTER_FORMAT_HINT = "StudentId,Name,FatherName,MotherName"
