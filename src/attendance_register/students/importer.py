from __future__ import annotations

import csv
import io

from ..core.constants import ROSTER_FORMAT_HINT
from ..core.exceptions import ImportParseError
from .model import NewStudent


def parse_roster(text: str) -> list[NewStudent]:
    """Parse an uploaded roster into student records.

    The first line is a header and is discarded. Every other line is
    `studentId,name,fatherName,motherName`; fields are trimmed and lines
    missing any of the four are skipped. Raises ImportParseError when no
    line survives.
    """

    lines = (text or "").lstrip("\ufeff").splitlines()[1:]
    out: list[NewStudent] = []
    for row in csv.reader(lines):
        fields = [f.strip() for f in row[:4]]
        if len(fields) < 4 or not all(fields):
            continue
        student_id, name, father_name, mother_name = fields
        out.append(NewStudent(student_id=student_id, name=name, father_name=father_name, mother_name=mother_name))

    if not out:
        raise ImportParseError(f"Could not parse CSV or file is empty. Expected format: {ROSTER_FORMAT_HINT}")
    return out
