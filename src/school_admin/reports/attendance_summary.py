from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_iso_datetime
from ..resources.base import Record


@dataclass
class TeacherAttendance:
    teacher_id: str
    fullname: str
    attendances: list[Record] = field(default_factory=list)
    number_of_attendance: int = 0

    @property
    def month(self) -> Optional[str]:
        return self.attendances[0].get("month") if self.attendances else None

    def to_row(self) -> dict:
        return {
            "teacherId": self.teacher_id,
            "fullname": self.fullname,
            "numberOfAttendance": self.number_of_attendance,
            "month": self.month,
        }


def _attendance_time(entry: Mapping[str, Any]):
    value = entry.get("attendanceTime")
    if not value:
        return None
    try:
        return parse_iso_datetime(str(value))
    except ValueError:
        return None


def filter_by_month(entries: Iterable[Mapping[str, Any]], *, month: int, year: int) -> list[Record]:
    """Entries whose attendanceTime falls in the given month; unparseable times are skipped."""
    selected = []
    for entry in entries:
        when = _attendance_time(entry)
        if when is not None and when.month == int(month) and when.year == int(year):
            selected.append(dict(entry))
    return selected


def group_by_teacher(entries: Iterable[Mapping[str, Any]]) -> list[TeacherAttendance]:
    grouped: dict[str, TeacherAttendance] = {}
    for entry in entries:
        teacher_id = entry.get("teacherId")
        if teacher_id not in grouped:
            grouped[teacher_id] = TeacherAttendance(teacher_id=teacher_id, fullname=entry.get("fullname", ""))
        grouped[teacher_id].attendances.append(dict(entry))

    # the API repeats the running count on every entry; the first one is authoritative
    for teacher in grouped.values():
        first = teacher.attendances[0] if teacher.attendances else {}
        teacher.number_of_attendance = int(first.get("numberOfAttendance") or 0)
    return list(grouped.values())


def available_years(entries: Iterable[Mapping[str, Any]], *, current_year: int) -> list[int]:
    years = {current_year, current_year + 1}
    for entry in entries:
        when = _attendance_time(entry)
        if when is not None:
            years.add(when.year)
    return sorted(years, reverse=True)


def monthly_summary(entries: Iterable[Mapping[str, Any]], *, month: int, year: int) -> list[TeacherAttendance]:
    return group_by_teacher(filter_by_month(entries, month=month, year=year))
