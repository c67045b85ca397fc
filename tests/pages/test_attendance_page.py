from __future__ import annotations

import asyncio
import threading
from datetime import datetime

from school_admin.core.enums import Severity, WorkflowState
from school_admin.core.exceptions import RequestError
from school_admin.pages.attendance_page import AttendancePage
from school_admin.resources import ATTENDANCE

ENTRIES = [
    {"teacherId": "T1", "fullname": "Ada Mbemba", "attendanceTime": "2025-03-03T08:01:00", "month": "March", "numberOfAttendance": 2},
    {"teacherId": "T2", "fullname": "Luc Okombi", "attendanceTime": "2025-03-03T08:15:00", "month": "March", "numberOfAttendance": 1},
    {"teacherId": "T1", "fullname": "Ada Mbemba", "attendanceTime": "2025-03-04T07:58:00", "month": "March", "numberOfAttendance": 2},
    {"teacherId": "T2", "fullname": "Luc Okombi", "attendanceTime": "2025-02-27T08:00:00", "month": "February", "numberOfAttendance": 5},
]


def test_mark_posts_then_reloads(make_gateway):
    gateway = make_gateway(ATTENDANCE, ENTRIES)
    page = AttendancePage(ATTENDANCE, gateway)
    asyncio.run(page.activate())

    assert asyncio.run(page.mark("T2")) == WorkflowState.SUCCESS

    assert gateway.count("mark") == 1
    assert gateway.count("list") == 2
    assert page.notifications.active()[0].message == "Attendance recorded successfully"


def test_mark_failure_reports_error(make_gateway):
    gateway = make_gateway(ATTENDANCE, ENTRIES)
    gateway.fail_with["mark"] = RequestError(409, "Already marked today")
    page = AttendancePage(ATTENDANCE, gateway)
    asyncio.run(page.activate())

    assert asyncio.run(page.mark("T1")) == WorkflowState.FAILED

    [note] = page.notifications.active()
    assert note.severity == Severity.ERROR
    assert note.message == "Already marked today"
    assert gateway.count("list") == 1


def test_summary_groups_month_by_teacher(make_gateway):
    page = AttendancePage(ATTENDANCE, make_gateway(ATTENDANCE, ENTRIES))
    asyncio.run(page.activate())

    teachers = page.summary(month=3, year=2025)

    assert [t.teacher_id for t in teachers] == ["T1", "T2"]
    assert [len(t.attendances) for t in teachers] == [2, 1]
    assert teachers[1].number_of_attendance == 1


def test_summary_filters_by_explicit_query(make_gateway):
    page = AttendancePage(ATTENDANCE, make_gateway(ATTENDANCE, ENTRIES))
    asyncio.run(page.activate())

    teachers = page.summary(month=3, year=2025, query="luc")

    assert [t.fullname for t in teachers] == ["Luc Okombi"]


def test_summary_ignores_page_search(make_gateway):
    page = AttendancePage(ATTENDANCE, make_gateway(ATTENDANCE, ENTRIES))
    asyncio.run(page.activate())
    page.search("luc")

    teachers = page.summary(month=3, year=2025)

    assert [t.teacher_id for t in teachers] == ["T1", "T2"]


def test_second_mark_for_same_teacher_is_rejected(make_gateway):
    gateway = make_gateway(ATTENDANCE, ENTRIES)
    gateway.gate = threading.Event()
    page = AttendancePage(ATTENDANCE, gateway)

    async def scenario():
        await page.activate()
        first = asyncio.create_task(page.mark("T1"))
        await asyncio.sleep(0)
        assert page.is_marking("T1")
        second = await page.mark("T1")
        gateway.gate.set()
        return await first, second

    first, second = asyncio.run(scenario())

    assert first == WorkflowState.SUCCESS
    assert second == WorkflowState.SUBMITTING
    assert gateway.count("mark") == 1


def test_years_include_current_and_next(make_gateway):
    page = AttendancePage(ATTENDANCE, make_gateway(ATTENDANCE, ENTRIES))
    asyncio.run(page.activate())
    year = datetime.now().year

    years = page.years()

    assert years == sorted({2025, year, year + 1}, reverse=True)
