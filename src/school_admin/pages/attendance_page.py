from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from ..common.datetime_utils import now_local
from ..core.enums import WorkflowState
from ..core.exceptions import GatewayError
from ..reports.attendance_summary import TeacherAttendance, available_years, monthly_summary
from .page import ResourcePage

logger = logging.getLogger(__name__)


class AttendancePage(ResourcePage):
    """Teacher attendance: list entries, mark a teacher present, monthly view."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._marking: set[Any] = set()

    def is_marking(self, teacher_id: Any) -> bool:
        return teacher_id in self._marking

    async def mark(self, teacher_id: Any) -> WorkflowState:
        """Record a presence then reload the list.

        Returns SUCCESS, FAILED when the API refused or could not be reached,
        SUBMITTING when the same teacher is already being marked, and IDLE
        when the page was torn down meanwhile.
        """
        if teacher_id in self._marking:
            logger.debug("attendance mark %s ignored, already submitting", teacher_id)
            return WorkflowState.SUBMITTING

        self._marking.add(teacher_id)
        try:
            await asyncio.to_thread(self._gateway.mark, teacher_id)
        except GatewayError as e:
            if not self.is_active:
                return WorkflowState.IDLE
            logger.warning("attendance mark %s failed: %s", teacher_id, e.message)
            self._notifications.error(e.message)
            return WorkflowState.FAILED
        finally:
            self._marking.discard(teacher_id)

        if not self.is_active:
            return WorkflowState.IDLE
        self._notifications.success("Attendance recorded successfully")
        await self.reload()
        return WorkflowState.SUCCESS

    def summary(
        self,
        *,
        month: Optional[int] = None,
        year: Optional[int] = None,
        query: str = "",
    ) -> list[TeacherAttendance]:
        today = now_local()
        month = month or today.month
        year = year or today.year
        return monthly_summary(self._store.project(query), month=month, year=year)

    def years(self) -> list[int]:
        return available_years(self._store, current_year=now_local().year)
