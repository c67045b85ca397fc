from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import requests

from .gateway.connection import ApiConfig, ApiConnection
from .gateway.http_gateway import HttpResourceGateway
from .notifications.channel import NotificationChannel
from .pages.attendance_page import AttendancePage
from .pages.page import ResourcePage
from .resources import ABSENCES, ATTENDANCE, CLASSES, EXCLUSIONS, FEES, LEVELS, PAYMENTS, SUBJECTS


@dataclass(frozen=True)
class Container:
    connection: ApiConnection

    fees_page: ResourcePage
    payments_page: ResourcePage
    absences_page: ResourcePage
    exclusions_page: ResourcePage
    subjects_page: ResourcePage
    classes_page: ResourcePage
    levels_page: ResourcePage
    attendance_page: AttendancePage

    def pages(self) -> list[ResourcePage]:
        return [
            self.fees_page,
            self.payments_page,
            self.absences_page,
            self.exclusions_page,
            self.subjects_page,
            self.classes_page,
            self.levels_page,
            self.attendance_page,
        ]


def build_container(
    *,
    api_config: ApiConfig,
    session: Optional[requests.Session] = None,
    clock: Optional[Callable[[], float]] = None,
) -> Container:
    conn = ApiConnection(api_config, session=session)

    def channel() -> NotificationChannel:
        return NotificationChannel(timeout=api_config.notification_timeout, clock=clock)

    def page(definition, page_class=ResourcePage):
        return page_class(definition, HttpResourceGateway(conn, definition), channel())

    return Container(
        connection=conn,
        fees_page=page(FEES),
        payments_page=page(PAYMENTS),
        absences_page=page(ABSENCES),
        exclusions_page=page(EXCLUSIONS),
        subjects_page=page(SUBJECTS),
        classes_page=page(CLASSES),
        levels_page=page(LEVELS),
        attendance_page=page(ATTENDANCE, AttendancePage),
    )
