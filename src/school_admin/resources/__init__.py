from .absences import ABSENCES
from .attendance import ATTENDANCE
from .base import Record, ResourceDefinition
from .classes import CLASSES
from .exclusions import EXCLUSIONS
from .fees import FEES
from .levels import LEVELS
from .payments import PAYMENTS
from .subjects import SUBJECTS

ALL_RESOURCES = (FEES, PAYMENTS, ABSENCES, EXCLUSIONS, SUBJECTS, CLASSES, LEVELS, ATTENDANCE)

__all__ = [
    "ABSENCES",
    "ALL_RESOURCES",
    "ATTENDANCE",
    "CLASSES",
    "EXCLUSIONS",
    "FEES",
    "LEVELS",
    "PAYMENTS",
    "Record",
    "ResourceDefinition",
    "SUBJECTS",
]
