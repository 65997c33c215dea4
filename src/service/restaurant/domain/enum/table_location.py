"""Table Location Enum"""

from enum import StrEnum


class TableLocation(StrEnum):
    INDOOR = 'INDOOR'
    OUTDOOR = 'OUTDOOR'
    PATIO = 'PATIO'
    BAR = 'BAR'
