"""Table Status Enum"""

from enum import StrEnum


class TableStatus(StrEnum):
    AVAILABLE = 'AVAILABLE'
    OCCUPIED = 'OCCUPIED'
    RESERVED = 'RESERVED'
    MAINTENANCE = 'MAINTENANCE'
