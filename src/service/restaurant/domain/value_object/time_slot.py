from datetime import datetime
from typing import Optional

import attrs


@attrs.define(frozen=True)
class TimeSlot:
    """
    One hourly candidate booking time.

    table_number is the preferred (tightest-fit) table when available, None otherwise.
    """

    time: datetime
    available: bool
    table_number: Optional[int] = None
