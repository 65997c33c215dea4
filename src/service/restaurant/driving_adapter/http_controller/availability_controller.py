from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query

from src.platform.constant.route_constant import AVAILABILITY
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.query.list_time_slots_use_case import ListTimeSlotsUseCase
from src.service.restaurant.driving_adapter.http_controller.schema.reservation_schema import (
    TimeSlotResponse,
)


router = APIRouter()


@router.get(AVAILABILITY, response_model=List[TimeSlotResponse])
@Logger.io
async def check_availability(
    day: date = Query(..., alias='date'),
    party_size: int = Query(..., ge=1),
    use_case: ListTimeSlotsUseCase = Depends(ListTimeSlotsUseCase.depends),
) -> List[TimeSlotResponse]:
    """Hourly slots 09:00-21:00 with the preferred table for each free slot."""
    slots = await use_case.list_time_slots(day, party_size)
    return [TimeSlotResponse.model_validate(slot) for slot in slots]
