from datetime import date
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.interface.i_table_availability_query_handler import (
    ITableAvailabilityQueryHandler,
)
from src.service.restaurant.domain.value_object.time_slot import TimeSlot


class ListTimeSlotsUseCase:
    def __init__(self, table_availability_query_handler: ITableAvailabilityQueryHandler):
        self.table_availability_query_handler = table_availability_query_handler
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        table_availability_query_handler: ITableAvailabilityQueryHandler = Depends(
            Provide[Container.table_availability_query_handler]
        ),
    ) -> Self:
        return cls(table_availability_query_handler=table_availability_query_handler)

    @Logger.io
    async def list_time_slots(self, day: date, party_size: int) -> List[TimeSlot]:
        with self.tracer.start_as_current_span(
            'use_case.list_time_slots',
            attributes={'availability.day': day.isoformat(), 'availability.party_size': party_size},
        ):
            return await self.table_availability_query_handler.list_time_slots(
                day=day, party_size=party_size
            )
