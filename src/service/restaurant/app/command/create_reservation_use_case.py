import time
from datetime import datetime
from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.restaurant.app.dto.reservation_result import ReservationResult
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.restaurant.app.interface.i_table_availability_query_handler import (
    ITableAvailabilityQueryHandler,
)
from src.service.restaurant.domain.entity.reservation_entity import Reservation
from src.service.restaurant.domain.reservation_policy import validate_reservation_request


class CreateReservationUseCase:
    """
    Book the best-fit table for a party.

    Flow:
    1. Validate customer id, party size, future time and business hours
    2. Ask the availability engine for the tightest free table
    3. Persist a CONFIRMED reservation on that table

    "No tables available" is returned as success=False, not raised.

    In strict booking mode steps 2-3 run in one SERIALIZABLE Unit of Work.
    """

    def __init__(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        table_availability_query_handler: ITableAvailabilityQueryHandler,
        uow_factory: Optional[Callable[[], AbstractUnitOfWork]] = None,
        strict_mode: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.table_availability_query_handler = table_availability_query_handler
        self.uow_factory = uow_factory
        self.strict_mode = strict_mode
        self.clock = clock
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        table_availability_query_handler: ITableAvailabilityQueryHandler = Depends(
            Provide[Container.table_availability_query_handler]
        ),
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            reservation_command_repo=reservation_command_repo,
            table_availability_query_handler=table_availability_query_handler,
            uow_factory=uow_factory,
            strict_mode=config.STRICT_BOOKING_MODE,
        )

    @Logger.io
    async def create_reservation(
        self,
        *,
        customer_id: int,
        reservation_time: datetime,
        party_size: int,
        special_requests: Optional[str] = None,
    ) -> ReservationResult:
        """
        Raises:
            DomainError: invalid request details
            ConflictError: strict mode only, a concurrent booking won the race
        """
        start = time.perf_counter()
        outcome = 'error'

        with self.tracer.start_as_current_span(
            'use_case.create_reservation',
            attributes={
                'reservation.customer_id': customer_id,
                'reservation.party_size': party_size,
                'reservation.time': reservation_time.isoformat() if reservation_time else '',
                'reservation.strict_mode': self.strict_mode,
            },
        ):
            try:
                now = self.clock()
                validate_reservation_request(
                    customer_id=customer_id,
                    party_size=party_size,
                    reservation_time=reservation_time,
                    now=now,
                )

                if self.strict_mode and self.uow_factory is not None:
                    async with self.uow_factory() as uow:
                        result = await self._book(
                            reservation_command_repo=uow.reservation_command_repo,
                            table_availability_query_handler=uow.table_availability_query_handler,
                            customer_id=customer_id,
                            reservation_time=reservation_time,
                            party_size=party_size,
                            special_requests=special_requests,
                            now=now,
                        )
                        if result.success:
                            await uow.commit()
                else:
                    result = await self._book(
                        reservation_command_repo=self.reservation_command_repo,
                        table_availability_query_handler=self.table_availability_query_handler,
                        customer_id=customer_id,
                        reservation_time=reservation_time,
                        party_size=party_size,
                        special_requests=special_requests,
                        now=now,
                    )

                outcome = 'created' if result.success else 'unavailable'
                return result
            finally:
                metrics.record_reservation(
                    operation='create', result=outcome, duration=time.perf_counter() - start
                )

    async def _book(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        table_availability_query_handler: ITableAvailabilityQueryHandler,
        customer_id: int,
        reservation_time: datetime,
        party_size: int,
        special_requests: Optional[str],
        now: datetime,
    ) -> ReservationResult:
        table = await table_availability_query_handler.find_available_table(
            party_size=party_size, reservation_time=reservation_time
        )
        if table is None:
            Logger.base.info(
                f'📝 [CREATE-RESERVATION] No table for party of {party_size} at {reservation_time}'
            )
            return ReservationResult.unavailable('No tables available')

        reservation = Reservation.create(
            customer_id=customer_id,
            table=table,
            reservation_time=reservation_time,
            party_size=party_size,
            special_requests=special_requests,
            now=now,
        )
        created = await reservation_command_repo.create(reservation=reservation)

        Logger.base.info(
            f'📝 [CREATE-RESERVATION] Reservation {created.id} on table {table.table_number} '
            f'for customer {customer_id} at {reservation_time}'
        )
        return ReservationResult.ok('Reservation created successfully', created)
