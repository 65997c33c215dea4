import time
from datetime import datetime
from typing import Callable, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import InfrastructureError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.restaurant.app.dto.reservation_result import ReservationResult
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.restaurant.app.interface.i_table_availability_query_handler import (
    ITableAvailabilityQueryHandler,
)
from src.service.restaurant.domain.reservation_policy import validate_reservation_request


class ModifyReservationUseCase:
    """
    Move an existing reservation to a new time / party size.

    Existence and ownership are checked before the new details are validated,
    so a non-owner is always told Unauthorized. The engine is re-run excluding
    the reservation itself; when nothing fits the reservation is left untouched.
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
    async def modify_reservation(
        self,
        *,
        reservation_id: int,
        customer_id: int,
        reservation_time: datetime,
        party_size: int,
        special_requests: Optional[str] = None,
    ) -> ReservationResult:
        """
        Raises:
            NotFoundError: unknown reservation id
            ForbiddenError: customer_id is not the booking customer
            DomainError: invalid new details
            InfrastructureError: the row vanished between read and update
            ConflictError: strict mode only, a concurrent booking won the race
        """
        start = time.perf_counter()
        outcome = 'error'

        with self.tracer.start_as_current_span(
            'use_case.modify_reservation',
            attributes={
                'reservation.id': reservation_id,
                'reservation.customer_id': customer_id,
                'reservation.party_size': party_size,
                'reservation.strict_mode': self.strict_mode,
            },
        ):
            try:
                if self.strict_mode and self.uow_factory is not None:
                    async with self.uow_factory() as uow:
                        result = await self._reschedule(
                            reservation_command_repo=uow.reservation_command_repo,
                            table_availability_query_handler=uow.table_availability_query_handler,
                            reservation_id=reservation_id,
                            customer_id=customer_id,
                            reservation_time=reservation_time,
                            party_size=party_size,
                            special_requests=special_requests,
                        )
                        if result.success:
                            await uow.commit()
                else:
                    result = await self._reschedule(
                        reservation_command_repo=self.reservation_command_repo,
                        table_availability_query_handler=self.table_availability_query_handler,
                        reservation_id=reservation_id,
                        customer_id=customer_id,
                        reservation_time=reservation_time,
                        party_size=party_size,
                        special_requests=special_requests,
                    )

                outcome = 'modified' if result.success else 'unavailable'
                return result
            finally:
                metrics.record_reservation(
                    operation='modify', result=outcome, duration=time.perf_counter() - start
                )

    async def _reschedule(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        table_availability_query_handler: ITableAvailabilityQueryHandler,
        reservation_id: int,
        customer_id: int,
        reservation_time: datetime,
        party_size: int,
        special_requests: Optional[str],
    ) -> ReservationResult:
        reservation = await reservation_command_repo.get_by_id(reservation_id=reservation_id)
        if not reservation:
            raise NotFoundError('Reservation not found')

        reservation.ensure_owned_by(customer_id)

        validate_reservation_request(
            customer_id=customer_id,
            party_size=party_size,
            reservation_time=reservation_time,
            now=self.clock(),
        )

        table = await table_availability_query_handler.find_available_table(
            party_size=party_size,
            reservation_time=reservation_time,
            exclude_reservation_id=reservation_id,
        )
        if table is None:
            return ReservationResult.unavailable('No tables available for requested time')

        updated = reservation.reschedule(
            table=table,
            reservation_time=reservation_time,
            party_size=party_size,
            special_requests=special_requests,
        )
        if not await reservation_command_repo.update(reservation=updated):
            raise InfrastructureError('Failed to update reservation')

        Logger.base.info(
            f'📝 [MODIFY-RESERVATION] Reservation {reservation_id} moved to table '
            f'{table.table_number} at {reservation_time}'
        )
        return ReservationResult.ok('Reservation updated successfully', updated)
