import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import InfrastructureError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.restaurant.app.dto.reservation_result import ReservationResult
from src.service.restaurant.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)


class CancelReservationUseCase:
    def __init__(self, *, reservation_command_repo: IReservationCommandRepo) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
    ) -> Self:
        return cls(reservation_command_repo=reservation_command_repo)

    @Logger.io
    async def cancel_reservation(self, *, reservation_id: int, customer_id: int) -> ReservationResult:
        """
        Cancelling an already cancelled reservation succeeds again.

        Raises:
            NotFoundError: unknown reservation id
            ForbiddenError: customer_id is not the booking customer
        """
        start = time.perf_counter()
        outcome = 'error'

        with self.tracer.start_as_current_span(
            'use_case.cancel_reservation',
            attributes={'reservation.id': reservation_id, 'reservation.customer_id': customer_id},
        ):
            try:
                reservation = await self.reservation_command_repo.get_by_id(
                    reservation_id=reservation_id
                )
                if not reservation:
                    raise NotFoundError('Reservation not found')

                reservation.ensure_owned_by(customer_id)
                cancelled = reservation.cancel()

                if not await self.reservation_command_repo.cancel(reservation=cancelled):
                    raise InfrastructureError('Failed to cancel reservation')

                Logger.base.info(f'📝 [CANCEL-RESERVATION] Reservation {reservation_id} cancelled')
                outcome = 'cancelled'
                return ReservationResult.ok('Reservation cancelled successfully')
            finally:
                metrics.record_reservation(
                    operation='cancel', result=outcome, duration=time.perf_counter() - start
                )
