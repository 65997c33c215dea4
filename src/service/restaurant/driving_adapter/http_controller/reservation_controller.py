from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from opentelemetry import trace

from src.platform.constant.route_constant import (
    CUSTOMER_RESERVATIONS,
    RESERVATION_DETAIL,
    RESERVATIONS,
)
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.restaurant.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.restaurant.app.command.modify_reservation_use_case import (
    ModifyReservationUseCase,
)
from src.service.restaurant.app.dto.reservation_result import ReservationResult
from src.service.restaurant.app.query.list_customer_reservations_use_case import (
    ListCustomerReservationsUseCase,
)
from src.service.restaurant.driving_adapter.http_controller.schema.reservation_schema import (
    ReservationRequest,
    ReservationResponse,
    ReservationResultResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_response(result: ReservationResult) -> ReservationResultResponse:
    return ReservationResultResponse(
        success=result.success,
        message=result.message,
        reservation=(
            ReservationResponse.model_validate(result.reservation)
            if result.reservation
            else None
        ),
    )


@router.get(CUSTOMER_RESERVATIONS, response_model=List[ReservationResponse])
@Logger.io
async def list_customer_reservations(
    customer_id: int,
    use_case: ListCustomerReservationsUseCase = Depends(ListCustomerReservationsUseCase.depends),
) -> List[ReservationResponse]:
    reservations = await use_case.list_customer_reservations(customer_id)
    return [ReservationResponse.model_validate(reservation) for reservation in reservations]


@router.post(RESERVATIONS, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_reservation(
    request: ReservationRequest,
    response: Response,
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> ReservationResultResponse:
    with tracer.start_as_current_span('controller.create_reservation') as span:
        span.set_attribute('customer_id', request.customer_id)
        span.set_attribute('party_size', request.party_size)

        result = await use_case.create_reservation(
            customer_id=request.customer_id,
            reservation_time=request.reservation_time,
            party_size=request.party_size,
            special_requests=request.special_requests,
        )

        # No table is a normal outcome, not a created resource
        if not result.success:
            response.status_code = status.HTTP_200_OK

        return _to_response(result)


@router.put(RESERVATION_DETAIL)
@Logger.io
async def modify_reservation(
    reservation_id: int,
    request: ReservationRequest,
    use_case: ModifyReservationUseCase = Depends(ModifyReservationUseCase.depends),
) -> ReservationResultResponse:
    with tracer.start_as_current_span('controller.modify_reservation') as span:
        span.set_attribute('reservation_id', reservation_id)

        result = await use_case.modify_reservation(
            reservation_id=reservation_id,
            customer_id=request.customer_id,
            reservation_time=request.reservation_time,
            party_size=request.party_size,
            special_requests=request.special_requests,
        )
        return _to_response(result)


@router.delete(RESERVATION_DETAIL)
@Logger.io
async def cancel_reservation(
    reservation_id: int,
    customer_id: int = Query(...),
    use_case: CancelReservationUseCase = Depends(CancelReservationUseCase.depends),
) -> ReservationResultResponse:
    result = await use_case.cancel_reservation(
        reservation_id=reservation_id, customer_id=customer_id
    )
    return _to_response(result)
