from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from src.platform.constant.route_constant import (
    ADMIN_RESERVATIONS,
    ADMIN_STATISTICS,
    ADMIN_TABLE_DETAIL,
    ADMIN_TABLES,
)
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.update_table_status_use_case import (
    UpdateTableStatusUseCase,
)
from src.service.restaurant.app.query.get_statistics_use_case import GetStatisticsUseCase
from src.service.restaurant.app.query.list_reservations_use_case import ListReservationsUseCase
from src.service.restaurant.app.query.list_tables_use_case import ListTablesUseCase
from src.service.restaurant.domain.enum.reservation_status import ReservationStatus
from src.service.restaurant.driving_adapter.http_controller.schema.reservation_schema import (
    ReservationResponse,
)
from src.service.restaurant.driving_adapter.http_controller.schema.statistics_schema import (
    StatisticsResponse,
)
from src.service.restaurant.driving_adapter.http_controller.schema.table_schema import (
    TableResponse,
    TableStatusUpdateRequest,
)


router = APIRouter()


@router.get(ADMIN_RESERVATIONS, response_model=List[ReservationResponse])
@Logger.io
async def list_reservations(
    day: Optional[date] = Query(None, alias='date'),
    reservation_status: Optional[ReservationStatus] = Query(None, alias='status'),
    use_case: ListReservationsUseCase = Depends(ListReservationsUseCase.depends),
) -> List[ReservationResponse]:
    reservations = await use_case.list_reservations(day=day, status=reservation_status)
    return [ReservationResponse.model_validate(reservation) for reservation in reservations]


@router.get(ADMIN_STATISTICS)
@Logger.io
async def get_statistics(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    use_case: GetStatisticsUseCase = Depends(GetStatisticsUseCase.depends),
) -> StatisticsResponse:
    statistics = await use_case.get_statistics(start_date=start_date, end_date=end_date)
    return StatisticsResponse.model_validate(statistics)


@router.get(ADMIN_TABLES, response_model=List[TableResponse])
@Logger.io
async def list_tables(
    use_case: ListTablesUseCase = Depends(ListTablesUseCase.depends),
) -> List[TableResponse]:
    tables = await use_case.list_tables()
    return [TableResponse.model_validate(table) for table in tables]


@router.put(ADMIN_TABLE_DETAIL, response_class=PlainTextResponse)
@Logger.io
async def update_table_status(
    table_id: int,
    request: TableStatusUpdateRequest,
    use_case: UpdateTableStatusUseCase = Depends(UpdateTableStatusUseCase.depends),
) -> str:
    await use_case.update_status(table_id=table_id, status=request.status)
    return 'Table status updated successfully'
