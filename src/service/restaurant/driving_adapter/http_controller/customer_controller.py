from fastapi import APIRouter, Depends, status

from src.platform.constant.route_constant import CUSTOMER_DETAIL, CUSTOMERS
from src.platform.logging.loguru_io import Logger
from src.service.restaurant.app.command.create_customer_use_case import CreateCustomerUseCase
from src.service.restaurant.app.query.get_customer_use_case import GetCustomerUseCase
from src.service.restaurant.driving_adapter.http_controller.schema.customer_schema import (
    CustomerCreateRequest,
    CustomerResponse,
)


router = APIRouter()


@router.post(CUSTOMERS, response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_customer(
    request: CustomerCreateRequest,
    use_case: CreateCustomerUseCase = Depends(CreateCustomerUseCase.depends),
) -> CustomerResponse:
    customer = await use_case.create_customer(
        name=request.name, email=request.email, phone=request.phone
    )
    return CustomerResponse.model_validate(customer)


@router.get(CUSTOMER_DETAIL, response_model=CustomerResponse)
@Logger.io
async def get_customer(
    customer_id: int,
    use_case: GetCustomerUseCase = Depends(GetCustomerUseCase.depends),
) -> CustomerResponse:
    customer = await use_case.get_customer(customer_id)
    return CustomerResponse.model_validate(customer)
