"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.restaurant.driven_adapter.model.customer_model import CustomerModel
from src.service.restaurant.driven_adapter.model.reservation_model import ReservationModel
from src.service.restaurant.driven_adapter.model.table_model import TableModel

__all__ = [
    'CustomerModel',
    'ReservationModel',
    'TableModel',
]
