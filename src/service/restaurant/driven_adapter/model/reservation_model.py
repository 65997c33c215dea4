from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


class ReservationModel(Base):
    __tablename__ = 'reservations'
    __table_args__ = (
        # Availability engine filters CONFIRMED bookings around a time per table
        Index('ix_reservations_table_status_time', 'table_id', 'status', 'reservation_time'),
    )

    id: Mapped[int] = mapped_column(
        'reservation_id', Integer, primary_key=True, autoincrement=True
    )
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('customers.customer_id'), nullable=False, index=True
    )
    table_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('tables.table_id'), nullable=False
    )
    # Restaurant wall-clock time
    reservation_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), nullable=False, index=True
    )
    party_size: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='CONFIRMED', nullable=False)
    special_requests: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=False), nullable=True, onupdate=func.now()
    )

    def __repr__(self) -> str:
        return (
            f'<ReservationModel(id={self.id}, table_id={self.table_id}, '
            f'time={self.reservation_time}, status={self.status})>'
        )
