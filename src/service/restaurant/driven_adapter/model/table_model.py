from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class TableModel(Base):
    __tablename__ = 'tables'

    id: Mapped[int] = mapped_column('table_id', Integer, primary_key=True, autoincrement=True)
    table_number: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    location: Mapped[str] = mapped_column(String(20), default='INDOOR', nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='AVAILABLE', nullable=False)

    def __repr__(self) -> str:
        return f'<TableModel(id={self.id}, number={self.table_number}, capacity={self.capacity})>'
