from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class ShowtimeModel(Base):
    __tablename__ = 'showtime'
    __table_args__ = (
        CheckConstraint('price >= 0', name='ck_showtime_price_non_negative'),
        CheckConstraint('end_time > start_time', name='ck_showtime_end_after_start'),
        Index('ix_showtime_theater_start_end', 'theater', 'start_time', 'end_time'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    theater: Mapped[str] = mapped_column(String(100), nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    movie_id: Mapped[int] = mapped_column(Integer, ForeignKey('movie.id'), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal('0.00'))
