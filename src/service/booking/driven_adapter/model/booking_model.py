from datetime import datetime
import uuid

from sqlalchemy import CheckConstraint, DateTime, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'booking'
    __table_args__ = (
        UniqueConstraint('showtime_id', 'seat_number', name='uq_booking_showtime_seat'),
        CheckConstraint('seat_number > 0', name='ck_booking_seat_number_positive'),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)  # UUID7
    # Non-owning reference: deleting a showtime leaves its bookings in place
    showtime_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    seat_number: Mapped[int] = mapped_column(Integer, nullable=False)
    holder_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
