from sqlalchemy import CheckConstraint, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class MovieModel(Base):
    __tablename__ = 'movie'
    __table_args__ = (
        CheckConstraint('duration > 0', name='ck_movie_duration_positive'),
        CheckConstraint('rating >= 0 AND rating <= 10', name='ck_movie_rating_range'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    genre: Mapped[str] = mapped_column(String(100), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
