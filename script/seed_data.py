#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the ledger

Features:
1. Create Movies - a few catalog entries
2. Create Showtimes - a day of back-to-back screenings per theater
3. Book Seats - a handful of seats on the first showtime

Notes:
- Data goes through the same use cases the HTTP API uses, so every
  overlap and seat check applies
- Run `python -m script.reset_database` first for a clean schema
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
import asyncio
import os

from src.platform.config.di import container
from src.service.booking.app.command.book_seat_use_case import BookSeatUseCase
from src.service.catalog.app.command.add_movie_use_case import AddMovieUseCase
from src.service.scheduling.app.command.create_showtime_use_case import CreateShowtimeUseCase
from src.service.scheduling.domain.entity.showtime_entity import Showtime

DEMO_HOLDER_ID = '84438967-f68f-4fa0-b620-0f08217e76af'
BREAK_MINUTES = 15


@dataclass
class MovieConfig:
    """Movie seed configuration"""
    title: str
    genre: str
    duration: int
    rating: float
    release_year: int


TEST_MOVIES = [
    MovieConfig('Sample Movie Title', 'Action', duration=120, rating=8.7, release_year=2020),
    MovieConfig('Quiet Harbor', 'Drama', duration=95, rating=7.4, release_year=2018),
    MovieConfig('Night Shift', 'Science Fiction', duration=135, rating=8.1, release_year=2023),
]
TEST_THEATERS = ['Hall 1', 'Hall 2']


def _first_show_time() -> datetime:
    day = os.getenv('SEED_DAY')
    base = datetime.fromisoformat(day) if day else datetime.now() + timedelta(days=1)
    return base.replace(hour=10, minute=0, second=0, microsecond=0)


async def create_movies(use_case: AddMovieUseCase) -> list[int]:
    print(f'🎬 Creating {len(TEST_MOVIES)} movies...')
    movie_ids = []
    for config in TEST_MOVIES:
        movie = await use_case.add_movie(
            title=config.title,
            genre=config.genre,
            duration=config.duration,
            rating=config.rating,
            release_year=config.release_year,
        )
        assert movie.id is not None
        movie_ids.append(movie.id)
        print(f'   ✅ Created movie: ID={movie.id}, Title={movie.title}')
    return movie_ids


async def create_showtimes(
    use_case: CreateShowtimeUseCase, movie_ids: list[int]
) -> list[Showtime]:
    print(f'🕙 Creating showtimes in {len(TEST_THEATERS)} theaters...')
    showtimes = []
    for theater in TEST_THEATERS:
        start = _first_show_time()
        for config, movie_id in zip(TEST_MOVIES, movie_ids):
            end = start + timedelta(minutes=config.duration)
            showtime = await use_case.create_showtime(
                theater=theater, start_time=start, end_time=end, movie_id=movie_id, price='12.50'
            )
            showtimes.append(showtime)
            print(f'   ✅ {theater}: {start:%H:%M}-{end:%H:%M} {config.title} (ID={showtime.id})')
            start = end + timedelta(minutes=BREAK_MINUTES)
    return showtimes


async def book_seats(use_case: BookSeatUseCase, showtime: Showtime) -> None:
    assert showtime.id is not None
    print(f'🎟️  Booking seats on showtime {showtime.id}...')
    for seat_number in range(1, 6):
        booking = await use_case.book_seat(
            showtime_id=showtime.id, seat_number=seat_number, holder_id=DEMO_HOLDER_ID
        )
        print(f'   ✅ Seat {seat_number}: booking {booking.id}')


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    database = container.database()
    uow_factory = container.unit_of_work.provider
    scoped_lock = container.scoped_lock()

    try:
        movie_ids = await create_movies(AddMovieUseCase(uow_factory=uow_factory))
        print()

        showtimes = await create_showtimes(
            CreateShowtimeUseCase(uow_factory=uow_factory, scoped_lock=scoped_lock), movie_ids
        )
        print()

        await book_seats(
            BookSeatUseCase(uow_factory=uow_factory, scoped_lock=scoped_lock), showtimes[0]
        )

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        exit(1)

    finally:
        await database.dispose()


if __name__ == '__main__':
    asyncio.run(main())
