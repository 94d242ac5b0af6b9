"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.booking.app.command import book_seat_use_case
from src.service.booking.app.query import get_booking_use_case, list_bookings_use_case
from src.service.catalog.app.command import (
    add_movie_use_case,
    delete_movie_use_case,
    update_movie_use_case,
)
from src.service.catalog.app.query import list_movies_use_case
from src.service.scheduling.app.command import (
    create_showtime_use_case,
    delete_showtime_use_case,
    update_showtime_use_case,
)
from src.service.scheduling.app.query import get_showtime_use_case


WIRE_MODULES: list[ModuleType] = [
    create_showtime_use_case,
    update_showtime_use_case,
    delete_showtime_use_case,
    get_showtime_use_case,
    book_seat_use_case,
    get_booking_use_case,
    list_bookings_use_case,
    add_movie_use_case,
    update_movie_use_case,
    delete_movie_use_case,
    list_movies_use_case,
]
