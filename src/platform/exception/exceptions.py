class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    retryable: bool = False

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidArgumentError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class UnknownReferenceError(CustomBaseError):
    """A referenced record (movie, showtime) does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class UnknownMovieError(UnknownReferenceError):
    def __init__(self, movie_id: int) -> None:
        self.movie_id = movie_id
        super().__init__(f'No movie found with id={movie_id}')


class UnknownShowtimeError(UnknownReferenceError):
    def __init__(self, showtime_id: int) -> None:
        self.showtime_id = showtime_id
        super().__init__(f'No showtime found with id={showtime_id}')


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class OverlapError(ConflictError):
    def __init__(self, theater: str) -> None:
        self.theater = theater
        super().__init__(f"Another showtime overlaps in theater '{theater}'")


class SeatTakenError(ConflictError):
    def __init__(self, *, showtime_id: int, seat_number: int) -> None:
        self.showtime_id = showtime_id
        self.seat_number = seat_number
        super().__init__(f'Seat {seat_number} is already booked for showtime {showtime_id}')


class TransientStoreFailureError(CustomBaseError):
    """Lock or transaction contention, or lost connectivity. Safe to retry the whole request."""

    retryable = True

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)
