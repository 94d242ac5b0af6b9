from collections.abc import Callable
from typing import Any

from fastapi.testclient import TestClient
import pytest

from test.constants import ANOTHER_HOLDER_ID, DEFAULT_THEATER, HOLDER_ID


@pytest.fixture
def showtime_id(client: TestClient, create_movie: Callable[..., dict[str, Any]]) -> int:
    movie = create_movie()
    response = client.post(
        '/showtimes',
        json={
            'movieId': movie['id'],
            'theater': DEFAULT_THEATER,
            'startTime': '2025-02-14T10:00:00',
            'endTime': '2025-02-14T12:00:00',
            'price': 50.2,
        },
    )
    assert response.status_code == 200, response.text
    return response.json()['id']


@pytest.fixture
def book(client: TestClient, showtime_id: int) -> Callable[..., Any]:
    def _book(**fields: Any):
        payload = {'showtimeId': showtime_id, 'seatNumber': 15, 'holderId': HOLDER_ID} | fields
        return client.post('/bookings', json=payload)

    return _book


@pytest.mark.integration
class TestBookSeatApi:
    def test_book_seat_returns_booking_id(self, book: Callable[..., Any]) -> None:
        response = book()

        assert response.status_code == 200
        assert set(response.json()) == {'bookingId'}

    def test_same_seat_twice_conflicts(self, book: Callable[..., Any]) -> None:
        assert book().status_code == 200

        response = book(holderId=ANOTHER_HOLDER_ID)

        assert response.status_code == 409
        assert 'Seat 15 is already booked' in response.json()['detail']

    def test_user_id_alias_is_accepted(self, client: TestClient, showtime_id: int) -> None:
        response = client.post(
            '/bookings', json={'showtimeId': showtime_id, 'seatNumber': 1, 'userId': HOLDER_ID}
        )

        assert response.status_code == 200

    @pytest.mark.parametrize('seat_number', [0, -1])
    def test_non_positive_seat_is_bad_request(
        self, book: Callable[..., Any], seat_number: int
    ) -> None:
        response = book(seatNumber=seat_number)

        assert response.status_code == 400
        assert response.json()['detail'] == 'seatNumber must be > 0'

    def test_malformed_holder_is_bad_request(self, book: Callable[..., Any]) -> None:
        response = book(holderId='not-a-uuid')

        assert response.status_code == 400
        assert 'holderId' in response.json()['detail']

    def test_unknown_showtime_is_bad_request(self, book: Callable[..., Any]) -> None:
        response = book(showtimeId=999)

        assert response.status_code == 400
        assert response.json()['detail'] == 'No showtime found with id=999'


@pytest.mark.integration
class TestBookingQueryApi:
    def test_get_booking_by_id(
        self, client: TestClient, book: Callable[..., Any], showtime_id: int
    ) -> None:
        booking_id = book().json()['bookingId']

        response = client.get(f'/bookings/{booking_id}')

        assert response.status_code == 200
        body = response.json()
        assert body['id'] == booking_id
        assert body['showtimeId'] == showtime_id
        assert body['seatNumber'] == 15
        assert body['holderId'] == HOLDER_ID
        assert body['createdAt'] is not None

    def test_get_unknown_booking_is_not_found(self, client: TestClient) -> None:
        response = client.get('/bookings/01936d8f-5e73-7c4e-a9c5-123456789abc')

        assert response.status_code == 404

    def test_list_bookings_filtered_by_showtime(
        self, client: TestClient, book: Callable[..., Any], showtime_id: int
    ) -> None:
        book(seatNumber=2)
        book(seatNumber=1)

        everything = client.get('/bookings')
        filtered = client.get('/bookings', params={'showtimeId': showtime_id})
        other = client.get('/bookings', params={'showtimeId': showtime_id + 1})

        assert [b['seatNumber'] for b in everything.json()] == [1, 2]
        assert [b['seatNumber'] for b in filtered.json()] == [1, 2]
        assert other.json() == []


@pytest.mark.integration
class TestOutOfRangeIntegersApi:
    @pytest.mark.parametrize(
        'fields',
        [
            {'seatNumber': 2**31},
            {'seatNumber': 2**64},
            {'showtimeId': 2**70},
        ],
    )
    def test_book_seat_beyond_column_range_is_bad_request(
        self, book: Callable[..., Any], fields: dict[str, int]
    ) -> None:
        response = book(**fields)

        assert response.status_code == 400
        assert response.json()['detail'].startswith('Validation failed:')

    def test_largest_seat_number_is_bookable(self, book: Callable[..., Any]) -> None:
        assert book(seatNumber=2**31 - 1).status_code == 200

    def test_list_filter_beyond_column_range_is_bad_request(self, client: TestClient) -> None:
        response = client.get('/bookings', params={'showtimeId': 2**70})

        assert response.status_code == 400
