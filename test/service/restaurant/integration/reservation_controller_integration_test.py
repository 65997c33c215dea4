"""
HTTP-level tests for the reservation and availability endpoints.

Requests go through the full stack: routing, DI wiring, use cases and the
SQLite test database recreated before every test.
"""

from datetime import date, datetime, time, timedelta

from fastapi.testclient import TestClient
import pytest

from src.service.restaurant.domain.entity.customer_entity import Customer
from src.service.restaurant.domain.entity.table_entity import Table


RESERVATIONS_URL = '/api/reservations'

BOOKING_DAY = date.today() + timedelta(days=30)
DINNER = datetime.combine(BOOKING_DAY, time(19, 0))


def _book(client: TestClient, customer_id: int, *, when: datetime = DINNER, party_size: int = 3):
    return client.post(
        RESERVATIONS_URL,
        json={
            'customer_id': customer_id,
            'reservation_time': when.isoformat(),
            'party_size': party_size,
            'special_requests': 'Window seat',
        },
    )


@pytest.mark.integration
class TestCreateReservation:
    def test_create_reservation_returns_201_with_best_fit_table(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        # Act
        response = _book(client, customer.id)

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body['success'] is True
        assert body['message'] == 'Reservation created successfully'
        assert body['reservation']['table_id'] == 2
        assert body['reservation']['status'] == 'CONFIRMED'
        assert body['reservation']['special_requests'] == 'Window seat'

    def test_no_table_is_a_200_with_success_false(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        response = _book(client, customer.id, party_size=7)

        assert response.status_code == 200
        assert response.json() == {
            'success': False,
            'message': 'No tables available',
            'reservation': None,
        }

    def test_second_booking_in_window_takes_next_table(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        first = _book(client, customer.id)
        second = _book(client, customer.id, when=DINNER + timedelta(minutes=90))
        third = _book(client, customer.id, when=DINNER + timedelta(minutes=30))

        assert first.json()['reservation']['table_id'] == 2
        assert second.json()['reservation']['table_id'] == 3
        assert third.json()['success'] is False

    @pytest.mark.parametrize(
        'payload_override',
        [
            {'party_size': 0},
            {'party_size': 21},
            {'reservation_time': '2001-01-01T19:00:00'},
            {'reservation_time': f'{BOOKING_DAY.isoformat()}T08:00:00'},
            {'reservation_time': f'{BOOKING_DAY.isoformat()}T23:00:00'},
            {'customer_id': 0},
        ],
    )
    def test_invalid_details_are_rejected_with_400(
        self,
        client: TestClient,
        floor_plan: list[Table],
        customer: Customer,
        payload_override: dict,
    ) -> None:
        payload = {
            'customer_id': customer.id,
            'reservation_time': DINNER.isoformat(),
            'party_size': 2,
        }
        payload.update(payload_override)

        response = client.post(RESERVATIONS_URL, json=payload)

        assert response.status_code == 400
        assert 'Invalid reservation details' in response.json()['detail']

    def test_malformed_body_is_rejected_with_400(self, client: TestClient) -> None:
        response = client.post(RESERVATIONS_URL, json={'party_size': 'many'})

        assert response.status_code == 400


@pytest.mark.integration
class TestModifyReservation:
    def test_owner_can_reschedule_onto_own_slot(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        """
        GIVEN: The only 4-top is held by this reservation at 19:00
        WHEN: The owner moves it 30 minutes later
        THEN: The reservation's own booking does not block the move
        """
        reservation_id = _book(client, customer.id).json()['reservation']['id']

        response = client.put(
            f'{RESERVATIONS_URL}/{reservation_id}',
            json={
                'customer_id': customer.id,
                'reservation_time': (DINNER + timedelta(minutes=30)).isoformat(),
                'party_size': 4,
                'special_requests': None,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body['success'] is True
        assert body['message'] == 'Reservation updated successfully'
        assert body['reservation']['table_id'] == 2
        assert body['reservation']['party_size'] == 4
        assert body['reservation']['special_requests'] is None

    def test_other_customer_gets_403(
        self,
        client: TestClient,
        floor_plan: list[Table],
        customer: Customer,
        other_customer: Customer,
    ) -> None:
        reservation_id = _book(client, customer.id).json()['reservation']['id']

        response = client.put(
            f'{RESERVATIONS_URL}/{reservation_id}',
            json={
                'customer_id': other_customer.id,
                'reservation_time': DINNER.isoformat(),
                'party_size': 2,
            },
        )

        assert response.status_code == 403
        assert response.json() == {'detail': 'Unauthorized'}

    def test_unknown_reservation_gets_404(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        response = client.put(
            f'{RESERVATIONS_URL}/999',
            json={
                'customer_id': customer.id,
                'reservation_time': DINNER.isoformat(),
                'party_size': 2,
            },
        )

        assert response.status_code == 404
        assert response.json() == {'detail': 'Reservation not found'}

    def test_no_room_at_new_time_leaves_reservation_unchanged(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        reservation_id = _book(client, customer.id, party_size=2).json()['reservation']['id']

        response = client.put(
            f'{RESERVATIONS_URL}/{reservation_id}',
            json={
                'customer_id': customer.id,
                'reservation_time': DINNER.isoformat(),
                'party_size': 9,
            },
        )

        assert response.status_code == 200
        assert response.json()['success'] is False
        assert response.json()['message'] == 'No tables available for requested time'

        listed = client.get(f'/api/customer/{customer.id}/reservations').json()
        assert listed[0]['party_size'] == 2


@pytest.mark.integration
class TestCancelReservation:
    def test_cancel_twice_succeeds_and_status_is_cancelled(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        reservation_id = _book(client, customer.id).json()['reservation']['id']

        for _ in range(2):
            response = client.delete(
                f'{RESERVATIONS_URL}/{reservation_id}', params={'customer_id': customer.id}
            )
            assert response.status_code == 200
            assert response.json() == {
                'success': True,
                'message': 'Reservation cancelled successfully',
                'reservation': None,
            }

        listed = client.get(f'/api/customer/{customer.id}/reservations').json()
        assert listed[0]['status'] == 'CANCELLED'

    def test_cancelled_booking_frees_the_table(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        reservation_id = _book(client, customer.id).json()['reservation']['id']
        client.delete(f'{RESERVATIONS_URL}/{reservation_id}', params={'customer_id': customer.id})

        rebooked = _book(client, customer.id)

        assert rebooked.json()['reservation']['table_id'] == 2

    def test_cancel_by_other_customer_gets_403(
        self,
        client: TestClient,
        floor_plan: list[Table],
        customer: Customer,
        other_customer: Customer,
    ) -> None:
        reservation_id = _book(client, customer.id).json()['reservation']['id']

        response = client.delete(
            f'{RESERVATIONS_URL}/{reservation_id}', params={'customer_id': other_customer.id}
        )

        assert response.status_code == 403

    def test_cancel_unknown_reservation_gets_404(
        self, client: TestClient, customer: Customer
    ) -> None:
        response = client.delete(f'{RESERVATIONS_URL}/999', params={'customer_id': customer.id})

        assert response.status_code == 404


@pytest.mark.integration
class TestCustomerReservations:
    def test_lists_newest_first(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        earlier = _book(client, customer.id, when=DINNER - timedelta(days=1)).json()
        later = _book(client, customer.id).json()

        response = client.get(f'/api/customer/{customer.id}/reservations')

        assert response.status_code == 200
        assert [r['id'] for r in response.json()] == [
            later['reservation']['id'],
            earlier['reservation']['id'],
        ]

    def test_unknown_customer_gets_empty_list(self, client: TestClient) -> None:
        response = client.get('/api/customer/4242/reservations')

        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.integration
class TestAvailability:
    def test_thirteen_hourly_slots(
        self, client: TestClient, floor_plan: list[Table], customer: Customer
    ) -> None:
        _book(client, customer.id)
        _book(client, customer.id, when=DINNER + timedelta(minutes=30))

        response = client.get(
            '/api/availability', params={'date': BOOKING_DAY.isoformat(), 'party_size': 3}
        )

        assert response.status_code == 200
        slots = response.json()
        assert len(slots) == 13
        assert slots[0]['time'] == f'{BOOKING_DAY.isoformat()}T09:00:00'
        assert slots[0] == {
            'time': f'{BOOKING_DAY.isoformat()}T09:00:00',
            'available': True,
            'table_number': 2,
        }
        by_hour = {datetime.fromisoformat(slot['time']).hour: slot for slot in slots}
        assert by_hour[19]['available'] is False
        assert by_hour[19]['table_number'] is None

    def test_party_larger_than_every_table_gets_thirteen_unavailable_slots(
        self, client: TestClient, floor_plan: list[Table]
    ) -> None:
        response = client.get(
            '/api/availability', params={'date': BOOKING_DAY.isoformat(), 'party_size': 25}
        )

        assert response.status_code == 200
        slots = response.json()
        assert len(slots) == 13
        assert all(slot['available'] is False for slot in slots)
        assert all(slot['table_number'] is None for slot in slots)

    @pytest.mark.parametrize('party_size', [0, -3])
    def test_non_positive_party_size_is_400(self, client: TestClient, party_size: int) -> None:
        response = client.get(
            '/api/availability',
            params={'date': BOOKING_DAY.isoformat(), 'party_size': party_size},
        )

        assert response.status_code == 400

    def test_missing_date_is_400(self, client: TestClient) -> None:
        response = client.get('/api/availability', params={'party_size': 2})

        assert response.status_code == 400
