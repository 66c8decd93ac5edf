"""
HTTP tests against the FastAPI app in in-memory mode

The container is reset per test (see conftest.client), so every test starts
from the demo catalogue: 5 users, 3 venues, 3 events, 5 bookings.
"""

from fastapi.testclient import TestClient
import pytest


VALID_CARD = '4111-1111-1111-1111'


def _booking_payload(**overrides) -> dict:
    payload = {
        'user_id': 5,
        'event_id': 2,
        'number_of_seats': 2,
        'credit_card_token': VALID_CARD,
        'total_amount': '100.00',
    }
    payload.update(overrides)
    return payload


@pytest.mark.integration
class TestBookingApi:
    def test_create_booking(self, client: TestClient):
        # Act
        response = client.post('/api/booking', json=_booking_payload())

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body['success'] is True
        assert body['message'] == 'Booking created successfully'
        assert body['booking_id'] == 6
        assert body['payment_id']
        assert response.headers['location'] == '/api/booking/6'

        stored = client.get('/api/booking/6').json()
        assert stored['payment_status'] == 'paid'
        assert stored['venue_id'] == 2
        assert stored['payment_id'] == body['payment_id']

    def test_rejected_card_returns_400_and_stores_nothing(self, client: TestClient):
        response = client.post('/api/booking', json=_booking_payload(credit_card_token='0000'))

        assert response.status_code == 400
        assert response.json()['success'] is False
        assert 'rejected' in response.json()['message']
        assert len(client.get('/api/booking').json()) == 5

    def test_blank_card_is_a_payment_failure(self, client: TestClient):
        response = client.post('/api/booking', json=_booking_payload(credit_card_token=''))

        assert response.status_code == 400
        assert response.json()['message'] == (
            'Payment processing failed: Credit card number is required'
        )

    def test_unknown_user(self, client: TestClient):
        response = client.post('/api/booking', json=_booking_payload(user_id=999))

        assert response.status_code == 400
        assert response.json()['message'] == 'User with ID 999 not found'

    def test_section_booking(self, client: TestClient):
        response = client.post(
            '/api/booking',
            json=_booking_payload(event_id=3, number_of_seats=98, section_identifier='GoldenCircle'),
        )
        over = client.post(
            '/api/booking',
            json=_booking_payload(event_id=3, number_of_seats=1, section_identifier='GoldenCircle'),
        )

        assert response.status_code == 201
        assert over.status_code == 400
        assert over.json()['message'] == (
            "Insufficient capacity in section 'GoldenCircle'. Requested: 1, Available: 0"
        )

    def test_section_event_without_section(self, client: TestClient):
        response = client.post('/api/booking', json=_booking_payload(event_id=3))

        assert response.status_code == 400
        assert 'Insufficient capacity' in response.json()['message']

    def test_malformed_body_is_400(self, client: TestClient):
        response = client.post('/api/booking', json={'user_id': 'abc'})

        assert response.status_code == 400

    def test_get_missing_booking_is_404(self, client: TestClient):
        response = client.get('/api/booking/999')

        assert response.status_code == 404
        assert response.json() == {'detail': 'Booking with ID 999 not found'}

    def test_ledger_queries(self, client: TestClient):
        assert [b['id'] for b in client.get('/api/booking/user/1').json()] == [1, 4]
        assert [b['id'] for b in client.get('/api/booking/venue/3').json()] == [4, 5]
        assert [b['id'] for b in client.get('/api/booking/venue/3/paid-users').json()] == [4]
        assert client.get('/api/booking/venue/1/users-without-bookings').json() == [3, 4]

    def test_refund(self, client: TestClient):
        first = client.post('/api/booking/1/refund')
        second = client.post('/api/booking/1/refund')

        assert first.status_code == 200
        assert first.json()['payment_status'] == 'refunded'
        assert second.status_code == 400
        assert second.json() == {'detail': 'Booking already refunded'}

    def test_delete(self, client: TestClient):
        assert client.delete('/api/booking/5').status_code == 204
        assert client.get('/api/booking/5').status_code == 404
        assert client.delete('/api/booking/5').status_code == 404


@pytest.mark.integration
class TestCatalogApi:
    def test_future_events_with_availability(self, client: TestClient):
        response = client.get('/api/event/future-with-availability')

        assert response.status_code == 200
        rows = {row['event_id']: row for row in response.json()}
        assert rows[1]['available_seats'] == 4994
        assert rows[3]['seating_type_name'] == 'Section Reserved Seating'

    def test_create_event_with_section_policy(self, client: TestClient):
        response = client.post(
            '/api/event',
            json={
                'name': 'Blues Night',
                'venue_id': 3,
                'event_date': '2028-03-01T20:00:00Z',
                'seating_policy': {'type': 'SectionReserved', 'sections': {'Front': 50}},
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body['seating_policy'] == {'type': 'SectionReserved', 'sections': {'Front': 50}}
        assert body['section_info'] == 'Sections: Front: 50 seats'
        assert body['is_future_event'] is True

    def test_create_event_for_missing_venue(self, client: TestClient):
        response = client.post(
            '/api/event',
            json={'name': 'Nowhere', 'venue_id': 99, 'event_date': '2028-03-01T20:00:00Z'},
        )

        assert response.status_code == 400
        assert response.json() == {'detail': 'Venue with ID 99 not found'}

    def test_user_crud(self, client: TestClient):
        created = client.post(
            '/api/user',
            json={'first_name': 'Ada', 'last_name': 'Lovelace', 'email': 'ada@example.com'},
        )
        duplicate = client.post(
            '/api/user',
            json={'first_name': 'Ada', 'last_name': 'L', 'email': 'ada@example.com'},
        )

        assert created.status_code == 201
        assert created.json()['full_name'] == 'Ada Lovelace'
        assert duplicate.status_code == 409
        assert client.delete(f'/api/user/{created.json()["id"]}').status_code == 204

    def test_invalid_email_is_400(self, client: TestClient):
        response = client.post(
            '/api/user', json={'first_name': 'A', 'last_name': 'B', 'email': 'not-an-email'}
        )

        assert response.status_code == 400

    def test_venue_crud(self, client: TestClient):
        created = client.post(
            '/api/venue',
            json={'name': 'Small Room', 'location': '1 Side St', 'total_capacity': 40},
        )
        venue_id = created.json()['id']
        updated = client.put(
            f'/api/venue/{venue_id}',
            json={'name': 'Small Room', 'location': '1 Side St', 'total_capacity': 60},
        )

        assert created.status_code == 201
        assert updated.json()['total_capacity'] == 60
        assert client.get('/api/venue/999').status_code == 404


@pytest.mark.integration
class TestPlatformEndpoints:
    def test_health(self, client: TestClient):
        assert client.get('/health').json()['status'] == 'healthy'

    def test_metrics_exposes_booking_counters(self, client: TestClient):
        client.post('/api/booking', json=_booking_payload())

        body = client.get('/metrics').text

        assert 'booking_requests_total' in body
        assert 'booking_payment_duration_seconds' in body
