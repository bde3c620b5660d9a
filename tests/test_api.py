"""End-to-end tests of the HTTP surface."""

from tests.utils import API, set_created_at, statuses, user_count, user_payload


class TestRegister:

    def test_register_returns_public_fields_and_token(self, client):
        response = client.post(f"{API}/register", json=user_payload(latitude=51.5237, longitude=-0.1585))
        assert response.status_code == 200
        body = response.json()
        assert body["status_code"] == 200
        assert body["message"] == "User registered successfully"
        data = body["data"]
        assert data["name"] == "Jane Doe"
        assert data["email"] == "jane@example.com"
        assert data["address"] == "221B Baker Street, London"
        assert data["latitude"] == 51.5237
        assert data["longitude"] == -0.1585
        assert data["status"] == "active"
        assert len(data["register_at"]) == len("2024-07-01 09:30:00")
        assert data["token"]
        assert "password" not in data

    def test_token_from_registration_authenticates(self, client, register):
        token = register()["token"]
        response = client.post(f"{API}/toggle-statuses", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_duplicate_email_is_422(self, client, register):
        register()
        response = client.post(f"{API}/register", json=user_payload(name="Other"))
        assert response.status_code == 422
        body = response.json()
        assert body["status_code"] == 422
        assert body["errors"] == {"email": ["The email has already been taken."]}
        assert user_count() == 1

    def test_invalid_fields_are_itemized(self, client):
        response = client.post(
            f"{API}/register",
            json=user_payload(email="not-an-email", password="123", latitude=91, status="banned"),
        )
        assert response.status_code == 422
        errors = response.json()["errors"]
        assert {"email", "password", "latitude", "status"} <= set(errors)
        assert user_count() == 0

    def test_missing_fields(self, client):
        response = client.post(f"{API}/register", json={"name": "Jane"})
        assert response.status_code == 422
        assert {"email", "password", "address", "latitude", "longitude"} <= set(response.json()["errors"])

    def test_blank_name_and_address_are_422(self, client):
        response = client.post(f"{API}/register", json=user_payload(name="   ", address="\t "))
        assert response.status_code == 422
        assert {"name", "address"} <= set(response.json()["errors"])
        assert user_count() == 0

    def test_name_and_address_are_stripped(self, client):
        response = client.post(f"{API}/register", json=user_payload(name="  Jane Doe ", address=" London "))
        data = response.json()["data"]
        assert (data["name"], data["address"]) == ("Jane Doe", "London")

    def test_duplicate_email_differing_in_case_is_422(self, client, register):
        register(email="case@example.com")
        response = client.post(f"{API}/register", json=user_payload(email="Case@Example.COM"))
        assert response.status_code == 422
        assert response.json()["errors"] == {"email": ["The email has already been taken."]}
        assert user_count() == 1


class TestLogin:

    def test_login_issues_token(self, client, register):
        register()
        response = client.post(f"{API}/login", json={"email": "jane@example.com", "password": "secret123"})
        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert client.post(
            f"{API}/toggle-statuses", headers={"Authorization": f"Bearer {body['token']}"}
        ).status_code == 200

    def test_wrong_password_is_401(self, client, register):
        register()
        response = client.post(f"{API}/login", json={"email": "jane@example.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"status_code": 401, "message": "Invalid credentials"}

    def test_login_ignores_email_case(self, client, register):
        register(email="jane@example.com")
        response = client.post(f"{API}/login", json={"email": "JANE@example.com", "password": "secret123"})
        assert response.status_code == 200


class TestToggleStatuses:

    def test_requires_authentication(self, client):
        response = client.post(f"{API}/toggle-statuses")
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_flips_all_and_twice_restores(self, client, register, auth_headers):
        register(email="off@example.com", status="inactive")
        before = statuses()

        response = client.post(f"{API}/toggle-statuses", headers=auth_headers)
        assert response.json() == {"status_code": 200, "message": "All user statuses toggled successfully"}
        assert statuses() == {"caller@example.com": "inactive", "off@example.com": "active"}

        client.post(f"{API}/toggle-statuses", headers=auth_headers)
        assert statuses() == before


class TestGetDistance:

    def test_distance_from_registered_location(self, client, auth_headers):
        response = client.post(
            f"{API}/get-distance",
            json={"destination_latitude": 0, "destination_longitude": 1},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json() == {
            "status_code": 200,
            "message": "Distance calculated successfully",
            "distance": "111.19 km",
        }

    def test_same_point(self, client, auth_headers):
        response = client.post(
            f"{API}/get-distance",
            json={"destination_latitude": 0, "destination_longitude": 0},
            headers=auth_headers,
        )
        assert response.json()["distance"] == "0.0 km"

    def test_unauthenticated_is_401(self, client):
        response = client.post(
            f"{API}/get-distance",
            json={"destination_latitude": 0, "destination_longitude": 1},
        )
        assert response.status_code == 401
        assert response.json() == {"status_code": 401, "message": "Unauthorized - Please log in"}

    def test_invalid_token_is_401(self, client):
        response = client.post(
            f"{API}/get-distance",
            json={"destination_latitude": 0, "destination_longitude": 1},
            headers={"Authorization": "Bearer forged.token.value"},
        )
        assert response.status_code == 401

    def test_token_of_unknown_user_is_401(self, client):
        from geo_user_api.app.core.security import create_access_token

        token = create_access_token({"sub": "ghost@example.com"})
        response = client.post(
            f"{API}/get-distance",
            json={"destination_latitude": 0, "destination_longitude": 1},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "User no longer exists"

    def test_out_of_range_destination_is_422(self, client, auth_headers):
        response = client.post(
            f"{API}/get-distance",
            json={"destination_latitude": 100, "destination_longitude": 181},
            headers=auth_headers,
        )
        assert response.status_code == 422
        assert set(response.json()["errors"]) == {"destination_latitude", "destination_longitude"}

    def test_missing_destination_is_422(self, client, auth_headers):
        response = client.post(f"{API}/get-distance", json={}, headers=auth_headers)
        assert response.status_code == 422


class TestListUsers:

    def test_groups_users_by_requested_days(self, client, register, auth_headers):
        register(email="mon@example.com", name="Mon")
        set_created_at("caller@example.com", "2024-07-07 10:00:00")  # Sunday
        set_created_at("mon@example.com", "2024-07-01 10:00:00")  # Monday

        response = client.post(f"{API}/list-users", json={"week_number": [1, 0, 4]}, headers=auth_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Users listed successfully"
        assert body["data"] == {
            "Monday": [{"name": "Mon", "email": "mon@example.com"}],
            "Sunday": [{"name": "Jane Doe", "email": "caller@example.com"}],
            "Thursday": [],
        }

    def test_out_of_range_day_is_422(self, client, auth_headers):
        response = client.post(f"{API}/list-users", json={"week_number": [0, 7]}, headers=auth_headers)
        assert response.status_code == 422
        assert "week_number.1" in response.json()["errors"]

    def test_empty_or_missing_days_is_422(self, client, auth_headers):
        assert client.post(f"{API}/list-users", json={"week_number": []}, headers=auth_headers).status_code == 422
        assert client.post(f"{API}/list-users", json={}, headers=auth_headers).status_code == 422

    def test_boolean_day_is_422(self, client, auth_headers):
        response = client.post(f"{API}/list-users", json={"week_number": [True]}, headers=auth_headers)
        assert response.status_code == 422
        assert "week_number.0" in response.json()["errors"]

    def test_requires_authentication(self, client):
        response = client.post(f"{API}/list-users", json={"week_number": [0]})
        assert response.status_code == 401
