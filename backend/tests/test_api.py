"""
HTTP tests for the FastAPI surface, wired to the in-memory store.

Run with: pytest tests/test_api.py -v
"""

import importlib
import json

from fastapi import FastAPI

import run_fastapi

from conftest import USER_ID
from discoverzim.domain.services.route_guard import ADMIN_DENIED_NOTICE
from discoverzim.presentation.dependencies.auth import ACCESS_NOTICE_HEADER


class TestHealth:
    def test_entry_point_serves_this_app(self):
        module_name, _, attribute = run_fastapi.APP_PATH.partition(":")

        assert isinstance(getattr(importlib.import_module(module_name), attribute), FastAPI)

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"


class TestAccessGate:
    def test_anonymous_is_redirected_to_sign_in(self, client):
        response = client.get("/cart", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/auth?next=%2Fcart"

    def test_expired_token_is_anonymous(self, client, expired_headers):
        response = client.get("/cart", headers=expired_headers, follow_redirects=False)

        assert response.status_code == 303

    def test_plain_user_is_sent_to_landing_with_one_notice(self, client, auth_headers):
        first = client.get("/admin/users", headers=auth_headers, follow_redirects=False)
        second = client.get("/admin/users", headers=auth_headers, follow_redirects=False)

        assert first.status_code == 303
        assert first.headers["location"] == "/dashboard"
        assert json.loads(first.headers[ACCESS_NOTICE_HEADER]) == ADMIN_DENIED_NOTICE.as_dict()
        assert second.status_code == 303
        assert ACCESS_NOTICE_HEADER not in second.headers

    def test_admin_renders_admin_page(self, client, admin_headers):
        response = client.get("/admin/users", headers=admin_headers)

        assert response.status_code == 200
        assert {user["id"] for user in response.json()} == {"user-1", "admin-1"}

    def test_session_endpoint(self, client, auth_headers):
        assert client.get("/auth/session").json()["phase"] == "anonymous"

        body = client.get("/auth/session", headers=auth_headers).json()
        assert body["phase"] == "authenticated"
        assert body["user_id"] == USER_ID
        assert body["is_admin"] is False

    def test_sign_out(self, client, auth_headers):
        response = client.post("/auth/sign-out", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["phase"] == "anonymous"


class TestCatalog:
    def test_featured_accommodations(self, client):
        response = client.get("/accommodations/featured")

        assert [a["name"] for a in response.json()] == ["Falls Hotel", "Safari Lodge"]

    def test_accommodation_not_found(self, client):
        response = client.get("/accommodations/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Accommodation not found"}

    def test_destination_search(self, client):
        response = client.get("/destinations", params={"q": "stone"})

        assert [d["id"] for d in response.json()] == ["dest-zimbabwe"]

    def test_cities(self, client):
        response = client.get("/cities")

        assert response.json() == {"cities": ["Harare", "Masvingo", "Victoria Falls"]}

    def test_backend_failure_is_an_empty_list(self, client, store):
        store.fail_table("events")

        response = client.get("/events")

        assert response.status_code == 200
        assert response.json() == []

    def test_destination_admin_requires_admin(self, client, auth_headers, admin_headers):
        payload = {"name": "Mana Pools", "location": "Hurungwe", "price": 40}

        denied = client.post("/destinations", json=payload, headers=auth_headers,
                             follow_redirects=False)
        created = client.post("/destinations", json=payload, headers=admin_headers)

        assert denied.status_code == 303
        assert created.status_code == 201
        assert created.json()["activities"] == []


class TestCart:
    def test_cart_round_trip(self, client, auth_headers):
        added = client.post(
            "/cart", json={"destination_id": "dest-falls", "quantity": 2}, headers=auth_headers
        )
        assert added.status_code == 201
        item_id = added.json()["id"]

        cart = client.get("/cart", headers=auth_headers).json()
        assert [item["id"] for item in cart] == [item_id]
        assert cart[0]["destinations"]["name"] == "Victoria Falls"

        removed = client.delete(f"/cart/{item_id}", headers=auth_headers)
        assert removed.json() == {"success": True}
        assert client.get("/cart", headers=auth_headers).json() == []

    def test_other_users_item_cannot_be_changed_or_removed(self, client, auth_headers, admin_headers):
        theirs = client.post(
            "/cart", json={"destination_id": "dest-falls"}, headers=admin_headers
        ).json()

        patched = client.patch(
            f"/cart/{theirs['id']}", json={"quantity": 99}, headers=auth_headers
        )
        removed = client.delete(f"/cart/{theirs['id']}", headers=auth_headers)

        assert patched.status_code == 404
        assert removed.status_code == 404
        cart = client.get("/cart", headers=admin_headers).json()
        assert [(item["id"], item["quantity"]) for item in cart] == [(theirs["id"], 1)]

    def test_cart_item_needs_a_target(self, client, auth_headers):
        response = client.post("/cart", json={"quantity": 1}, headers=auth_headers)

        assert response.status_code == 422


class TestBookingAndChat:
    def test_book_accommodation(self, client, auth_headers, store):
        response = client.post(
            "/bookings/accommodation",
            headers=auth_headers,
            json={
                "accommodation_id": "acc-hotel",
                "check_in": "2026-12-01",
                "check_out": "2026-12-04",
                "number_of_guests": 1,
                "room_type": "suite",
                "contact_name": "Rudo",
                "contact_email": "rudo@example.com",
                "contact_phone": "+263 71 000 0000",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["total_price"] == 1500  # 3 nights * 250 * 2 (suite)
        assert body["progress"]["progress"] == 100
        assert body["progress"]["title"] == "Booking Your Stay"
        assert body["booking"]["user_id"] == USER_ID

        bookings = client.get("/bookings", headers=auth_headers).json()
        assert [b["id"] for b in bookings] == [body["booking"]["id"]]

    def test_invalid_stay_is_422(self, client, auth_headers):
        response = client.post(
            "/bookings/accommodation",
            headers=auth_headers,
            json={
                "accommodation_id": "acc-hotel",
                "check_in": "2026-12-04",
                "check_out": "2026-12-01",
                "number_of_guests": 1,
                "contact_name": "Rudo",
                "contact_email": "rudo@example.com",
                "contact_phone": "1",
            },
        )

        assert response.status_code == 422
        assert "Check-out" in response.json()["error"]

    def test_chat_exchange(self, client, auth_headers, store):
        store.functions.responses["chat-assistant"] = {"message": "Visit Hwange."}

        response = client.post(
            "/chat/messages", json={"content": "Safari tips?"}, headers=auth_headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body["assistant_message"]["content"] == "Visit Hwange."

        conversation = client.get(
            f"/chat/conversations/{body['conversation_id']}", headers=auth_headers
        ).json()
        assert [m["role"] for m in conversation["messages"]] == ["user", "assistant"]


class TestItinerarySharing:
    def test_public_itinerary_readable_by_code(self, client, auth_headers):
        created = client.post(
            "/itineraries", json={"title": "Grand tour"}, headers=auth_headers
        ).json()
        client.post(
            f"/itineraries/{created['id']}/destinations",
            json={"name": "Harare"},
            headers=auth_headers,
        )
        shared = client.patch(
            f"/itineraries/{created['id']}", json={"is_public": True}, headers=auth_headers
        ).json()

        public = client.get(f"/itineraries/shared/{shared['share_code']}")

        assert public.status_code == 200
        assert public.json()["title"] == "Grand tour"
        assert [d["name"] for d in public.json()["itinerary_destinations"]] == ["Harare"]

    def test_other_users_itinerary_is_forbidden(self, client, auth_headers, admin_headers):
        created = client.post(
            "/itineraries", json={"title": "Private"}, headers=admin_headers
        ).json()

        response = client.get(f"/itineraries/{created['id']}", headers=auth_headers)

        assert response.status_code == 403


class TestNotifications:
    def test_only_own_notification_can_be_marked_read(self, client, auth_headers, store):
        store.tables["notifications"] = [
            {"id": "n-mine", "user_id": "user-1", "title": "Booked", "is_read": False},
            {"id": "n-theirs", "user_id": "admin-1", "title": "Report", "is_read": False},
        ]

        mine = client.post("/notifications/n-mine/read", headers=auth_headers)
        theirs = client.post("/notifications/n-theirs/read", headers=auth_headers)

        assert mine.status_code == 200
        assert mine.json()["is_read"] is True
        assert theirs.status_code == 404
        assert store.rows("notifications")[1]["is_read"] is False


class TestItineraryStops:
    def test_stop_of_another_itinerary_is_not_reachable(self, client, auth_headers, admin_headers):
        theirs = client.post(
            "/itineraries", json={"title": "Admin trip"}, headers=admin_headers
        ).json()
        stop = client.post(
            f"/itineraries/{theirs['id']}/destinations",
            json={"name": "Hwange"},
            headers=admin_headers,
        ).json()
        mine = client.post("/itineraries", json={"title": "My trip"}, headers=auth_headers).json()
        path = f"/itineraries/{mine['id']}/destinations/{stop['id']}"

        patched = client.patch(path, json={"name": "Elsewhere"}, headers=auth_headers)
        removed = client.delete(path, headers=auth_headers)

        assert patched.status_code == 404
        assert removed.status_code == 404
        kept = client.get(f"/itineraries/{theirs['id']}", headers=admin_headers).json()
        assert [d["name"] for d in kept["itinerary_destinations"]] == ["Hwange"]

    def test_own_stop_can_be_renamed_and_removed(self, client, auth_headers):
        mine = client.post("/itineraries", json={"title": "My trip"}, headers=auth_headers).json()
        stop = client.post(
            f"/itineraries/{mine['id']}/destinations", json={"name": "Kariba"}, headers=auth_headers
        ).json()
        path = f"/itineraries/{mine['id']}/destinations/{stop['id']}"

        renamed = client.patch(path, json={"name": "Lake Kariba"}, headers=auth_headers)
        removed = client.delete(path, headers=auth_headers)

        assert renamed.json()["name"] == "Lake Kariba"
        assert removed.json() == {"success": True}
