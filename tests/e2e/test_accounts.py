"""End-to-end tests for account routes."""

import asyncio
from uuid import uuid4

from tests.factories import make_account
from wire.domain.value import AccessLevel, Handle


def _admin():
    return make_account("admin@x.com", "Admin", access_level=AccessLevel.ADMIN)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPublicProfile:
    def test_get_profile_by_handle(self, client, seed):
        """Should return the public profile without the contact address."""
        account = seed(make_account("sokha@x.com", "សុខា"))

        # Act
        response = client.get("/accounts/សុខា")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["account_id"] == str(account.id)
        assert data["handle"] == "សុខា"
        assert "contact_address" not in data

    def test_unknown_handle_is_404(self, client):
        response = client.get("/accounts/nobody")
        assert response.status_code == 404

    def test_handle_too_long_is_404(self, client):
        response = client.get(f"/accounts/{'x' * 51}")
        assert response.status_code == 404


class TestChangeAccessLevel:
    def test_admin_promotes_reader(self, client, seed, sign_in, repository):
        admin = seed(_admin())
        reader = seed(make_account("reader@x.com", "Reader"))
        sign_in(admin)

        # Act
        response = client.put(
            f"/accounts/{reader.id}/access-level", json={"access_level": "editor"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["access_level"] == "editor"
        stored = asyncio.run(repository.find_by_id(reader.id))
        assert stored.access_level == AccessLevel.EDITOR

    def test_without_session_is_401(self, client, seed):
        reader = seed(make_account("reader@x.com", "Reader"))

        response = client.put(
            f"/accounts/{reader.id}/access-level", json={"access_level": "admin"}
        )

        assert response.status_code == 401

    def test_non_admin_is_403(self, client, seed, sign_in, repository):
        editor = seed(
            make_account("editor@x.com", "Editor", access_level=AccessLevel.EDITOR)
        )
        reader = seed(make_account("reader@x.com", "Reader"))
        sign_in(editor)
        writes = repository.writes

        response = client.put(
            f"/accounts/{reader.id}/access-level", json={"access_level": "admin"}
        )

        assert response.status_code == 403
        assert repository.writes == writes

    def test_unknown_target_is_404(self, client, seed, sign_in):
        sign_in(seed(_admin()))

        response = client.put(
            f"/accounts/{uuid4()}/access-level", json={"access_level": "editor"}
        )

        assert response.status_code == 404

    def test_malformed_target_id_is_400(self, client, seed, sign_in):
        sign_in(seed(_admin()))

        response = client.put(
            "/accounts/not-a-uuid/access-level", json={"access_level": "editor"}
        )

        assert response.status_code == 400


class TestUpdateOwnProfile:
    def test_change_handle(self, client, seed, sign_in):
        """The new handle should resolve to the account at once."""
        account = seed(make_account("dara@x.com", "Dara"))
        sign_in(account)

        # Act
        response = client.put("/accounts/me", json={"handle": "Dara_Reads"})

        # Assert
        assert response.status_code == 200
        assert response.json()["handle"] == "Dara_Reads"
        assert client.get("/accounts/Dara_Reads").json()["account_id"] == str(
            account.id
        )
        assert client.get("/accounts/Dara").status_code == 404

    def test_taken_handle_is_409(self, client, seed, sign_in, repository):
        seed(make_account("bopha@x.com", "Bopha"))
        account = seed(make_account("dara@x.com", "Dara"))
        sign_in(account)

        response = client.put("/accounts/me", json={"handle": "Bopha"})

        assert response.status_code == 409
        stored = asyncio.run(repository.find_by_id(account.id))
        assert stored.handle == Handle("Dara")

    def test_handle_with_spaces_is_400(self, client, seed, sign_in):
        sign_in(seed(make_account("dara@x.com", "Dara")))

        response = client.put("/accounts/me", json={"handle": "Dara Reads"})

        assert response.status_code == 400

    def test_overlong_handle_is_422(self, client, seed, sign_in):
        sign_in(seed(make_account("dara@x.com", "Dara")))

        response = client.put("/accounts/me", json={"handle": "x" * 51})

        assert response.status_code == 422

    def test_without_session_is_401(self, client):
        response = client.put("/accounts/me", json={"handle": "Anyone"})
        assert response.status_code == 401
