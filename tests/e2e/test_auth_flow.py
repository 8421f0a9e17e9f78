"""End-to-end tests for the sign-in flow."""

import asyncio
from urllib.parse import parse_qs, urlparse

from tests.factories import google_payload, make_account
from wire.domain.value import AccessLevel, ContactAddress, Handle


def _error_code(response) -> str:
    query = parse_qs(urlparse(response.headers["location"]).query)
    return query["error"][0]


class TestInitiateLogin:
    def test_returns_google_consent_url(self, client):
        """Should return the provider's authorization URL."""
        # Act
        response = client.post("/auth/login", json={"provider": "google"})

        # Assert
        assert response.status_code == 200
        url = response.json()["authorization_url"]
        assert url.startswith("https://accounts.google.com/")
        assert "state=" in url

    def test_unknown_provider_is_rejected(self, client):
        response = client.post("/auth/login", json={"provider": "myspace"})
        assert response.status_code == 422


class TestGoogleCallback:
    def test_first_sign_in_creates_account_and_sets_cookie(
        self, client, repository, settings
    ):
        """Callback should provision the account, set the cookie and redirect."""
        # Act
        response = client.get(
            "/auth/callback/google",
            params={"code": "4/0Ad-code", "state": "state-1"},
            follow_redirects=False,
        )

        # Assert
        assert response.status_code == 302
        assert response.headers["location"] == settings.api.frontend_url
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{settings.auth.cookie_name}=")
        assert "httponly" in set_cookie.lower()

        accounts = repository.all()
        assert len(accounts) == 1
        assert accounts[0].contact_address == ContactAddress("mock.reader@example.com")
        assert accounts[0].handle == Handle("Mock_Reader")
        assert accounts[0].last_login_at is not None

    def test_session_cookie_authenticates_me(self, client):
        """The cookie set by the callback should identify the new account."""
        client.get(
            "/auth/callback/google",
            params={"code": "4/0Ad-code", "state": "state-1"},
            follow_redirects=False,
        )

        # Act
        response = client.get("/auth/me")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is True
        assert data["account"]["handle"] == "Mock_Reader"
        assert data["account"]["contact_address"] == "mock.reader@example.com"
        assert data["account"]["access_level"] == "user"

    def test_returning_reader_is_matched_not_duplicated(
        self, client, repository, seed
    ):
        """A second sign-in with the same address should reuse the account."""
        existing = seed(make_account("mock.reader@example.com", "Reader"))

        # Act
        response = client.get(
            "/auth/callback/google",
            params={"code": "c", "state": "s"},
            follow_redirects=False,
        )

        # Assert
        assert response.status_code == 302
        accounts = repository.all()
        assert [a.id for a in accounts] == [existing.id]
        assert accounts[0].provider_user_id == "mockgoogle123"
        assert accounts[0].avatar_url == "https://example.com/avatar.jpg"

    def test_missing_email_redirects_with_error(
        self, client, repository, google_client, settings
    ):
        google_client.profile = google_payload(email=None)

        response = client.get(
            "/auth/callback/google",
            params={"code": "c", "state": "s"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"].startswith(
            f"{settings.api.frontend_url}/auth/error"
        )
        assert _error_code(response) == "missing_email"
        assert "set-cookie" not in response.headers
        assert repository.writes == 0

    def test_consent_denied_redirects_with_error(self, client, repository):
        response = client.get(
            "/auth/callback/google",
            params={"error": "access_denied"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert _error_code(response) == "auth_failed"
        assert repository.writes == 0


class TestSession:
    def test_logout_clears_cookie(self, client, settings):
        """Should expire the session cookie."""
        # Act
        response = client.post("/auth/logout")

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Successfully logged out",
        }
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{settings.auth.cookie_name}=")
        assert "Max-Age=0" in set_cookie

    def test_me_without_cookie(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "account": None}

    def test_me_with_garbage_cookie(self, client, settings):
        client.cookies.set(settings.auth.cookie_name, "not-a-jwt")

        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json()["authenticated"] is False

    def test_me_for_deleted_account(self, client, sign_in):
        """A valid token for an account no longer stored is not a session."""
        sign_in(make_account("gone@x.com", "Gone"))

        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json()["authenticated"] is False

    def test_me_reads_access_level_from_store(self, client, seed, sign_in, repository):
        """A promotion shows up without signing in again."""
        account = seed(make_account("editor@x.com", "Editor"))
        sign_in(account)
        promoted = account.model_copy(update={"access_level": AccessLevel.EDITOR})
        asyncio.run(repository.save(promoted))

        response = client.get("/auth/me")

        assert response.json()["account"]["access_level"] == "editor"
