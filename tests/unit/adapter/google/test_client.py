"""Unit tests for the Google OAuth client."""

from unittest.mock import AsyncMock, patch
from urllib.parse import parse_qs, urlparse

import pytest

from wire.adapter.google.client import (
    GoogleOAuthError,
    RealGoogleOAuthClient,
    userinfo_to_profile,
)
from wire.domain.error import MissingContactAddressError
from wire.domain.service import CredentialValidator
from wire.domain.value import AuthProvider


@pytest.fixture
def client() -> RealGoogleOAuthClient:
    return RealGoogleOAuthClient(
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="http://localhost:8000/auth/callback/google",
        scopes=["openid", "email", "profile"],
    )


class TestUserinfoToProfile:
    def test_maps_openid_claims(self):
        profile = userinfo_to_profile(
            {
                "sub": "1098",
                "name": "Sokha Chan",
                "email": "sokha@example.com",
                "email_verified": True,
                "picture": "https://lh3.googleusercontent.com/a/x",
            }
        )

        assert profile == {
            "id": "1098",
            "displayName": "Sokha Chan",
            "emails": [{"value": "sokha@example.com", "verified": True}],
            "photos": [{"value": "https://lh3.googleusercontent.com/a/x"}],
        }

    def test_unverified_email_is_flagged(self):
        profile = userinfo_to_profile({"sub": "1", "email": "x@example.com"})
        assert profile["emails"] == [{"value": "x@example.com", "verified": False}]

    @pytest.mark.parametrize("claim", ["false", "False", 0, "yes"])
    def test_string_false_claim_is_not_verified(self, claim):
        profile = userinfo_to_profile(
            {"sub": "1", "email": "x@example.com", "email_verified": claim}
        )

        assert profile["emails"][0]["verified"] is False
        with pytest.raises(MissingContactAddressError):
            CredentialValidator().validate(AuthProvider.GOOGLE, profile)

    def test_string_true_claim_is_verified(self):
        profile = userinfo_to_profile(
            {"sub": "1", "email": "x@example.com", "email_verified": "true"}
        )
        assert profile["emails"][0]["verified"] is True

    def test_no_email_claim(self):
        profile = userinfo_to_profile({"sub": "1"})
        assert profile["emails"] == []
        assert profile["photos"] == []


class TestRealGoogleOAuthClient:
    @pytest.mark.asyncio
    async def test_authorization_url_carries_pkce_and_state(self, client):
        url = await client.initiate_authorization("state-1")

        parsed = urlparse(url)
        params = parse_qs(parsed.query)
        assert parsed.netloc == "accounts.google.com"
        assert params["state"] == ["state-1"]
        assert params["scope"] == ["openid email profile"]
        assert params["code_challenge_method"] == ["S256"]
        assert "state-1" in client._pkce_verifiers

    @pytest.mark.asyncio
    async def test_unknown_state_is_rejected(self, client):
        with pytest.raises(GoogleOAuthError):
            await client.complete_authorization("code", "never-issued")

    @pytest.mark.asyncio
    async def test_complete_authorization_returns_profile(self, client):
        await client.initiate_authorization("state-1")

        with (
            patch.object(
                client, "_exchange_code_for_token", AsyncMock(return_value="token")
            ) as exchange,
            patch.object(
                client,
                "_get_user_info",
                AsyncMock(
                    return_value={
                        "sub": "1098",
                        "name": "Dara",
                        "email": "dara@example.com",
                        "email_verified": True,
                    }
                ),
            ) as user_info,
        ):
            profile = await client.complete_authorization("code", "state-1")

        exchange.assert_awaited_once()
        assert exchange.await_args.args[0] == "code"
        user_info.assert_awaited_once_with("token")
        assert profile["id"] == "1098"
        assert profile["emails"][0]["value"] == "dara@example.com"

    @pytest.mark.asyncio
    async def test_state_is_single_use(self, client):
        await client.initiate_authorization("state-1")

        with (
            patch.object(
                client, "_exchange_code_for_token", AsyncMock(return_value="token")
            ),
            patch.object(client, "_get_user_info", AsyncMock(return_value={"sub": "1"})),
        ):
            await client.complete_authorization("code", "state-1")
            with pytest.raises(GoogleOAuthError):
                await client.complete_authorization("code", "state-1")
