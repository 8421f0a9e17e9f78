"""Fixtures for HTTP tests against the FastAPI app."""

import asyncio

import pytest
from dishka import Provider, Scope, provide
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from tests.di import build_test_container
from wire.adapter.google.client import GoogleOAuthClient, MockGoogleOAuthClient
from wire.config import Settings
from wire.domain.model import Account
from wire.domain.repository import AccountRepository
from wire.domain.service import JWTService
from wire.interface.api.app import create_app
from wire.persistence.repository.inmemory import InMemoryAccountRepository


class SharedStateProvider(Provider):
    """Serves one store and one Google client to every request."""

    scope = Scope.APP

    def __init__(
        self,
        repository: InMemoryAccountRepository,
        google_client: MockGoogleOAuthClient,
    ) -> None:
        super().__init__()
        self.repository = repository
        self.google_client = google_client

    @provide
    def get_account_repository(self) -> AccountRepository:
        return self.repository

    @provide
    def get_google_oauth_client(self) -> GoogleOAuthClient:
        return self.google_client


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def google_client() -> MockGoogleOAuthClient:
    return MockGoogleOAuthClient()


@pytest.fixture
def client(repository, google_client):
    """Test client for an app wired to the mocks above."""
    container = build_test_container(
        extra_providers=(
            SharedStateProvider(repository, google_client),
            FastapiProvider(),
        )
    )
    with TestClient(create_app(container)) as test_client:
        yield test_client
    asyncio.run(container.close())


@pytest.fixture
def seed(repository):
    """Store an account before the test's requests run."""

    def _seed(account: Account) -> Account:
        return asyncio.run(repository.create(account))

    return _seed


@pytest.fixture
def sign_in(client, settings):
    """Give the client a session cookie for an account."""
    jwt_service = JWTService(settings.auth)

    def _sign_in(account: Account) -> None:
        client.cookies.set(settings.auth.cookie_name, jwt_service.create_token(account))

    return _sign_in
