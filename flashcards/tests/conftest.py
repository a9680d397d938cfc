from datetime import datetime, timezone

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from flashcards.services.cards import create_deck

User = get_user_model()

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def user(db):
    return User.objects.create_user(username="learner")


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username="someone-else")


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.credentials(HTTP_X_USER_NAME=user.username)
    return client


@pytest.fixture
def deck(user):
    return create_deck(user, "Spanish")
