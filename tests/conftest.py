"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from badgeboard import create_app


@pytest.fixture
def badges_file(tmp_path):
    return tmp_path / "badges.json"


@pytest.fixture
def app(badges_file):
    app = create_app(
        {
            "TESTING": True,
            "BADGES_FILE": str(badges_file),
            "IMGBB_API_KEY": "test-key",
        }
    )
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["badge_store"]
