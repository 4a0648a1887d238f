# File: tests/test_config.py

import pytest

from app.core.config import Settings


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://u:p@db:5432/app?sslmode=disable", "postgresql+psycopg://u:p@db:5432/app?sslmode=disable"),
        ("postgresql://u:p@db/app", "postgresql+psycopg://u:p@db/app"),
        ("postgresql+psycopg://u:p@db/app", "postgresql+psycopg://u:p@db/app"),
        ("sqlite:///./users.db", "sqlite:///./users.db"),
    ],
)
def test_database_url_uses_psycopg(url, expected):
    assert Settings(database_url=url).database_url == expected


def test_cors_lists_accept_comma_separated_strings():
    s = Settings(cors_allow_methods="GET, POST,,PUT", cors_allow_headers="Content-Type")
    assert s.cors_allow_methods == ["GET", "POST", "PUT"]
    assert s.cors_allow_headers == ["Content-Type"]


def test_defaults():
    s = Settings(database_url="sqlite://")
    assert s.api_prefix == "/api/go"
    assert s.cors_allow_origin == "*"
