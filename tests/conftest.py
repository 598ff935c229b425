"""
Pytest configuration and shared fixtures for live-validation tests.
"""

import pytest
from faker import Faker

from live_validation import Rule, RuleSet

fake = Faker()


@pytest.fixture(autouse=True)
def clean_validation_env(monkeypatch):
    """Keep settings from the developer's shell out of the tests."""
    for name in ("VALIDATION_STRICT_RULES", "VALIDATION_LOG_EVALUATIONS", "LOCALE_DEFAULT", "LOCALE_FALLBACK"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_data():
    """Provide sample field values for tests."""
    return {
        "email": fake.email(),
        "password": fake.password(length=12),
        "username": fake.user_name(),
    }


@pytest.fixture
def password_rule_set():
    return RuleSet(
        description=lambda ctx: "Must be 8+ chars",
        rules=[
            Rule(
                key="length",
                test=lambda ctx, rule_input: len(rule_input.value) >= 8,
                valid=lambda ctx: "Long enough",
                invalid=lambda ctx: "Too short",
            ),
        ],
    )
