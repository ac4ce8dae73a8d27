"""Shared fixtures for formula-y tests."""

from dataclasses import dataclass
from typing import Optional

import pytest
from pydantic import BaseModel

from formula_y import config as config_module
from formula_y import tracing
from formula_y.builder import compile_form
from formula_y.config import FormulaConfig


class Signup(BaseModel):
    email: str
    agree_to_terms: bool


class Preferences(BaseModel):
    name: str | None = None
    subscribe: bool | None = None


@dataclass
class Profile:
    name: Optional[str]
    email: str
    agree_to_terms: bool
    subscribe_to_updates: Optional[bool]


class Submissions(list):
    """Submit consumer that remembers every record it receives."""

    def __call__(self, record):
        self.append(record)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Give every test default settings, independent of the environment."""
    monkeypatch.setattr(config_module, "config", FormulaConfig())
    yield config_module.config


@pytest.fixture(autouse=True)
def no_tracing():
    tracing.shutdown_tracing()
    yield
    tracing.shutdown_tracing()


@pytest.fixture
def submissions():
    return Submissions()


@pytest.fixture
def signup_form():
    return compile_form(Signup)


@pytest.fixture
def preferences_form():
    return compile_form(Preferences)


@pytest.fixture
def profile_form():
    return compile_form(Profile)
