"""End-to-end scenarios: a caller-side service built on Result values."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from easy_result import Error, Result, returns_result

pytestmark = pytest.mark.unit


class UserErrors:
    NOT_FOUND = Error("User.NotFound", "The user does not exist.")
    INACTIVE = Error("User.Inactive", "The user is not active.")


@dataclass(frozen=True)
class User:
    id: int
    name: str
    active: bool


_USERS = {
    1: User(1, "ada", active=True),
    2: User(2, "bob", active=False),
}


@returns_result
def find_user(user_id: int) -> User | Error:
    return _USERS.get(user_id) or UserErrors.NOT_FOUND


def greet(user_id: int) -> tuple[int, str]:
    """Map a lookup to an HTTP-style (status, body) pair."""
    return (
        find_user(user_id)
        .ensure(lambda user: user.active, UserErrors.INACTIVE)
        .map(lambda user: user.name.title())
        .match(
            lambda name: (200, f"Hello, {name}!"),
            lambda error: (404 if error == UserErrors.NOT_FOUND else 409, str(error)),
        )
    )


def test_scenario_active_user() -> None:
    assert greet(1) == (200, "Hello, Ada!")


def test_scenario_inactive_user() -> None:
    assert greet(2) == (409, "User.Inactive")


def test_scenario_missing_user() -> None:
    assert greet(99) == (404, "User.NotFound")


def test_scenario_command_without_payload() -> None:
    audit: list[str] = []

    def deactivate(user_id: int) -> Result[None]:
        if user_id not in _USERS:
            return Result.failure(UserErrors.NOT_FOUND)
        audit.append(f"deactivated:{user_id}")
        return Result.success()

    ok = deactivate(1).match(lambda: "deactivated", lambda e: f"err:{e}")
    missing = deactivate(7).match(lambda: "deactivated", lambda e: f"err:{e}")

    assert ok == "deactivated"
    assert missing == "err:User.NotFound"
    assert audit == ["deactivated:1"]
