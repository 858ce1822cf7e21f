"""
Building a User from a settings store.

Both fields are looked up independently and combined with ``accum``, so a
missing username and an out-of-range age are reported together instead of
one at a time.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from validated_core import Settings, Validated, accum, validate

AGE_RANGE_MESSAGE = "The age must be in range [0,150)"


# ── Domain Types ─────────────────────────────────────────────────────


class Age(BaseModel):
    """An age in years. Only obtainable through :meth:`of`."""

    model_config = ConfigDict(frozen=True)

    value: int

    @classmethod
    def of(cls, value: int) -> Validated[Age]:
        return validate(value, lambda v: 0 <= v < 150, AGE_RANGE_MESSAGE).map(
            lambda v: cls(value=v)
        )


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    age: Age


UNKNOWN_USER = User(username="unknown", age=Age(value=0))


def user_from_settings(settings: Settings) -> Validated[User]:
    username = settings.get_as_str("username")
    age = settings.get_as_int("age").flat_map(Age.of)
    return accum(username, age, lambda name, a: User(username=name, age=a))


# ── Run ──────────────────────────────────────────────────────────────


def main() -> None:
    settings = Settings.empty().with_value("age", 235)

    # Invalid with two messages: no username, age out of range
    print(user_from_settings(settings))

    settings = settings.with_value("age", 35).with_value("username", "Ola")
    user = user_from_settings(settings)
    print(user)

    print(user.or_else(UNKNOWN_USER))


if __name__ == "__main__":
    main()
