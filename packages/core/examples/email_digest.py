"""
Dependent validation with ``flat_map``.

A digest may only be sent when

1. the user exists, and
2. the user's e-mail address has been confirmed.

The second check needs the result of the first, so the steps are chained
sequentially and only the first failure is reported.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ConfigDict

from validated_core import Validated, from_optional, invalid, valid

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

USER_MISSING_MESSAGE = "The user does not exist in the database"
EMAIL_UNCONFIRMED_MESSAGE = "The email address is not confirmed"


# ── E-mail states ────────────────────────────────────────────────────


class EmailAddress(BaseModel, ABC):
    model_config = ConfigDict(frozen=True)

    value: str

    @abstractmethod
    def fold(
        self,
        on_unconfirmed: Callable[[UnconfirmedEmail], T],
        on_confirmed: Callable[[ConfirmedEmail], T],
    ) -> T: ...


class UnconfirmedEmail(EmailAddress):
    def confirm(self, timestamp: datetime) -> ConfirmedEmail:
        return ConfirmedEmail(value=self.value, confirmed_at=timestamp)

    def fold(
        self,
        on_unconfirmed: Callable[[UnconfirmedEmail], T],
        on_confirmed: Callable[[ConfirmedEmail], T],
    ) -> T:
        return on_unconfirmed(self)


class ConfirmedEmail(EmailAddress):
    confirmed_at: datetime

    def fold(
        self,
        on_unconfirmed: Callable[[UnconfirmedEmail], T],
        on_confirmed: Callable[[ConfirmedEmail], T],
    ) -> T:
        return on_confirmed(self)


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: EmailAddress


class DigestMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    recipient: ConfirmedEmail
    subject: str


# ── Database stand-in ────────────────────────────────────────────────

DATABASE: dict[str, ContactInfo] = {
    "a": ContactInfo(
        email=UnconfirmedEmail(value="kari@example.com").confirm(
            datetime(2024, 1, 1, tzinfo=timezone.utc)
        )
    ),
    "b": ContactInfo(email=UnconfirmedEmail(value="ola@example.com")),
}


def digest_for(user_id: str, subject: str) -> Validated[DigestMessage]:
    return from_optional(DATABASE.get(user_id), USER_MISSING_MESSAGE).flat_map(
        lambda info: info.email.fold(
            lambda _unconfirmed: invalid(EMAIL_UNCONFIRMED_MESSAGE),
            lambda confirmed: valid(
                DigestMessage(recipient=confirmed, subject=subject)
            ),
        )
    )


def main() -> None:
    for user_id in ("a", "b", "c"):
        print(user_id, digest_for(user_id, "Your weekly summary"))


if __name__ == "__main__":
    main()
