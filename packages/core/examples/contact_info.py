"""
Accumulating independent field checks into a ContactInfo.

The e-mail is checked with pydantic's ``EmailStr`` through the pydantic
adapter; the phone number must contain at least one digit.
"""

from __future__ import annotations

import string

from pydantic import BaseModel, ConfigDict, EmailStr

from validated_core import Validated, accum, validate
from validated_core.adapters.pydantic import validate_value

EMAIL_FORMAT_MESSAGE = "Wrong email format"
PHONE_FORMAT_MESSAGE = "Wrong input format, there must be at least one digit"


class EmailAddress(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str

    @classmethod
    def of(cls, raw: str) -> Validated[EmailAddress]:
        return validate_value(EmailStr, raw, message=EMAIL_FORMAT_MESSAGE).map(
            lambda email: cls(value=email)
        )


class PhoneNumber(BaseModel):
    model_config = ConfigDict(frozen=True)

    digits: tuple[int, ...]

    @classmethod
    def of(cls, raw: str) -> Validated[PhoneNumber]:
        digits = tuple(int(c) for c in raw if c in string.digits)
        return validate(digits, bool, PHONE_FORMAT_MESSAGE).map(
            lambda d: cls(digits=d)
        )


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: EmailAddress
    phone: PhoneNumber


def contact_info(email: str, phone: str) -> Validated[ContactInfo]:
    return accum(
        EmailAddress.of(email),
        PhoneNumber.of(phone),
        lambda e, p: ContactInfo(email=e, phone=p),
    )


def describe(result: Validated[ContactInfo]) -> str:
    return result.fold(
        lambda messages: "Rejected: " + "; ".join(messages),
        lambda info: f"Accepted: {info.email.value} / {len(info.phone.digits)} digits",
    )


def main() -> None:
    print(describe(contact_info("ola.nordmann@example.com", "12345678")))
    print(describe(contact_info("ola.nordmann_example.com", "abcdefghij")))


if __name__ == "__main__":
    main()
