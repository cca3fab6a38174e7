"""User data model."""

from dataclasses import dataclass


@dataclass
class User:
    """Represents a signed-up user and their profile."""

    id: str | None
    email: str
    password: str
    first_name: str
    last_name: str
    address1: str
    city: str
    state: str
    postal_code: str
    date_of_birth: str
    ssn: str
    payment_customer_id: str
    payment_customer_url: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
