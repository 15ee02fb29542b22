"""User aggregate root: an account that can sign in and own a cart and orders."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.domain import storefront
from storefront.identity.user.events import UserRegistered


def normalize_email(email):
    return (email or "").strip().lower()


@storefront.aggregate
class User:
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    created_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        if " " in email or email.count("@") != 1:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)
        if not local_part or not domain_part or "." not in domain_part:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if domain_part.startswith(".") or domain_part.endswith(".") or ".." in email:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def register(cls, email, password_hash, first_name=None, last_name=None):
        user = cls(
            email=normalize_email(email),
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            created_at=datetime.now(UTC),
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=user.email,
                registered_at=user.created_at,
            )
        )
        return user
