"""Repository for the User aggregate."""

from storefront.domain import storefront
from storefront.identity.user.user import User, normalize_email


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email) -> User | None:
        return self._dao.query.filter(email=normalize_email(email)).all().first
