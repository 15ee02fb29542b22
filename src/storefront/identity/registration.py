"""User registration: command, handler and the entry point that hashes the password.

The command carries only the bcrypt hash so the plain password never enters
the command pipeline.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.passwords import hash_password
from storefront.identity.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create a new account."""

    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    first_name: String(max_length=100)
    last_name: String(max_length=100)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["User already exists"]})

        user = User.register(
            email=command.email,
            password_hash=command.password_hash,
            first_name=command.first_name,
            last_name=command.last_name,
        )
        repo.add(user)
        return str(user.id)


def register_user(email, password, first_name=None, last_name=None) -> User:
    """Hash the password, register the account and return the stored user."""
    command = RegisterUser(
        email=email,
        password_hash=hash_password(password),
        first_name=first_name,
        last_name=last_name,
    )
    user_id = current_domain.process(command, asynchronous=False)
    logger.info("user_registered", user_id=user_id)
    return current_domain.repository_for(User).get(user_id)
