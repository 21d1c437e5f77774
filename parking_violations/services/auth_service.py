import logging

from typing import Optional

from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from parking_violations import settings
from parking_violations.constants import L10N
from parking_violations.models.user import User
from parking_violations.services.constants.exceptions import \
    RegistrationException

LOG = logging.getLogger(__name__)


class AuthService:

    def register(self,
                 email: str,
                 password: str,
                 first_name: Optional[str] = None,
                 last_name: Optional[str] = None) -> User:
        normalized_email: str = (email or '').strip().lower()

        if not normalized_email:
            raise RegistrationException(L10N.MISSING_EMAIL_STRING)

        if not password or len(password) < settings.MIN_PASSWORD_LENGTH:
            raise RegistrationException(
                L10N.PASSWORD_TOO_SHORT_STRING.format(settings.MIN_PASSWORD_LENGTH))

        if User.get_by(email=normalized_email):
            raise RegistrationException(L10N.DUPLICATE_EMAIL_STRING)

        name: Optional[str] = ' '.join(
            part for part in [first_name, last_name] if part) or None

        user = User(
            email=normalized_email,
            first_name=first_name,
            last_name=last_name,
            name=name,
            password_hash=generate_password_hash(password))

        session = User.query.session
        session.add(user)

        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            raise RegistrationException(L10N.DUPLICATE_EMAIL_STRING) from exc

        LOG.info(f'Registered user {user.id}')

        return user

    def authenticate(self, email: str, password: str) -> Optional[User]:
        if not email or not password:
            return None

        user: Optional[User] = User.get_by(email=email.strip().lower())

        if user and check_password_hash(user.password_hash, password):
            return user

        LOG.info('Failed login attempt')

        return None

    def get_user(self, user_id: Optional[int]) -> Optional[User]:
        if user_id is None:
            return None

        return User.get_by(id=user_id)
