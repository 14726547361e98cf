"""User registration and credential checks."""
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select
from werkzeug.security import check_password_hash, generate_password_hash

from taskmanagement.exceptions import InvalidCredentialsError, UsernameTakenError
from taskmanagement.models.user import User
from taskmanagement.utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """Service class for user accounts."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_username(self, username: str) -> User | None:
        statement = select(User).where(User.username == username)
        return self.session.exec(statement).first()

    def register(self, username: str, password: str, email: str) -> User:
        """
        Create a user with a hashed password.

        Raises:
            UsernameTakenError: If the username is already registered
        """
        if self.get_by_username(username):
            logger.info("Registration rejected: username taken", username=username)
            raise UsernameTakenError(username)

        user = User(
            username=username,
            password_hash=generate_password_hash(password),
            email=email,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            # Another registration claimed the username after the check above
            self.session.rollback()
            logger.info("Registration rejected: username taken", username=username)
            raise UsernameTakenError(username)
        self.session.refresh(user)
        logger.info("User registered", user_id=user.id, username=username)
        return user

    def authenticate(self, username: str, password: str) -> User:
        """
        Check credentials and return the matching user.

        Raises:
            InvalidCredentialsError: On unknown username or wrong password
        """
        user = self.get_by_username(username)
        if not user or not check_password_hash(user.password_hash, password):
            logger.warning("Failed login attempt", username=username)
            raise InvalidCredentialsError()
        return user
