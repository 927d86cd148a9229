"""
User model. Referenced by catalog records as uploader / creator.
"""
import enum

from sqlalchemy.orm import validates

from tourlicity.extensions import db
from tourlicity.models.base import RecordMixin, TimestampMixin


class UserType(enum.Enum):
    """Account type."""
    SYSTEM_ADMIN = 'system_admin'
    PROVIDER_ADMIN = 'provider_admin'
    TOURIST = 'tourist'


class User(RecordMixin, TimestampMixin, db.Model):
    """Application user (administrator, tour provider, or tourist)."""

    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    first_name = db.Column(db.String(50), nullable=False)
    last_name = db.Column(db.String(50), nullable=False)
    user_type = db.Column(
        db.Enum(UserType, values_callable=lambda x: [e.value for e in x]),
        default=UserType.TOURIST,
        nullable=False
    )
    phone_number = db.Column(db.String(30))
    country = db.Column(db.String(100))
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    def __repr__(self):
        return f'<User {self.email}>'

    @validates('email')
    def normalize_email(self, key, value):
        return value.strip().lower() if isinstance(value, str) else value

    @property
    def full_name(self):
        """Return user's full name."""
        return f'{self.first_name} {self.last_name}'

    @property
    def is_admin(self):
        return self.user_type == UserType.SYSTEM_ADMIN
