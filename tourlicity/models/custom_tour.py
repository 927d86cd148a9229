"""
CustomTour model - a concrete tour that documents are attached to.
"""
import enum
import secrets
import string

from sqlalchemy.orm import validates

from tourlicity.exceptions import ValidationError
from tourlicity.extensions import db
from tourlicity.models.base import RecordMixin, TimestampMixin

JOIN_CODE_LENGTH = 6
JOIN_CODE_MAX_LENGTH = 10
JOIN_CODE_ALPHABET = string.ascii_uppercase + string.digits


class TourStatus(enum.Enum):
    """Tour status enumeration."""
    DRAFT = 'draft'
    PUBLISHED = 'published'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


class CustomTour(RecordMixin, TimestampMixin, db.Model):
    """A scheduled tour tourists can join with a code."""

    __tablename__ = 'custom_tours'

    id = db.Column(db.Integer, primary_key=True)
    tour_name = db.Column(db.String(200), nullable=False, index=True)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    status = db.Column(
        db.Enum(TourStatus, values_callable=lambda x: [e.value for e in x]),
        default=TourStatus.DRAFT,
        nullable=False,
        index=True
    )
    join_code = db.Column(db.String(JOIN_CODE_MAX_LENGTH), unique=True, nullable=False, index=True)
    max_tourists = db.Column(db.Integer, default=5, nullable=False)
    remaining_tourists = db.Column(db.Integer, default=5, nullable=False)
    group_chat_link = db.Column(db.String(500))
    created_by = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)

    def __init__(self, **kwargs):
        if not kwargs.get('join_code'):
            kwargs['join_code'] = self.generate_join_code()
        super().__init__(**kwargs)

    def __repr__(self):
        return f'<CustomTour {self.tour_name} ({self.join_code})>'

    @staticmethod
    def generate_join_code():
        """Random uppercase alphanumeric code."""
        return ''.join(secrets.choice(JOIN_CODE_ALPHABET) for _ in range(JOIN_CODE_LENGTH))

    @validates('join_code')
    def normalize_join_code(self, key, value):
        if not isinstance(value, str):
            return value
        value = value.strip().upper()
        if len(value) > JOIN_CODE_MAX_LENGTH:
            raise ValidationError(key, f'{key} must be at most {JOIN_CODE_MAX_LENGTH} characters.')
        return value

    @property
    def duration_days(self):
        """Number of calendar days covered, both ends included."""
        if self.start_date and self.end_date:
            return (self.end_date - self.start_date).days + 1
        return None
