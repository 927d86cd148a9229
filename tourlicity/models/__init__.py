"""
SQLAlchemy models for Tourlicity.
All models are imported here for easy access.
"""
from tourlicity.models.base import RecordMixin, TimestampMixin, utcnow
from tourlicity.models.user import User, UserType
from tourlicity.models.custom_tour import CustomTour, TourStatus
from tourlicity.models.document_type import DocumentType
from tourlicity.models.tour_document import TourDocument

__all__ = [
    # Base
    'RecordMixin',
    'TimestampMixin',
    'utcnow',
    # User
    'User',
    'UserType',
    # Tour
    'CustomTour',
    'TourStatus',
    # Documents
    'DocumentType',
    'TourDocument',
]
