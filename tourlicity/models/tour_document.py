"""
TourDocument model - metadata of a file uploaded against a tour.
The file itself lives wherever `file_url` points.
"""
import math
from numbers import Real

from sqlalchemy.orm import validates

from tourlicity.exceptions import ValidationError
from tourlicity.extensions import db
from tourlicity.models.base import RecordMixin, TimestampMixin

# Largest value a BIGINT column holds
MAX_FILE_SIZE = 2 ** 63 - 1


class TourDocument(RecordMixin, TimestampMixin, db.Model):
    """
    Uploaded file attached to a CustomTour.

    `custom_tour_id`, `uploaded_by` and `created_by` hold ids only; use
    Repository.resolve() to load the referenced rows. Deleting the tour or
    the uploader does not cascade here.
    """

    __tablename__ = 'tour_documents'

    id = db.Column(db.Integer, primary_key=True)
    custom_tour_id = db.Column(db.Integer, db.ForeignKey('custom_tours.id'), nullable=False, index=True)
    document_name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    file_name = db.Column(db.String(255), nullable=False)
    file_url = db.Column(db.String(500), nullable=False)
    file_size = db.Column(db.BigInteger)  # Size in bytes
    uploaded_by = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    is_visible_to_tourists = db.Column(db.Boolean, default=True, nullable=False)
    created_by = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)

    def __repr__(self):
        return f'<TourDocument {self.document_name} tour={self.custom_tour_id}>'

    @validates('file_size')
    def validate_file_size(self, key, value):
        if value is None:
            return value
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValidationError(key, 'file_size must be a number.')
        if isinstance(value, float) and not math.isfinite(value):
            raise ValidationError(key, 'file_size must be finite.')
        if value != int(value):
            raise ValidationError(key, 'file_size must be a whole number of bytes.')
        if value < 0:
            raise ValidationError(key, 'file_size cannot be negative.')
        if value > MAX_FILE_SIZE:
            raise ValidationError(key, f'file_size cannot exceed {MAX_FILE_SIZE} bytes.')
        return int(value)

    @property
    def file_size_formatted(self):
        """Return human-readable file size."""
        if self.file_size is None:
            return 'Unknown'

        size = self.file_size
        for unit in ['B', 'KB', 'MB', 'GB']:
            if size < 1024:
                return f'{size:.1f} {unit}'
            size /= 1024
        return f'{size:.1f} TB'

    @property
    def extension(self):
        """Lowercase extension of file_name, or None."""
        if self.file_name and '.' in self.file_name:
            return self.file_name.rsplit('.', 1)[1].lower()
        return None
