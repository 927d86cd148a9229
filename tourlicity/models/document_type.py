"""
DocumentType model - catalog of document categories tours may ask for
(passport, visa, insurance, ...).
"""
from sqlalchemy.orm import validates

from tourlicity.extensions import db
from tourlicity.models.base import RecordMixin, TimestampMixin


class DocumentType(RecordMixin, TimestampMixin, db.Model):
    """
    Catalog entry naming a category of required or optional document.

    `document_type_name` is unique, compared exactly (case-sensitive) after
    stripping surrounding whitespace. Removal is normally a soft
    deactivation through `is_active`.
    """

    __tablename__ = 'document_types'

    __table_args__ = (
        db.UniqueConstraint('document_type_name', name='uq_document_types_document_type_name'),
    )

    id = db.Column(db.Integer, primary_key=True)
    document_type_name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=True)
    is_required = db.Column(db.Boolean, default=False, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_by = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)

    def __repr__(self):
        return f'<DocumentType {self.document_type_name}>'

    @validates('document_type_name')
    def strip_name(self, key, value):
        return value.strip() if isinstance(value, str) else value
