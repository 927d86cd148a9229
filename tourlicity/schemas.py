"""
Marshmallow schemas for the document catalog.
Dump schemas convert SQLAlchemy models to JSON-safe dictionaries; input
schemas type-check payloads before they reach the repository.
"""
from marshmallow import Schema, fields, validate

from tourlicity.models.tour_document import MAX_FILE_SIZE


# ── User ────────────────────────────────────────────────────

class UserMinimalSchema(Schema):
    """Minimal user representation (for nested references)."""
    id = fields.Int(dump_only=True)
    first_name = fields.Str()
    last_name = fields.Str()
    full_name = fields.Str(dump_only=True)
    user_type = fields.Method('get_user_type')

    def get_user_type(self, obj):
        return obj.user_type.value if obj.user_type else None


# ── Tour ────────────────────────────────────────────────────

class CustomTourMinimalSchema(Schema):
    """Minimal tour reference."""
    id = fields.Int(dump_only=True)
    tour_name = fields.Str()
    join_code = fields.Str()
    status = fields.Method('get_status')
    start_date = fields.Date(format='iso')
    end_date = fields.Date(format='iso')

    def get_status(self, obj):
        return obj.status.value if obj.status else None


# ── DocumentType ────────────────────────────────────────────

class DocumentTypeSchema(Schema):
    """Document type representation."""
    id = fields.Int(dump_only=True)
    document_type_name = fields.Str()
    description = fields.Str()
    is_required = fields.Bool()
    is_active = fields.Bool()
    created_by = fields.Int()
    created_date = fields.DateTime(format='iso')
    updated_date = fields.DateTime(format='iso')


class DocumentTypeInputSchema(Schema):
    """Writable DocumentType fields. Presence is enforced by the model."""
    document_type_name = fields.Str(allow_none=True)
    description = fields.Str(allow_none=True)
    is_required = fields.Bool()
    is_active = fields.Bool()


# ── TourDocument ────────────────────────────────────────────

class TourDocumentSchema(Schema):
    """Tour document representation."""
    id = fields.Int(dump_only=True)
    custom_tour_id = fields.Int()
    document_name = fields.Str()
    description = fields.Str()
    file_name = fields.Str()
    file_url = fields.Str()
    file_size = fields.Int()
    file_size_formatted = fields.Str(dump_only=True)
    extension = fields.Str(dump_only=True)
    uploaded_by = fields.Int()
    is_visible_to_tourists = fields.Bool()
    created_by = fields.Int()
    created_date = fields.DateTime(format='iso')
    updated_date = fields.DateTime(format='iso')


class TourDocumentInputSchema(Schema):
    """Writable TourDocument fields. Presence is enforced by the model."""
    custom_tour_id = fields.Int(allow_none=True)
    document_name = fields.Str(allow_none=True)
    description = fields.Str(allow_none=True)
    file_name = fields.Str(allow_none=True)
    file_url = fields.Str(allow_none=True)
    file_size = fields.Int(allow_none=True, strict=True, validate=validate.Range(min=0, max=MAX_FILE_SIZE))
    uploaded_by = fields.Int(allow_none=True)
    is_visible_to_tourists = fields.Bool()
    created_by = fields.Int(allow_none=True)
