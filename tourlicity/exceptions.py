"""
Error taxonomy for the document catalog.

Records raise ValidationError on construction; the repository and services
raise the rest. Nothing here is caught below the caller.
"""


class TourlicityError(Exception):
    """Base error for the data layer."""


class ValidationError(TourlicityError):
    """A field is missing, blank, of the wrong type, or not writable."""

    def __init__(self, field, message=None, fields=None):
        self.field = field
        self.fields = list(fields) if fields else [field]
        self.message = message or f'{field} is required.'
        super().__init__(self.message)


class UniquenessViolationError(TourlicityError):
    """An insert or update would duplicate a value constrained to be unique."""

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f'{field} "{value}" already exists.')


class ReferenceNotFoundError(TourlicityError):
    """A reference field points at a record that does not exist."""

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f'{field} references missing record {value}.')


class RecordNotFoundError(TourlicityError):
    """No record with the given id."""

    def __init__(self, model_name, record_id):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f'{model_name} {record_id} not found.')
