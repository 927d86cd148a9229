"""
Shared behaviour for catalog records.

RecordMixin validates required columns and applies scalar column defaults at
construction time, so an unsaved record already reports `is_active=True` and
friends. TimestampMixin owns `created_date` / `updated_date`; both are filled
by the persistence layer (column defaults on insert, mapper hook on update),
never by the record constructor.
"""
from datetime import datetime, timedelta, timezone

from sqlalchemy import event

from tourlicity.extensions import db
from tourlicity.exceptions import ValidationError


def utcnow():
    """Naive UTC timestamp, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class RecordMixin:
    """Construction-time validation for declarative records."""

    # Fields that can never be written through Repository.update()
    READ_ONLY_FIELDS = ('id', 'created_date', 'updated_date')

    def __init__(self, **kwargs):
        for column in self.__table__.columns:
            default = column.default
            if column.name not in kwargs and default is not None and default.is_scalar:
                kwargs[column.name] = default.arg
        super().__init__(**kwargs)
        self.validate()

    @classmethod
    def required_fields(cls):
        """Non-nullable columns the caller has to provide, in declaration order."""
        return [
            column.name
            for column in cls.__table__.columns
            if not column.nullable
            and not column.primary_key
            and column.default is None
            and column.server_default is None
        ]

    @classmethod
    def field_names(cls):
        return [column.name for column in cls.__table__.columns]

    def validate(self):
        """Raise ValidationError naming every missing or blank required field."""
        missing = []
        for name in self.required_fields():
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        if missing:
            raise ValidationError(
                missing[0],
                f'Missing required field(s): {", ".join(missing)}.',
                fields=missing,
            )


class TimestampMixin:
    """created_date / updated_date managed by the persistence layer."""

    created_date = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_date = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)


@event.listens_for(TimestampMixin, 'before_update', propagate=True)
def _advance_updated_date(mapper, connection, target):
    """Move updated_date forward on every UPDATE, even within one clock tick."""
    now = utcnow()
    previous = target.updated_date
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    target.updated_date = now
