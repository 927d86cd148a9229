"""
Generic persistence interface over one model class.

Create / read / update / delete keyed by the integer id, with:
- uniqueness checks for unique single-column constraints (application-level
  pre-check; the database index is the backstop for concurrent writers),
- reference checks for foreign-key columns (the referenced row must exist at
  write time) and explicit reference resolution,
- timestamps populated by the model's column defaults and update hook.

Every failed write rolls the session back before the error propagates.
"""
from flask import current_app
from sqlalchemy import UniqueConstraint
from sqlalchemy.exc import IntegrityError

from tourlicity.exceptions import (
    RecordNotFoundError,
    ReferenceNotFoundError,
    UniquenessViolationError,
    ValidationError,
)
from tourlicity.extensions import db


def referenced_model(column):
    """Return the mapped class a foreign-key column points at."""
    target_table = next(iter(column.foreign_keys)).column.table
    for mapper in db.Model.registry.mappers:
        if mapper.local_table is target_table:
            return mapper.class_
    raise LookupError(f'No mapped class for table {target_table.name}')


class Repository:
    """CRUD access to records of `model`."""

    def __init__(self, model):
        self.model = model

    def __repr__(self):
        return f'<Repository {self.model_name}>'

    @property
    def model_name(self):
        return self.model.__name__

    # ── Introspection ───────────────────────────────────────

    def unique_fields(self):
        """Columns carrying a single-column unique constraint or index."""
        table = self.model.__table__
        names = {column.name for column in table.columns if column.unique}
        for constraint in table.constraints:
            if isinstance(constraint, UniqueConstraint) and len(constraint.columns) == 1:
                names.update(column.name for column in constraint.columns)
        for index in table.indexes:
            if index.unique and len(index.columns) == 1:
                names.update(column.name for column in index.columns)
        return [column.name for column in table.columns if column.name in names]

    def reference_fields(self):
        """Foreign-key columns, in declaration order."""
        return [column.name for column in self.model.__table__.columns if column.foreign_keys]

    # ── Reads ───────────────────────────────────────────────

    def get(self, record_id):
        """Return the record or None."""
        if record_id is None:
            return None
        return db.session.get(self.model, record_id)

    def get_or_raise(self, record_id):
        record = self.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.model_name, record_id)
        return record

    def find(self, **filters):
        """Records matching every filter exactly, ordered by id."""
        self._check_field_names(filters)
        return self.model.query.filter_by(**filters).order_by(self.model.id).all()

    def resolve(self, record, field):
        """Load the record referenced by `field`.

        Returns None when the field is empty; raises ReferenceNotFoundError
        when it points at a row that no longer exists.
        """
        column = self.model.__table__.columns.get(field)
        if column is None or not column.foreign_keys:
            raise ValidationError(field, f'{field} is not a reference field of {self.model_name}.')
        value = getattr(record, field)
        if value is None:
            return None
        referenced = db.session.get(referenced_model(column), value)
        if referenced is None:
            raise ReferenceNotFoundError(field, value)
        return referenced

    # ── Writes ──────────────────────────────────────────────

    def create(self, **fields):
        """Validate, check constraints, insert and commit a new record."""
        self._check_writable(fields)
        record = self.model(**fields)
        self._check_constraints(record)
        db.session.add(record)
        self._commit(record)
        current_app.logger.info(f'{self.model_name} {record.id} created')
        return record

    def update(self, record_id, **fields):
        """Apply `fields` to an existing record and commit."""
        self._check_writable(fields)
        record = self.get_or_raise(record_id)
        try:
            with db.session.no_autoflush:
                for name, value in fields.items():
                    setattr(record, name, value)
                record.validate()
                self._check_constraints(record)
        except Exception:
            db.session.rollback()
            raise
        self._commit(record)
        current_app.logger.info(f'{self.model_name} {record.id} updated: {", ".join(sorted(fields))}')
        return record

    def delete(self, record_id):
        """Hard-delete a record. Referencing rows are left untouched."""
        record = self.get_or_raise(record_id)
        db.session.delete(record)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        current_app.logger.info(f'{self.model_name} {record_id} deleted')
        return True

    # ── Internals ───────────────────────────────────────────

    def _check_field_names(self, fields):
        known = set(self.model.field_names())
        for name in fields:
            if name not in known:
                raise ValidationError(name, f'Unknown field for {self.model_name}: {name}.')

    def _check_writable(self, fields):
        self._check_field_names(fields)
        for name in fields:
            if name in self.model.READ_ONLY_FIELDS:
                raise ValidationError(name, f'{name} is read-only.')

    def _check_constraints(self, record):
        with db.session.no_autoflush:
            self._check_unique(record)
            self._check_references(record)

    def _check_unique(self, record, values=None):
        for name in self.unique_fields():
            value = values[name] if values else getattr(record, name)
            if value is None:
                continue
            query = self.model.query.filter(getattr(self.model, name) == value)
            if record.id is not None:
                query = query.filter(self.model.id != record.id)
            if db.session.query(query.exists()).scalar():
                current_app.logger.warning(f'{self.model_name}: duplicate {name} "{value}" rejected')
                raise UniquenessViolationError(name, value)

    def _check_references(self, record, values=None):
        for name in self.reference_fields():
            value = values[name] if values else getattr(record, name)
            if value is None:
                continue
            column = self.model.__table__.columns[name]
            if db.session.get(referenced_model(column), value) is None:
                current_app.logger.warning(f'{self.model_name}: {name}={value} references a missing record')
                raise ReferenceNotFoundError(name, value)

    def _commit(self, record):
        """Commit; roll back on any failure and translate constraint failures."""
        values = {name: getattr(record, name) for name in self.unique_fields() + self.reference_fields()}
        try:
            db.session.commit()
        except Exception as err:
            db.session.rollback()
            if isinstance(err, IntegrityError):
                # Another writer got there first: report the field that collides.
                self._check_unique(record, values)
                self._check_references(record, values)
            else:
                current_app.logger.error(f'{self.model_name} write failed: {err}')
            raise
