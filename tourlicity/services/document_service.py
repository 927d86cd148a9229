"""
Document catalog services.
DocumentTypeService manages the catalog of document categories;
TourDocumentService manages files uploaded against tours.
"""
from typing import List, Optional

import marshmallow
from flask import current_app

from tourlicity.exceptions import ValidationError
from tourlicity.models.custom_tour import CustomTour
from tourlicity.models.document_type import DocumentType
from tourlicity.models.tour_document import TourDocument
from tourlicity.models.user import User
from tourlicity.schemas import (
    CustomTourMinimalSchema,
    DocumentTypeInputSchema,
    TourDocumentInputSchema,
    TourDocumentSchema,
    UserMinimalSchema,
)
from tourlicity.services.repository import Repository

document_types = Repository(DocumentType)
tour_documents = Repository(TourDocument)
custom_tours = Repository(CustomTour)
users = Repository(User)


def load_payload(schema, data, partial=False):
    """Type-check `data` with a marshmallow schema.

    marshmallow errors are re-raised as ValidationError naming the first
    offending field.
    """
    try:
        return schema.load(data or {}, partial=partial)
    except marshmallow.ValidationError as err:
        messages = err.messages if isinstance(err.messages, dict) else {'_schema': err.messages}
        field, problems = next(iter(messages.items()))
        detail = problems[0] if isinstance(problems, list) and problems else problems
        raise ValidationError(field, f'{field}: {detail}', fields=list(messages)) from err


class DocumentTypeService:
    """Service for the document type catalog."""

    @staticmethod
    def create(data: dict, created_by: Optional[int] = None) -> DocumentType:
        """Create a catalog entry.

        Args:
            data: Payload with at least `document_type_name`
            created_by: Id of the administrator creating the entry

        Returns:
            The persisted DocumentType

        Raises:
            ValidationError: name missing/blank or a field has the wrong type
            UniquenessViolationError: a type with this name already exists
            ReferenceNotFoundError: `created_by` is not a known user
        """
        payload = load_payload(DocumentTypeInputSchema(), data)
        if created_by is not None:
            payload['created_by'] = created_by
        return document_types.create(**payload)

    @staticmethod
    def get(document_type_id: int) -> DocumentType:
        return document_types.get_or_raise(document_type_id)

    @staticmethod
    def get_by_name(name: str) -> Optional[DocumentType]:
        """Exact (case-sensitive) lookup, surrounding whitespace ignored."""
        if not name:
            return None
        return DocumentType.query.filter_by(document_type_name=name.strip()).first()

    @staticmethod
    def list_types(active_only: bool = False) -> List[DocumentType]:
        """All document types ordered by name."""
        query = DocumentType.query
        if active_only:
            query = query.filter_by(is_active=True)
        return query.order_by(DocumentType.document_type_name).all()

    @staticmethod
    def update(document_type_id: int, data: dict) -> DocumentType:
        payload = load_payload(DocumentTypeInputSchema(), data, partial=True)
        return document_types.update(document_type_id, **payload)

    @staticmethod
    def activate(document_type_id: int) -> DocumentType:
        return document_types.update(document_type_id, is_active=True)

    @staticmethod
    def deactivate(document_type_id: int) -> DocumentType:
        """Soft removal: the type stays in the catalog but is hidden."""
        return document_types.update(document_type_id, is_active=False)

    @staticmethod
    def delete(document_type_id: int) -> bool:
        return document_types.delete(document_type_id)

    @staticmethod
    def seed_defaults(definitions: Optional[list] = None) -> int:
        """Create the default catalog entries that are missing.

        Args:
            definitions: Payloads to seed (defaults to DEFAULT_DOCUMENT_TYPES)

        Returns:
            Number of entries created
        """
        if definitions is None:
            definitions = current_app.config.get('DEFAULT_DOCUMENT_TYPES', [])

        created = 0
        for data in definitions:
            if DocumentTypeService.get_by_name(data.get('document_type_name')):
                continue
            DocumentTypeService.create(data)
            created += 1

        if created:
            current_app.logger.info(f'Seeded {created} document type(s)')
        return created


class TourDocumentService:
    """Service for documents uploaded against tours."""

    @staticmethod
    def create(data: dict, uploaded_by: Optional[int] = None) -> TourDocument:
        """Record an uploaded file against a tour.

        Args:
            data: Payload with custom_tour_id, document_name, file_name, file_url
            uploaded_by: Id of the uploading user (overrides data['uploaded_by'])

        Returns:
            The persisted TourDocument

        Raises:
            ValidationError: a required field is missing or mistyped
            ReferenceNotFoundError: the tour or a user does not exist
        """
        payload = load_payload(TourDocumentInputSchema(), data)
        if uploaded_by is not None:
            payload['uploaded_by'] = uploaded_by
        return tour_documents.create(**payload)

    @staticmethod
    def get(document_id: int) -> TourDocument:
        return tour_documents.get_or_raise(document_id)

    @staticmethod
    def list_for_tour(custom_tour_id: int, visible_only: bool = False) -> List[TourDocument]:
        """Documents of a tour, newest first.

        Args:
            custom_tour_id: Tour id (must exist)
            visible_only: Only documents tourists may see
        """
        custom_tours.get_or_raise(custom_tour_id)
        query = TourDocument.query.filter_by(custom_tour_id=custom_tour_id)
        if visible_only:
            query = query.filter_by(is_visible_to_tourists=True)
        return query.order_by(TourDocument.created_date.desc(), TourDocument.id.desc()).all()

    @staticmethod
    def update(document_id: int, data: dict) -> TourDocument:
        payload = load_payload(TourDocumentInputSchema(), data, partial=True)
        return tour_documents.update(document_id, **payload)

    @staticmethod
    def set_visibility(document_id: int, visible: bool) -> TourDocument:
        return tour_documents.update(document_id, is_visible_to_tourists=bool(visible))

    @staticmethod
    def delete(document_id: int) -> bool:
        return tour_documents.delete(document_id)

    @staticmethod
    def get_tour(document: TourDocument) -> CustomTour:
        return tour_documents.resolve(document, 'custom_tour_id')

    @staticmethod
    def get_uploader(document: TourDocument) -> User:
        return tour_documents.resolve(document, 'uploaded_by')

    @staticmethod
    def to_dict(document: TourDocument, resolve: bool = False) -> dict:
        """Serialize a document, optionally embedding its tour and uploader."""
        data = TourDocumentSchema().dump(document)
        if resolve:
            data['custom_tour'] = CustomTourMinimalSchema().dump(TourDocumentService.get_tour(document))
            data['uploader'] = UserMinimalSchema().dump(TourDocumentService.get_uploader(document))
        return data
