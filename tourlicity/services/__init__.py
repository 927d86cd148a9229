"""
Services package.
Contains the persistence interface and the document catalog services.
"""
from tourlicity.services.repository import Repository
from tourlicity.services.document_service import DocumentTypeService, TourDocumentService

__all__ = [
    'Repository',
    'DocumentTypeService',
    'TourDocumentService',
]
