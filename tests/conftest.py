# =============================================================================
# Tourlicity - Test Bootstrap and Pytest Fixtures
# =============================================================================

import logging
import os

# Process-wide test environment. Set before the application is imported so
# the config classes pick the values up; never reset during the run.
os.environ['JWT_SECRET_KEY'] = 'test-secret-key'
os.environ['TEST_DATABASE_URL'] = 'sqlite:///:memory:'
os.environ['FLASK_ENV'] = 'test'

# Silence informational, warning and error output during tests
if os.environ['FLASK_ENV'] == 'test':
    logging.disable(logging.ERROR)

import pytest  # noqa: E402
from datetime import date, timedelta  # noqa: E402

from tourlicity import create_app  # noqa: E402
from tourlicity.extensions import db  # noqa: E402
from tourlicity.models.user import User, UserType  # noqa: E402
from tourlicity.models.custom_tour import CustomTour, TourStatus  # noqa: E402
from tourlicity.models.document_type import DocumentType  # noqa: E402
from tourlicity.models.tour_document import TourDocument  # noqa: E402


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture(scope='function')
def app():
    """Create and configure test application with SQLite in-memory database."""
    application = create_app('testing')

    with application.app_context():
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def runner(app):
    """CLI test runner."""
    return app.test_cli_runner()


@pytest.fixture(scope='function')
def session(app):
    """Database session for tests."""
    yield db.session


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def admin_user(app):
    """Create a system administrator."""
    user = User(
        email='admin@tourlicity.test',
        first_name='Ada',
        last_name='Admin',
        user_type=UserType.SYSTEM_ADMIN
    )
    db.session.add(user)
    db.session.commit()
    user_id = user.id
    db.session.expire_all()
    return db.session.get(User, user_id)


@pytest.fixture
def tourist_user(app):
    """Create a tourist."""
    user = User(
        email='tourist@tourlicity.test',
        first_name='Tom',
        last_name='Tourist',
        country='France'
    )
    db.session.add(user)
    db.session.commit()
    user_id = user.id
    db.session.expire_all()
    return db.session.get(User, user_id)


# =============================================================================
# Tour Fixtures
# =============================================================================

@pytest.fixture
def sample_tour(app, admin_user):
    """Create a published tour."""
    tour = CustomTour(
        tour_name='Alps Discovery 2026',
        start_date=date.today() + timedelta(days=30),
        end_date=date.today() + timedelta(days=37),
        status=TourStatus.PUBLISHED,
        max_tourists=12,
        remaining_tourists=12,
        created_by=admin_user.id
    )
    db.session.add(tour)
    db.session.commit()
    tour_id = tour.id
    db.session.expire_all()
    return db.session.get(CustomTour, tour_id)


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def sample_document_type(app, admin_user):
    """Create the Passport document type."""
    document_type = DocumentType(
        document_type_name='Passport',
        description='Valid passport',
        is_required=True,
        created_by=admin_user.id
    )
    db.session.add(document_type)
    db.session.commit()
    document_type_id = document_type.id
    db.session.expire_all()
    return db.session.get(DocumentType, document_type_id)


@pytest.fixture
def sample_tour_document(app, sample_tour, admin_user):
    """Create an itinerary document attached to the sample tour."""
    document = TourDocument(
        custom_tour_id=sample_tour.id,
        document_name='Itinerary',
        description='Day-by-day program',
        file_name='itinerary.pdf',
        file_url='https://files.tourlicity.test/itinerary.pdf',
        file_size=204800,
        uploaded_by=admin_user.id
    )
    db.session.add(document)
    db.session.commit()
    document_id = document.id
    db.session.expire_all()
    return db.session.get(TourDocument, document_id)


@pytest.fixture
def document_payload(sample_tour, admin_user):
    """Factory for a complete TourDocument field set; override keys per test."""
    def build(**overrides):
        payload = {
            'custom_tour_id': sample_tour.id,
            'document_name': 'Scan',
            'file_name': 'p.pdf',
            'file_url': 'https://x/p.pdf',
            'uploaded_by': admin_user.id,
        }
        payload.update(overrides)
        return payload
    return build
