"""
Tests for the Forms Service

Unit tests for FormsService covering:
- Contact form validation and delivery
- Event registration validation and delivery
- Backend failures reported as retry messages
"""

import pytest
from unittest.mock import MagicMock
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.api_client import ContentApiClient
from services.forms_service import (
    CONTACT_FAILURE_MESSAGE, CONTACT_SUCCESS_MESSAGE, FIX_ERRORS_MESSAGE,
    REGISTRATION_FAILURE_MESSAGE, REGISTRATION_SUCCESS_MESSAGE, FormsService, create_forms_service
)
from utils.exceptions import ApiError, ApiTransportError


@pytest.fixture
def api():
    """A mocked content API client."""
    return MagicMock(spec=ContentApiClient)


@pytest.fixture
def forms(api):
    """A FormsService over the mocked API."""
    return FormsService(api)


@pytest.fixture
def contact_form():
    return {
        'firstName': ' Lea ',
        'lastName': 'Haddad',
        'email': 'lea@example.com',
        'message': 'Do you host private tastings?',
    }


@pytest.fixture
def registration_form():
    return {
        'eventId': 'evt-1',
        'name': 'Nadim Khoury',
        'email': 'nadim@example.com',
        'phone': '+961 3 123 456',
    }


# =============================================================================
# Contact Form Tests
# =============================================================================

class TestContactForm:
    """Tests for submit_contact."""

    def test_valid_submission(self, forms, api, contact_form):
        """A valid form is delivered with trimmed fields."""
        result = forms.submit_contact(contact_form)

        assert result.success is True
        assert result.message == CONTACT_SUCCESS_MESSAGE
        api.submit_contact_form.assert_called_once_with({
            'firstName': 'Lea',
            'lastName': 'Haddad',
            'email': 'lea@example.com',
            'message': 'Do you host private tastings?',
        })

    def test_field_errors(self, forms, api):
        """Every invalid field is reported and nothing is sent."""
        result = forms.submit_contact({'firstName': 'L', 'email': 'nope', 'message': 'short'})

        assert result.success is False
        assert result.message == FIX_ERRORS_MESSAGE
        assert set(result.errors) == {'firstName', 'lastName', 'email', 'message'}
        api.submit_contact_form.assert_not_called()

    def test_whitespace_only_name_is_invalid(self, forms, contact_form):
        """Names are measured after trimming."""
        contact_form['lastName'] = '    '

        assert 'lastName' in forms.submit_contact(contact_form).errors

    @pytest.mark.parametrize('error', [ApiError(500, 'Internal Server Error'), ApiTransportError('timed out')])
    def test_backend_failure(self, forms, api, contact_form, error, capture_logs):
        """A failed delivery gives the retry message and is logged."""
        api.submit_contact_form.side_effect = error

        result = forms.submit_contact(contact_form)

        assert result.success is False
        assert result.message == CONTACT_FAILURE_MESSAGE
        assert result.errors == {}
        assert any('Contact form error' in r.getMessage() for r in capture_logs)

    def test_to_dict(self, forms, contact_form):
        """Errors are only serialized when present."""
        assert forms.submit_contact(contact_form).to_dict() == {
            'success': True, 'message': CONTACT_SUCCESS_MESSAGE
        }
        assert 'errors' in forms.submit_contact({}).to_dict()


# =============================================================================
# Event Registration Tests
# =============================================================================

class TestEventRegistration:
    """Tests for submit_event_registration."""

    def test_valid_registration(self, forms, api, registration_form):
        """A valid registration is posted for its event."""
        result = forms.submit_event_registration(registration_form)

        assert result.success is True
        assert result.message == REGISTRATION_SUCCESS_MESSAGE
        api.register_for_event.assert_called_once_with('evt-1', {
            'name': 'Nadim Khoury', 'email': 'nadim@example.com', 'phone': '+961 3 123 456',
        })

    def test_missing_event_id(self, forms, api, registration_form):
        """A registration without event is rejected."""
        registration_form['eventId'] = ''

        result = forms.submit_event_registration(registration_form)

        assert result.errors == {'eventId': 'Event ID is missing'}
        api.register_for_event.assert_not_called()

    def test_short_phone(self, forms, registration_form):
        """Phone numbers need a minimum length."""
        registration_form['phone'] = '123'

        assert 'phone' in forms.submit_event_registration(registration_form).errors

    def test_invalid_email(self, forms, registration_form):
        """The email must look like an address."""
        registration_form['email'] = 'nadim@'

        assert 'email' in forms.submit_event_registration(registration_form).errors

    def test_backend_failure(self, forms, api, registration_form):
        """A failed registration gives the retry message."""
        api.register_for_event.side_effect = ApiTransportError('refused')

        result = forms.submit_event_registration(registration_form)

        assert result.success is False
        assert result.message == REGISTRATION_FAILURE_MESSAGE


class TestCreateFormsService:
    """Tests for the factory."""

    def test_uses_given_base_url(self):
        """The API client points at the given base URL."""
        service = create_forms_service('http://api.test/api/v1')

        assert service.api.base_url == 'http://api.test/api/v1'
