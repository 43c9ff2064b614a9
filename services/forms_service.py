"""
Forms Service Module

Validates and delivers the two forms of the site: the contact form and the
event registration form. Field problems are reported back per field; a
backend failure is reported as a generic retry message.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from config import settings
from services.api_client import ContentApiClient
from services.protocols import SubmissionApiProtocol
from utils.exceptions import ContentSourceError, FormSubmissionError
from utils.helpers import is_valid_email
from utils.logger import get_logger

logger = get_logger(__name__)

FIX_ERRORS_MESSAGE = 'Please fix the errors below.'
CONTACT_SUCCESS_MESSAGE = 'Thank you! Your message has been sent successfully.'
CONTACT_FAILURE_MESSAGE = 'Something went wrong. Please try again later.'
REGISTRATION_SUCCESS_MESSAGE = 'You have been registered successfully!'
REGISTRATION_FAILURE_MESSAGE = 'Registration failed. Please try again later.'


@dataclass
class FormResult:
    """Outcome of a form submission as shown to the visitor."""
    success: bool
    message: str
    errors: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = {'success': self.success, 'message': self.message}
        if self.errors:
            result['errors'] = dict(self.errors)
        return result


def _field(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    return value.strip() if isinstance(value, str) else ''


class FormsService:
    """Service for visitor form submissions."""

    def __init__(self, api: SubmissionApiProtocol):
        """
        Initialize the forms service.

        Args:
            api: Content API endpoints that receive the submissions.
        """
        self.api = api

    def validate_contact(self, form: Mapping[str, Any]) -> Dict[str, str]:
        errors = {}
        if len(_field(form, 'firstName')) < settings.MIN_NAME_LENGTH:
            errors['firstName'] = f'First name is required (min {settings.MIN_NAME_LENGTH} characters)'
        if len(_field(form, 'lastName')) < settings.MIN_NAME_LENGTH:
            errors['lastName'] = f'Last name is required (min {settings.MIN_NAME_LENGTH} characters)'
        if not is_valid_email(_field(form, 'email')):
            errors['email'] = 'Valid email is required'
        if len(_field(form, 'message')) < settings.MIN_MESSAGE_LENGTH:
            errors['message'] = f'Message must be at least {settings.MIN_MESSAGE_LENGTH} characters'
        return errors

    def validate_registration(self, form: Mapping[str, Any]) -> Dict[str, str]:
        errors = {}
        if len(_field(form, 'name')) < settings.MIN_NAME_LENGTH:
            errors['name'] = 'Name is required'
        if not is_valid_email(_field(form, 'email')):
            errors['email'] = 'Valid email is required'
        if len(_field(form, 'phone')) < settings.MIN_PHONE_LENGTH:
            errors['phone'] = 'Valid phone number is required'
        if not _field(form, 'eventId'):
            errors['eventId'] = 'Event ID is missing'
        return errors

    def _deliver(self, description: str, send) -> None:
        try:
            send()
        except ContentSourceError as e:
            raise FormSubmissionError(f"{description} could not be delivered: {e}") from e

    def submit_contact(self, form: Mapping[str, Any]) -> FormResult:
        """
        Validate and send a contact message.

        Args:
            form: Submitted fields: firstName, lastName, email, message.

        Returns:
            FormResult: Field errors, a retry message, or the thank-you message.
        """
        errors = self.validate_contact(form)
        if errors:
            return FormResult(success=False, message=FIX_ERRORS_MESSAGE, errors=errors)

        payload = {name: _field(form, name) for name in ('firstName', 'lastName', 'email', 'message')}
        try:
            self._deliver("Contact message", lambda: self.api.submit_contact_form(payload))
        except FormSubmissionError as e:
            logger.error(f"Contact form error: {e}")
            return FormResult(success=False, message=CONTACT_FAILURE_MESSAGE)

        logger.info("Contact message delivered")
        return FormResult(success=True, message=CONTACT_SUCCESS_MESSAGE)

    def submit_event_registration(self, form: Mapping[str, Any]) -> FormResult:
        """
        Validate and send an event registration.

        Args:
            form: Submitted fields: eventId, name, email, phone.

        Returns:
            FormResult: Field errors, a retry message, or the confirmation message.
        """
        errors = self.validate_registration(form)
        if errors:
            return FormResult(success=False, message=FIX_ERRORS_MESSAGE, errors=errors)

        event_id = _field(form, 'eventId')
        payload = {name: _field(form, name) for name in ('name', 'email', 'phone')}
        try:
            self._deliver(f"Registration for event {event_id}",
                          lambda: self.api.register_for_event(event_id, payload))
        except FormSubmissionError as e:
            logger.error(f"Event registration error: {e}")
            return FormResult(success=False, message=REGISTRATION_FAILURE_MESSAGE)

        logger.info(f"Registration delivered for event {event_id}")
        return FormResult(success=True, message=REGISTRATION_SUCCESS_MESSAGE)


def create_forms_service(api_base_url: Optional[str] = None) -> FormsService:
    """Build a FormsService talking to the configured content API."""
    return FormsService(ContentApiClient(base_url=api_base_url))
