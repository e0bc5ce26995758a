"""Client-side state holder for the registration form"""

import logging
from typing import Any, Dict, Mapping, Optional

from retreat_registration.models.choices import DramaMinistry
from retreat_registration.models.registration import (
    PhotoAttachment,
    RegistrationSubmission,
)
from retreat_registration.validation import (
    REGISTRATION_RULES,
    FieldRule,
    to_submission,
    validate_registration,
)

logger = logging.getLogger(__name__)

DRAMA_MESSAGE = "We're glad to have passionate vessels of expression."


class FormController:
    """
    Owns the current value of every registration field.

    Runs the validation rules on submit and keeps the resulting error set
    (field name -> reason, invalid fields only). ``reset()`` returns the
    controller to its pristine state.
    """

    def __init__(self, rules: Mapping[str, FieldRule] = REGISTRATION_RULES):
        self.rules = dict(rules)
        self.reset()

    def _empty_state_template(self) -> Dict[str, Any]:
        state = {name: None for name in self.rules}
        state["confirmation"] = False
        return state

    def reset(self) -> None:
        """Clear every field and error back to the initial state"""
        self._values = self._empty_state_template()
        self._errors: Dict[str, str] = {}
        self.show_drama_message = False

    @property
    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def is_pristine(self) -> bool:
        return self._values == self._empty_state_template() and not self._errors

    @property
    def drama_message(self) -> Optional[str]:
        return DRAMA_MESSAGE if self.show_drama_message else None

    def get_value(self, field_name: str) -> Any:
        if field_name not in self._values:
            raise KeyError(f"Unknown field: {field_name}")
        return self._values[field_name]

    def set_value(self, field_name: str, value: Any) -> None:
        """
        Update a single field.

        Raises:
            KeyError: If the field is not part of the form
        """
        if field_name not in self._values:
            raise KeyError(f"Unknown field: {field_name}")
        self._values[field_name] = value

        if field_name == "wants_drama_ministry":
            self.show_drama_message = value == DramaMinistry.YES.value

    def update(self, values: Mapping[str, Any]) -> None:
        for field_name, value in values.items():
            self.set_value(field_name, value)

    def set_photo(
        self, filename: str, content: bytes, content_type: str = "application/octet-stream"
    ) -> None:
        self.set_value(
            "photo",
            PhotoAttachment(filename=filename, content=content, content_type=content_type),
        )

    def clear_photo(self) -> None:
        self.set_value("photo", None)

    def validate(self) -> Dict[str, str]:
        """Re-run every rule, replacing the current error set"""
        self._errors = validate_registration(self._values, self.rules)
        return self.errors

    def submit(self) -> Optional[RegistrationSubmission]:
        """
        Validate the form and build the submission payload.

        Returns:
            The submission when every field is valid, otherwise None with
            ``errors`` describing what needs fixing
        """
        if self.validate():
            logger.info(f"Form has {len(self._errors)} invalid field(s)")
            return None
        return to_submission(self._values)
