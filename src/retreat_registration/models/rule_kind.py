"""Enums for validation rule variants"""

from enum import Enum


class RuleKind(str, Enum):
    """Tagged variants a field's validation rule can take"""

    REQUIRED_TEXT = "required_text"
    EMAIL = "email"
    BOUNDED_NUMBER = "bounded_number"
    ENUMERATED_CHOICE = "enumerated_choice"
    OPTIONAL_TEXT = "optional_text"
    OPTIONAL_CHOICE = "optional_choice"
    IMAGE_ATTACHMENT = "image_attachment"
    MUST_BE_TRUE = "must_be_true"
