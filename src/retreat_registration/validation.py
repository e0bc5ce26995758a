"""Declarative validation rules for the registration form.

Each field is bound to a single tagged ``FieldRule``. Rules are evaluated
uniformly by ``validate_field``; validation never raises, it only returns a
human-readable reason when a value is refused. The same rules back the
client-side form controller and the server-side handler.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from retreat_registration.models.choices import (
    Affiliation,
    DramaMinistry,
    Gender,
    HowHeard,
    WorshipMinister,
)
from retreat_registration.models.registration import (
    PhotoAttachment,
    RegistrationSubmission,
)
from retreat_registration.models.rule_kind import RuleKind


@dataclass(frozen=True)
class FieldRule:
    kind: RuleKind
    message: str = "Invalid value"
    min_length: int = 0
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    # Message used when a number is above ``maximum``
    maximum_message: Optional[str] = None
    choices: tuple[str, ...] = ()


REGISTRATION_RULES: dict[str, FieldRule] = {
    "full_name": FieldRule(
        RuleKind.REQUIRED_TEXT, "Please share your full name", min_length=2
    ),
    "gender": FieldRule(
        RuleKind.ENUMERATED_CHOICE,
        "Please select your gender",
        choices=tuple(g.value for g in Gender),
    ),
    "age": FieldRule(
        RuleKind.BOUNDED_NUMBER,
        "Your age is important",
        minimum=1,
        maximum=120,
        maximum_message="Please enter a valid age",
    ),
    "phone": FieldRule(
        RuleKind.REQUIRED_TEXT, "Please provide a valid phone number", min_length=10
    ),
    "email": FieldRule(RuleKind.EMAIL, "Please enter a valid email address"),
    "location": FieldRule(
        RuleKind.REQUIRED_TEXT, "Please share your location", min_length=2
    ),
    "church": FieldRule(RuleKind.OPTIONAL_TEXT),
    "affiliation": FieldRule(
        RuleKind.ENUMERATED_CHOICE,
        "Please select your affiliation",
        choices=tuple(a.value for a in Affiliation),
    ),
    "photo": FieldRule(RuleKind.IMAGE_ATTACHMENT, "Please upload an image file"),
    "how_heard": FieldRule(
        RuleKind.OPTIONAL_CHOICE,
        "Please pick one of the listed options",
        choices=tuple(h.value for h in HowHeard),
    ),
    "wants_drama_ministry": FieldRule(
        RuleKind.OPTIONAL_CHOICE,
        "Please pick one of the listed options",
        choices=tuple(d.value for d in DramaMinistry),
    ),
    "is_worship_minister": FieldRule(
        RuleKind.OPTIONAL_CHOICE,
        "Please pick one of the listed options",
        choices=tuple(w.value for w in WorshipMinister),
    ),
    "expectations": FieldRule(RuleKind.OPTIONAL_TEXT),
    "help_needed": FieldRule(RuleKind.OPTIONAL_TEXT),
    "prayer_requests": FieldRule(RuleKind.OPTIONAL_TEXT),
    "confirmation": FieldRule(RuleKind.MUST_BE_TRUE, "Please confirm to proceed"),
}

# Attribute name -> name used on the wire (multipart field name)
WIRE_NAMES: dict[str, str] = {
    name: field.alias or name
    for name, field in RegistrationSubmission.model_fields.items()
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_whole_number(value: Any) -> Optional[int]:
    """Return ``value`` as an int, or None if it is not a whole number"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_flag(value: Any) -> bool:
    """Checkbox values arrive as booleans locally and as "true" on the wire"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def validate_field(value: Any, rule: FieldRule) -> Optional[str]:
    """
    Check a single value against its rule.

    Returns:
        None when the value is accepted, otherwise the rule's reason string.
    """
    kind = rule.kind

    if kind == RuleKind.REQUIRED_TEXT:
        if not isinstance(value, str) or len(value.strip()) < max(rule.min_length, 1):
            return rule.message
        return None

    if kind == RuleKind.EMAIL:
        if _is_blank(value) or not isinstance(value, str):
            return rule.message
        try:
            validate_email(value.strip(), check_deliverability=False)
        except EmailNotValidError:
            return rule.message
        return None

    if kind == RuleKind.BOUNDED_NUMBER:
        number = parse_whole_number(value)
        if number is None:
            return rule.message
        if rule.minimum is not None and number < rule.minimum:
            return rule.message
        if rule.maximum is not None and number > rule.maximum:
            return rule.maximum_message or rule.message
        return None

    if kind == RuleKind.ENUMERATED_CHOICE:
        if value not in rule.choices:
            return rule.message
        return None

    if kind == RuleKind.OPTIONAL_CHOICE:
        if _is_blank(value) or value in rule.choices:
            return None
        return rule.message

    if kind == RuleKind.OPTIONAL_TEXT:
        if value is None or isinstance(value, str):
            return None
        return rule.message

    if kind == RuleKind.IMAGE_ATTACHMENT:
        if value is None:
            return None
        if not isinstance(value, PhotoAttachment):
            return rule.message
        # An empty file input is the same as no photo
        if value.size == 0:
            return None
        if not value.content_type.lower().startswith("image/"):
            return rule.message
        return None

    if kind == RuleKind.MUST_BE_TRUE:
        return None if parse_flag(value) else rule.message

    return rule.message


def validate_registration(
    values: Mapping[str, Any], rules: Mapping[str, FieldRule] = REGISTRATION_RULES
) -> dict[str, str]:
    """Validate every field and return a mapping of field name -> reason for invalid ones"""
    errors = {}
    for field_name, rule in rules.items():
        reason = validate_field(values.get(field_name), rule)
        if reason is not None:
            errors[field_name] = reason
    return errors


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if _is_blank(value):
        return None
    return value.strip()


def to_submission(values: Mapping[str, Any]) -> RegistrationSubmission:
    """
    Build a RegistrationSubmission from values that already passed validation.

    Raises:
        ValueError: If the values do not pass validation
    """
    errors = validate_registration(values)
    if errors:
        raise ValueError(f"Registration is not valid: {errors}")

    photo = values.get("photo")
    if photo is not None and photo.size == 0:
        photo = None

    return RegistrationSubmission(
        full_name=values["full_name"].strip(),
        gender=values["gender"],
        age=parse_whole_number(values["age"]),
        phone=values["phone"].strip(),
        email=values["email"].strip(),
        location=values["location"].strip(),
        church=_clean_optional(values.get("church")),
        affiliation=values["affiliation"],
        photo=photo,
        how_heard=_clean_optional(values.get("how_heard")),
        wants_drama_ministry=_clean_optional(values.get("wants_drama_ministry")),
        is_worship_minister=_clean_optional(values.get("is_worship_minister")),
        expectations=_clean_optional(values.get("expectations")),
        help_needed=_clean_optional(values.get("help_needed")),
        prayer_requests=_clean_optional(values.get("prayer_requests")),
        confirmation=True,
    )
