"""Data models for the retreat registration service"""

from retreat_registration.models.registration import (
    PhotoAttachment,
    RegistrationSubmission,
)
from retreat_registration.models.result import HandlerOutcome, SubmissionResult
from retreat_registration.models.rule_kind import RuleKind

__all__ = [
    "RegistrationSubmission",
    "PhotoAttachment",
    "SubmissionResult",
    "HandlerOutcome",
    "RuleKind",
]
