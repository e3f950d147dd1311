"""
Bond calculator: form validation, the submission controller and the
plain-text presentation of results.
"""

from .controller import InvalidTransitionError, SubmissionController, SubmissionEvent, SubmissionState, transition
from .validation import BondField, FormValidationError, build_bond_request, validate_bond_form

__all__ = [
    "InvalidTransitionError",
    "SubmissionController",
    "SubmissionEvent",
    "SubmissionState",
    "transition",
    "BondField",
    "FormValidationError",
    "build_bond_request",
    "validate_bond_form",
]
