"""Controller for bond calculator submissions.

Runs one submission at a time through validate -> calculate and exposes the
outcome as an explicit state. Front ends render from the controller's
attributes (state, field_errors, result, error_message) and call `submit`,
`update_field` and `reset`.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from bond_client.calculator.validation import (
    BondField,
    FieldErrors,
    build_bond_request,
    clear_field_error,
    parse_frequency,
    validate_bond_form,
)
from bond_client.error_handler import ErrorHandler
from bond_client.integrations.contracts.bond import (
    DEFAULT_FREQUENCY,
    BondCalculationRequest,
    BondCalculationResponse,
)

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class SubmissionEvent(str, Enum):
    SUBMIT = "submit"
    VALIDATION_FAILED = "validation_failed"
    VALIDATION_PASSED = "validation_passed"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    RESET = "reset"


class InvalidTransitionError(ValueError):
    def __init__(self, state: SubmissionState, event: SubmissionEvent) -> None:
        super().__init__(f"Cannot apply '{event.value}' while '{state.value}'")
        self.state = state
        self.event = event


_S = SubmissionState
_E = SubmissionEvent

_TRANSITIONS: Dict[Tuple[SubmissionState, SubmissionEvent], SubmissionState] = {
    (_S.IDLE, _E.SUBMIT): _S.VALIDATING,
    (_S.REJECTED, _E.SUBMIT): _S.VALIDATING,
    (_S.SUCCESS, _E.SUBMIT): _S.VALIDATING,
    (_S.FAILED, _E.SUBMIT): _S.VALIDATING,
    (_S.VALIDATING, _E.VALIDATION_FAILED): _S.REJECTED,
    (_S.VALIDATING, _E.VALIDATION_PASSED): _S.LOADING,
    (_S.LOADING, _E.SUCCEEDED): _S.SUCCESS,
    (_S.LOADING, _E.FAILED): _S.FAILED,
}
for _state in SubmissionState:
    if _state is not _S.LOADING:
        _TRANSITIONS[(_state, _E.RESET)] = _S.IDLE


def transition(state: SubmissionState, event: SubmissionEvent) -> SubmissionState:
    try:
        return _TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransitionError(state, event) from None


_FIELD_KEYS = {f.value for f in BondField}

Listener = Callable[["SubmissionController"], None]


class SubmissionController:
    """Runs bond calculator submissions and exposes their state."""

    def __init__(self, service, error_handler: Optional[ErrorHandler] = None):
        self.service = service
        self.error_handler = error_handler or ErrorHandler()
        self.state = SubmissionState.IDLE
        self.form_values: Dict[str, Any] = {"frequency": DEFAULT_FREQUENCY}
        self.field_errors: FieldErrors = {}
        self.result: Optional[BondCalculationResponse] = None
        self.error: Optional[Exception] = None
        self.error_message: Optional[str] = None
        self.last_request: Optional[BondCalculationRequest] = None
        self._listeners: List[Listener] = []

    @property
    def is_loading(self) -> bool:
        return self.state is SubmissionState.LOADING

    @property
    def inputs_enabled(self) -> bool:
        return not self.is_loading

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _apply(self, event: SubmissionEvent) -> None:
        previous = self.state
        self.state = transition(self.state, event)
        logger.debug("Submission %s -> %s (%s)", previous.value, self.state.value, event.value)
        for listener in self._listeners:
            listener(self)

    def update_field(self, field: Union[BondField, str], value: Any) -> None:
        """Store a form value and clear only that field's error."""
        key = field.value if isinstance(field, BondField) else field
        if key == "frequency":
            value = parse_frequency(value)
        self.form_values[key] = value
        if key in _FIELD_KEYS:
            self.field_errors = clear_field_error(self.field_errors, BondField(key))

    async def submit(
        self, values: Optional[Union[Mapping[str, Any], BondCalculationRequest]] = None
    ) -> SubmissionState:
        if self.is_loading:
            logger.debug("Submit ignored: a calculation is already in flight")
            return self.state

        if isinstance(values, BondCalculationRequest):
            values = values.to_payload()
        if values:
            values = {(k.value if isinstance(k, BondField) else k): v for k, v in values.items()}
            if values.get("frequency") not in (None, ""):
                values["frequency"] = parse_frequency(values["frequency"])
            self.form_values.update(values)

        self._apply(SubmissionEvent.SUBMIT)

        # a rejected submit keeps the previous outcome on screen
        errors = validate_bond_form(self.form_values)
        if errors:
            self.field_errors = errors
            self._apply(SubmissionEvent.VALIDATION_FAILED)
            return self.state

        self.field_errors = {}
        request = build_bond_request(self.form_values)
        self.last_request = request
        self.result = None
        self.error = None
        self.error_message = None
        self._apply(SubmissionEvent.VALIDATION_PASSED)

        try:
            result = await self.service.calculate_bond(request)
        except Exception as exc:
            self.error = exc
            self.error_message = self.error_handler.handle_exception(
                exc,
                request_data=request.to_payload(),
                request_url=getattr(self.service, "calculate_url", None),
            )
            self._apply(SubmissionEvent.FAILED)
        else:
            self.result = result
            self._apply(SubmissionEvent.SUCCEEDED)
        return self.state

    def submit_nowait(
        self, values: Optional[Union[Mapping[str, Any], BondCalculationRequest]] = None
    ) -> "asyncio.Task[SubmissionState]":
        """Schedule `submit` on the running loop and return the task."""
        return asyncio.get_running_loop().create_task(self.submit(values))

    def reset(self) -> None:
        # raises while a calculation is in flight
        transition(self.state, SubmissionEvent.RESET)
        self.result = None
        self.error = None
        self.error_message = None
        self.field_errors = {}
        self._apply(SubmissionEvent.RESET)
