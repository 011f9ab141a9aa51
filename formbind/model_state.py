"""
ModelState: in-memory error provider for one request.

Intent:
    Hold the outcome of validating a submitted form (errors per field name
    plus the raw submitted strings) so a re-rendered form can show errors and
    redisplay what the user typed.

Design:
    - Before validation ran, every field is ``UNVALIDATED``.
    - After validation, a field with errors is ``INVALID``, every other
      field ``VALID``.
    - ``from_validation_error`` maps pydantic error locations to field names
      the default name resolver produces: ``("items", 0, "name")`` becomes
      ``"items[0].name"``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .ports import ComponentState, parse_path

_log = logging.getLogger("formbind.validation")

ModelT = TypeVar("ModelT", bound=BaseModel)


def loc_to_name(loc: Sequence[Any]) -> str:
    """Convert a pydantic error location into a dotted field name."""
    name = ""
    for part in loc:
        if isinstance(part, int):
            name += f"[{part}]"
        else:
            name = f"{name}.{part}" if name else str(part)
    return name


def _raw_string(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def flatten_submission(submitted: Mapping[str, Any]) -> Dict[str, Any]:
    """Collapse single-element lists (as produced by ``parse_qs``)."""
    flat: Dict[str, Any] = {}
    for key, value in submitted.items():
        if isinstance(value, (list, tuple)) and len(value) == 1:
            flat[key] = value[0]
        else:
            flat[key] = value
    return flat


def unflatten_submission(submitted: Mapping[str, Any]) -> Dict[str, Any]:
    """Nest field names into the shape pydantic validates.

    ``{"address.city": "x"}`` becomes ``{"address": {"city": "x"}}`` and
    ``{"items[0].name": "x"}`` becomes ``{"items": [{"name": "x"}]}``. Indexed
    entries are ordered by index; gaps are closed.
    """
    nested: Dict[str, Any] = {}
    for key, value in flatten_submission(submitted).items():
        parts = [token for _, token in parse_path(key)]
        if not parts:
            continue
        target = nested
        for part in parts[:-1]:
            child = target.get(part)
            if not isinstance(child, dict):
                child = {}
                target[part] = child
            target = child
        target[parts[-1]] = value
    return _indexes_to_lists(nested)


def _indexes_to_lists(node: Any) -> Any:
    if not isinstance(node, dict):
        return node
    converted = {key: _indexes_to_lists(child) for key, child in node.items()}
    if converted and all(isinstance(key, int) for key in converted):
        return [converted[index] for index in sorted(converted)]
    return converted


class ModelState:
    """Errors and attempted values keyed by field name.

    Parameters:
        validated: Whether validation has run; defaults to ``False`` so an
            empty ModelState reports every field as unvalidated.
    """

    def __init__(self, *, validated: bool = False) -> None:
        self.validated = validated
        self._errors: Dict[str, List[str]] = {}
        self._attempted: Dict[str, str] = {}

    # -- mutation -----------------------------------------------------------

    def mark_validated(self) -> "ModelState":
        self.validated = True
        return self

    def add_error(self, name: str, message: str) -> "ModelState":
        self._errors.setdefault(name, []).append(message)
        self.validated = True
        return self

    def set_attempted_value(self, name: str, raw: Any) -> "ModelState":
        value = _raw_string(raw)
        if value is None:
            self._attempted.pop(name, None)
        else:
            self._attempted[name] = value
        return self

    def set_attempted_values(self, submitted: Mapping[str, Any]) -> "ModelState":
        for name, raw in submitted.items():
            self.set_attempted_value(name, raw)
        return self

    # -- queries ------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        return self.validated and not any(self._errors.values())

    @property
    def error_names(self) -> Tuple[str, ...]:
        return tuple(name for name, errors in self._errors.items() if errors)

    def get_state_for(self, name: str) -> ComponentState:
        if not self.validated:
            return ComponentState.UNVALIDATED
        if self._errors.get(name):
            return ComponentState.INVALID
        return ComponentState.VALID

    def get_errors_for(self, name: str) -> Tuple[str, ...]:
        return tuple(self._errors.get(name, ()))

    def get_attempted_value_for(self, name: str) -> Optional[str]:
        return self._attempted.get(name)

    # -- pydantic integration -------------------------------------------------

    @classmethod
    def from_validation_error(
        cls,
        exc: ValidationError,
        submitted: Optional[Mapping[str, Any]] = None,
    ) -> "ModelState":
        state = cls(validated=True)
        state.set_attempted_values(submitted or {})
        for error in exc.errors():
            state.add_error(loc_to_name(error.get("loc", ())), str(error.get("msg", "")))
        _log.debug("validation failed for %d field(s)", len(state.error_names))
        return state

    @classmethod
    def from_submission(
        cls,
        model_cls: Type[ModelT],
        submitted: Mapping[str, Any],
    ) -> Tuple[Optional[ModelT], "ModelState"]:
        """Validate ``submitted`` against a pydantic model.

        Returns the model (or ``None`` when invalid) and the resulting state;
        attempted values are recorded either way.
        """
        try:
            model = model_cls.model_validate(unflatten_submission(submitted))
        except ValidationError as exc:
            return None, cls.from_validation_error(exc, submitted)
        state = cls(validated=True).set_attempted_values(submitted)
        return model, state


__all__ = [
    "ModelState",
    "loc_to_name",
    "flatten_submission",
    "unflatten_submission",
]
