from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, ClassVar, Mapping, Optional

from ..common.validators import FieldViolation, Validator, validate_fields
from ..core.constants import GENERIC_ERROR_MESSAGE
from ..core.exceptions import ValidationError
from ..store import UNEXPECTED, RecordStore, StoreResult

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], Any]


class FormController:
    """Binds input values, per-field validation and submission to the store.

    Subclasses declare ``validators`` and ``initial`` and implement ``_commit``.
    Field errors never reach the store: ``submit`` stops locally when any
    field is invalid. Store errors end up in ``banner``.
    """

    validators: ClassVar[Mapping[str, Validator]] = {}
    initial: ClassVar[Mapping[str, str]] = {}
    success_message: ClassVar[str] = ""

    def __init__(self, store: RecordStore, *, on_success: Optional[SuccessCallback] = None):
        self._store = store
        self.on_success = on_success
        self.values: dict[str, str] = dict(self.initial)
        self.errors: dict[str, str] = {}
        self.banner = ""
        self.error_code: Optional[str] = None
        self.success = ""
        self.loading = False

    def set_field(self, name: str, value: Any) -> Optional[FieldViolation]:
        """Keystroke path: store the value and re-check just this field."""
        if name not in self.values:
            raise ValidationError(f"Unknown field: {name}")
        # JSON bodies may carry numbers or booleans; fields are always text
        self.values[name] = "" if value is None else str(value)

        validator = self.validators.get(name)
        violation = validator(self.values[name]) if validator else None
        if violation:
            self.errors[name] = violation.message
        else:
            self.errors.pop(name, None)
        return violation

    def update_fields(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            if name in self.values:
                self.set_field(name, value)

    def validate(self) -> bool:
        self.errors = validate_fields(self.values, self.validators)
        return not self.errors

    def reset(self) -> None:
        self.values = dict(self.initial)
        self.errors = {}

    async def _commit(self) -> StoreResult:
        raise NotImplementedError

    def _on_committed(self, data: Any) -> Any:
        """Hook: return what ``on_success`` should receive."""
        return data

    async def submit(self) -> bool:
        self.banner = ""
        self.error_code = None
        self.success = ""
        if not self.validate():
            return False

        self.loading = True
        try:
            result = await self._commit()
        except Exception:
            logger.exception("%s submit failed", type(self).__name__)
            self.banner = GENERIC_ERROR_MESSAGE
            self.error_code = UNEXPECTED
            return False
        finally:
            self.loading = False

        if result.error:
            self.error_code = result.error.code
            self.banner = GENERIC_ERROR_MESSAGE if result.error.code == UNEXPECTED else result.error.message
            return False

        payload = self._on_committed(result.data)
        self.success = self.success_message
        if self.on_success:
            outcome = self.on_success(payload)
            if inspect.isawaitable(outcome):
                await outcome
        return True

    def to_dict(self) -> dict:
        return {"values": self.values, "errors": self.errors, "banner": self.banner, "success": self.success}
