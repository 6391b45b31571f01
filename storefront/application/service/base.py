"""Base service object.

A service object wraps one business operation in a fixed lifecycle:

1. ``validate_params`` checks params against the class ``contract``
2. ``setup`` derives state from params (optional)
3. ``execute`` does the work and sets ``result`` (required)

Any step may call ``exit_early`` to stop without error, or ``fail`` to stop
with an errors payload that ``run`` then raises to the caller::

    class RenewService(ServiceBase):
        contract = RenewParams

        class NotRenewable(ServiceError):
            pass

        def setup(self):
            if not self.values.auto_renew:
                self.exit_early()

        def execute(self):
            if self.values.expired:
                self.fail("Service expired", self.NotRenewable, {"id": ...})
            self.result = ...

    result = RenewService({"service_id": ...}).run()
"""

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, NoReturn

import logfire
from pydantic import BaseModel

from storefront.application.service.contract import (
    ContractViolation,
    Validator,
    validator_for,
)
from storefront.application.service.error import (
    ExecuteNotImplemented,
    ServiceError,
    ServiceExit,
    ServiceReuseError,
    ValidationFailed,
)


class Outcome(str, Enum):
    """How a lifecycle step finished."""

    CONTINUE = "continue"
    STOP = "stop"
    FAIL = "fail"


class ServiceBase:
    """Base class for all service objects.

    Attributes:
        contract: Pydantic model describing accepted params (None for no contract)
        result: Value returned by ``run`` on success
        values: Validated contract instance, available from ``setup`` onwards
    """

    contract: ClassVar[type[BaseModel] | None] = None

    def __init__(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        validator: Validator | None = None,
    ) -> None:
        """Initialize service.

        Args:
            params: Service params
            validator: Contract validator (defaults to one built from ``contract``)
        """
        self._params = MappingProxyType(dict(params or {}))
        self.validator = (
            validator if validator is not None else validator_for(self.contract)
        )
        self.result: Any = None
        self.values: BaseModel | None = None
        self._errors: dict[str, Any] = {}
        self._failure: ServiceError | None = None
        self._ran = False

    @property
    def params(self) -> Mapping[str, Any]:
        return self._params

    @property
    def errors(self) -> Mapping[str, Any]:
        return MappingProxyType(self._errors)

    @property
    def name(self) -> str:
        return type(self).__name__

    def run(self) -> Any:
        """Run the service lifecycle.

        Returns:
            The service result

        Raises:
            ServiceError: The failure raised by ``fail``, carrying ``errors``
            ServiceReuseError: If the service has already been run
        """
        if self._ran:
            raise ServiceReuseError(self.name)
        self._ran = True

        with logfire.span("{service} run", service=self.name):
            outcome = Outcome.CONTINUE
            for step in (self.validate_params, self.setup, self.execute):
                outcome = self._advance(step)
                if outcome is not Outcome.CONTINUE:
                    break

            if outcome is not Outcome.CONTINUE and self.failure():
                logfire.warn(
                    "{service} failed: {error}",
                    service=self.name,
                    error=self._errors.get("error"),
                    error_type=self._failure_kind_name(),
                )
                raise self._failure

            if outcome is not Outcome.CONTINUE:
                logfire.debug("{service} exited early", service=self.name)

        return self.result

    def validate_params(self) -> None:
        """Validate params against the contract and store the validated values."""
        try:
            self.values = self.validator.validate(self.params)
        except ContractViolation as e:
            message = "Invalid parameters"
            if e.violations:
                first = e.violations[0]
                # Model-level errors have no location
                field = first.field or "params"
                message = f"{message}: {field} {first.message.lower()}"
            self.fail(
                message,
                ValidationFailed,
                {"details": [violation.model_dump() for violation in e.violations]},
            )

    def setup(self) -> None:
        """Derive state from params. Override when needed."""
        pass

    def execute(self) -> None:
        """Do the work. Subclasses must override this."""
        self.fail(
            f"{self.name} must implement the execute method", ExecuteNotImplemented
        )

    def success(self) -> bool:
        return not self._errors

    def failure(self) -> bool:
        return not self.success()

    def fail(
        self,
        message: str = "",
        error_type: type[ServiceError] = ServiceError,
        context: Mapping[str, Any] | None = None,
    ) -> NoReturn:
        """Record an errors payload and stop the service.

        Args:
            message: Failure message
            error_type: Failure kind to raise (a ServiceError subclass)
            context: Extra fields merged into the errors payload

        Raises:
            error_type: Always
            TypeError: If error_type is not a ServiceError subclass
        """
        if not (isinstance(error_type, type) and issubclass(error_type, ServiceError)):
            raise TypeError(
                f"error_type must subclass ServiceError, got {error_type!r}"
            )

        self._errors = {"error": message, "error_type": error_type, **(context or {})}
        self._failure = error_type(message, dict(self._errors))
        raise self._failure

    def exit_early(self) -> NoReturn:
        """Stop the service without error."""
        raise ServiceExit()

    def _advance(self, step: Callable[[], None]) -> Outcome:
        try:
            step()
        except ServiceError:
            return Outcome.FAIL
        except ServiceExit:
            return Outcome.STOP
        return Outcome.CONTINUE

    def _failure_kind_name(self) -> str:
        kind = self._errors.get("error_type")
        return getattr(kind, "__name__", str(kind))
