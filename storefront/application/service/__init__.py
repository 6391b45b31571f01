"""Service objects."""

from storefront.application.service.base import Outcome, ServiceBase
from storefront.application.service.contract import (
    ContractValidator,
    ContractViolation,
    NoContractValidator,
    Validator,
    Violation,
)
from storefront.application.service.error import (
    ExecuteNotImplemented,
    ServiceError,
    ServiceExit,
    ServiceReuseError,
    ValidationFailed,
)

__all__ = [
    "ContractValidator",
    "ContractViolation",
    "ExecuteNotImplemented",
    "NoContractValidator",
    "Outcome",
    "ServiceBase",
    "ServiceError",
    "ServiceExit",
    "ServiceReuseError",
    "ValidationFailed",
    "Validator",
    "Violation",
]
