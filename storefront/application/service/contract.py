"""Parameter contracts for service objects.

A contract is a pydantic model declared on the service class. Validation is
done by a ``Validator`` handed to the service at construction time, so the
validation library stays swappable.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError


class Violation(BaseModel):
    """A single contract violation."""

    model_config = ConfigDict(frozen=True)

    field: str  # Dotted location, e.g. "domains.0.fqdn"
    message: str
    type: str


class ContractViolation(Exception):
    """Raised by a validator when params do not satisfy the contract."""

    def __init__(self, violations: list[Violation]):
        self.violations = violations
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Contract violated: {fields}")


class Validator(Protocol):
    """Checks service params against a contract."""

    def validate(self, params: Mapping[str, Any]) -> BaseModel | None:
        """Validate params.

        Args:
            params: Raw service params

        Returns:
            The validated contract values, or None when there is no contract

        Raises:
            ContractViolation: If params are invalid
        """
        ...


class NoContractValidator:
    """Validator for services that declare no contract."""

    def validate(self, params: Mapping[str, Any]) -> None:
        return None


class ContractValidator:
    """Validates params with a pydantic model."""

    def __init__(self, contract: type[BaseModel]) -> None:
        self.contract = contract

    def validate(self, params: Mapping[str, Any]) -> BaseModel:
        try:
            return self.contract.model_validate(dict(params))
        except PydanticValidationError as e:
            raise ContractViolation(
                [
                    Violation(
                        field=".".join(str(part) for part in error["loc"]),
                        message=error["msg"],
                        type=error["type"],
                    )
                    for error in e.errors()
                ]
            ) from e


def validator_for(contract: type[BaseModel] | None) -> Validator:
    """Build the default validator for a contract (or lack of one)."""
    if contract is None:
        return NoContractValidator()
    return ContractValidator(contract)
