"""Permission domain entity.

A permission grants an action on a resource. API and DATA permissions can be
narrowed with attribute conditions; DATA permissions can additionally limit
the visible fields.

Mutators return Result instead of raising so callers can surface the exact
rule that was violated.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import PermissionStatus, PermissionType
from src.domain.value_objects import Condition, PermissionConditions


@dataclass(kw_only=True)
class Permission:
    """Permission aggregate.

    Attributes:
        id: Unique permission identifier.
        tenant_id: Tenant the permission belongs to.
        code: Machine code, unique per tenant (e.g. "invoice:read").
        name: Display name.
        type: MENU, BUTTON, API or DATA.
        action: Verb granted ("read", "update", ...).
        resource: Resource the action applies to.
        status: Lifecycle status.
        conditions: Attribute conditions (API and DATA only).
        fields: Visible fields (DATA only).
        created_at: Creation time.
        updated_at: Last modification time.
    """

    id: UUID
    tenant_id: str
    code: str
    name: str
    type: PermissionType
    action: str
    resource: str | None = None
    status: PermissionStatus = PermissionStatus.ACTIVE
    conditions: PermissionConditions = field(default_factory=PermissionConditions)
    fields: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if self.conditions.has_conditions() and not self.type.can_have_conditions():
            raise ValueError(f"{self.type.value} permissions cannot have conditions")
        if self.fields and not self.type.can_have_fields():
            raise ValueError(f"{self.type.value} permissions cannot restrict fields")

    def is_active(self) -> bool:
        return self.status == PermissionStatus.ACTIVE

    def has_conditions(self) -> bool:
        return self.conditions.has_conditions()

    def to_query_predicate(self) -> dict[str, Any]:
        """Compiled predicate of this permission's conditions."""
        return self.conditions.to_query_predicate()

    def set_conditions(
        self,
        conditions: PermissionConditions | Iterable[Mapping[str, Any] | Condition],
    ) -> Result[None, ValidationError]:
        """Replace the condition list.

        Args:
            conditions: A built PermissionConditions or the raw wire list.

        Returns:
            Success(None) when attached.
            Failure(ValidationError) if the type does not take conditions or
            any entry is invalid. The previous conditions are kept on failure.
        """
        if not self.type.can_have_conditions():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.CONDITIONS_NOT_SUPPORTED,
                    message=f"{self.type.value} permissions cannot have conditions",
                    field="conditions",
                )
            )

        if not isinstance(conditions, PermissionConditions):
            match PermissionConditions.create(conditions):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=built):
                    conditions = built

        self.conditions = conditions
        self._touch()
        return Success(value=None)

    def clear_conditions(self) -> None:
        self.conditions = PermissionConditions.empty()
        self._touch()

    def set_fields(self, fields: Iterable[str]) -> Result[None, ValidationError]:
        """Replace the visible field list (DATA permissions only)."""
        if not self.type.can_have_fields():
            return self._fields_not_supported()

        cleaned = list(fields)
        if any(not isinstance(f, str) or not f.strip() for f in cleaned):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Field names must be non-empty strings",
                    field="fields",
                )
            )
        self.fields = list(dict.fromkeys(cleaned))
        self._touch()
        return Success(value=None)

    def add_field(self, name: str) -> Result[None, ValidationError]:
        if not self.type.can_have_fields():
            return self._fields_not_supported()
        if not name or not name.strip():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Field name must not be empty",
                    field="fields",
                )
            )
        if name not in self.fields:
            self.fields.append(name)
            self._touch()
        return Success(value=None)

    def remove_field(self, name: str) -> Result[None, ValidationError]:
        if not self.type.can_have_fields():
            return self._fields_not_supported()
        if name in self.fields:
            self.fields.remove(name)
            self._touch()
        return Success(value=None)

    def activate(self) -> Result[None, ConflictError]:
        if not self.status.can_be_activated():
            return self._state_conflict("activate")
        self.status = PermissionStatus.ACTIVE
        self._touch()
        return Success(value=None)

    def suspend(self) -> Result[None, ConflictError]:
        if not self.status.can_be_suspended():
            return self._state_conflict("suspend")
        self.status = PermissionStatus.SUSPENDED
        self._touch()
        return Success(value=None)

    def _state_conflict(self, action: str) -> Failure[ConflictError]:
        return Failure(
            error=ConflictError(
                code=ErrorCode.PERMISSION_STATE_CONFLICT,
                message=f"Cannot {action} a permission that is {self.status.value}",
                resource_type="Permission",
                conflicting_field="status",
            )
        )

    def _fields_not_supported(self) -> Failure[ValidationError]:
        return Failure(
            error=ValidationError(
                code=ErrorCode.FIELDS_NOT_SUPPORTED,
                message=f"{self.type.value} permissions cannot restrict fields",
                field="fields",
            )
        )

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
