"""Partial updates of entities addressed by field name.

A patch is a JSON object mapping field names to new values. Each patchable
entity type has a closed patch table listing the field names a patch may
touch; the declared type of each field comes from the model annotation and
drives coercion of the raw value.

The applier performs no business-rule validation. Uniqueness is not
re-checked before writing; a unique-constraint violation raised by the
database is reported as DuplicateConstraintError.

Read-modify-write is last-writer-wins unless optimistic locking is enabled,
in which case the UPDATE only matches the version that was read.
"""

from collections.abc import Iterable, Mapping
from typing import Annotated, Any

from pydantic import TypeAdapter, ValidationError
from pydantic.fields import FieldInfo
from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, col, select

from src.hirehub.core.exceptions import (
    ConcurrentUpdateError,
    DuplicateConstraintError,
    NotFoundError,
    TypeCoercionError,
    UnknownFieldError,
)
from src.hirehub.core.logging import get_logger
from src.hirehub.models import Company, CompanyInfo, Project, User
from src.hirehub.models.base import utc_now

logger = get_logger(__name__)


def _constrained(info: FieldInfo) -> Any:
    """Model annotation with the field's constraints (max_length and the like) attached."""
    if not info.metadata:
        return info.annotation
    return Annotated[info.annotation, *info.metadata]


class PatchTable:
    """Closed mapping of patchable field names to their declared types."""

    def __init__(self, model: type[SQLModel], fields: Iterable[str]):
        self.model = model
        self.entity_name = model.__name__
        declared = model.model_fields
        names = tuple(fields)
        undeclared = [name for name in names if name not in declared]
        if undeclared:
            raise ValueError(f"{self.entity_name} has no field(s) {undeclared}")
        self._adapters: dict[str, TypeAdapter[Any]] = {
            name: TypeAdapter(_constrained(declared[name])) for name in names
        }

    @property
    def fields(self) -> frozenset[str]:
        return frozenset(self._adapters)

    def prepare(self, patch: Mapping[Any, Any]) -> dict[str, Any]:
        """Check every key, then coerce every value.

        Nothing is mutated here, so a bad key or value anywhere in the patch
        leaves the entity untouched.

        Raises:
            UnknownFieldError: if any key is not in the table (all are reported)
            TypeCoercionError: if a value does not fit the field's type
        """
        unknown = [str(key) for key in patch if key not in self._adapters]
        if unknown:
            raise UnknownFieldError(self.entity_name, unknown)

        values: dict[str, Any] = {}
        for name, raw in patch.items():
            try:
                values[name] = self._adapters[name].validate_python(raw)
            except ValidationError as e:
                reason = e.errors()[0]["msg"]
                raise TypeCoercionError(self.entity_name, name, reason) from e
        return values


PATCH_TABLES: dict[type[SQLModel], PatchTable] = {
    table.model: table
    for table in (
        PatchTable(Company, ("username", "email", "name", "phone")),
        PatchTable(
            CompanyInfo,
            ("ceo", "address", "company_call", "registration_number", "registration_file"),
        ),
        PatchTable(User, ("username", "email", "name", "phone")),
        PatchTable(Project, ("name", "description")),
    )
}


def patch_table_for(model: type[SQLModel]) -> PatchTable:
    """Get the patch table for an entity type.

    Raises:
        TypeError: if the type does not support partial updates
    """
    try:
        return PATCH_TABLES[model]
    except KeyError:
        raise TypeError(f"{model.__name__} does not support partial updates") from None


class PatchApplier:
    """Applies patches to loaded entities and persists them in one UPDATE."""

    def __init__(self, session: AsyncSession, optimistic_locking: bool = False):
        self.session = session
        self.optimistic_locking = optimistic_locking

    async def apply[M: SQLModel](
        self,
        entity: M,
        patch: Mapping[Any, Any],
        expected_version: int | None = None,
    ) -> M:
        """Overwrite the patched fields of `entity`, persist, and return it refreshed.

        Bookkeeping columns are maintained on every write: `updated_at` is
        set to now and `version` is incremented. The patch is written by a
        single UPDATE statement. Changes already pending in the session are
        not part of it: autoflush sends them as their own statements first,
        in the same transaction.

        Args:
            entity: Entity previously loaded through this session
            patch: Field name -> raw value
            expected_version: Version the client last saw. Only checked
                when optimistic locking is enabled.

        Raises:
            UnknownFieldError: patch key not patchable for this type
            TypeCoercionError: value cannot be converted to the field type
            NotFoundError: entity row no longer exists
            ConcurrentUpdateError: version mismatch (optimistic locking only)
            DuplicateConstraintError: database unique constraint violated
        """
        table = patch_table_for(type(entity))
        values = table.prepare(patch)

        model: Any = table.model
        entity_id = entity.id  # type: ignore[attr-defined]
        read_version = entity.version  # type: ignore[attr-defined]

        if (
            self.optimistic_locking
            and expected_version is not None
            and expected_version != read_version
        ):
            raise ConcurrentUpdateError(table.entity_name, entity_id)

        stmt = update(model).where(col(model.id) == entity_id)
        if self.optimistic_locking:
            stmt = stmt.where(col(model.version) == read_version)
        stmt = stmt.values(
            **values,
            updated_at=utc_now(),
            version=col(model.version) + 1,
        ).execution_options(synchronize_session=False)

        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateConstraintError(
                f"{table.entity_name} update conflicts with an existing record"
            ) from e

        if result.rowcount == 0:  # type: ignore[attr-defined]
            await self.session.rollback()
            if self.optimistic_locking and await self._exists(model, entity_id):
                raise ConcurrentUpdateError(table.entity_name, entity_id)
            raise NotFoundError(table.entity_name, entity_id)

        await self.session.commit()
        await self.session.refresh(entity)

        logger.info(
            "Entity patched",
            entity=table.entity_name,
            entity_id=entity_id,
            fields=sorted(values),
            version=entity.version,  # type: ignore[attr-defined]
        )
        return entity

    async def _exists(self, model: Any, entity_id: int) -> bool:
        result = await self.session.execute(
            select(func.count()).select_from(model).where(col(model.id) == entity_id)
        )
        return result.scalar_one() > 0
