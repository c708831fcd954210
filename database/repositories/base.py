"""
Base repository with common CRUD operations.

Provides a generic base class for all repositories to reduce code duplication.
"""
from typing import Any, TypeVar, Generic, Optional, List, Mapping, Type, Tuple
from abc import ABC

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import NotFoundError, ValidationError
from database.base import Base

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Abstract base repository with common CRUD operations.

    Provides:
    - create: Add new entity and assign its ID
    - get_by_id: Get single entity by ID
    - get_or_raise: Same, but raise not_found_error when missing
    - get_all: Get all entities with optional limit/offset
    - update: Set mutable fields on an existing entity
    - delete: Delete entity by ID
    - count: Count all entities
    - exists: Check if entity exists by ID

    Usage:
        class AppointmentRepository(BaseRepository[Appointment]):
            model_class = Appointment
            not_found_error = AppointmentNotFoundError
            mutable_fields = Appointment.MUTABLE_FIELDS

            async def get_by_dentist(self, dentist: str):
                # Custom method
                ...

    Repositories only flush. Committing is up to whoever owns the session.
    """

    model_class: Type[ModelType]
    not_found_error: Type[NotFoundError] = NotFoundError
    mutable_fields: Tuple[str, ...] = ()

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, entity: ModelType) -> ModelType:
        """
        Persist a new entity.

        The ID is assigned by the database during flush.

        Args:
            entity: Transient entity to add

        Returns:
            The same entity, now with its ID
        """
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by its primary key ID.

        Args:
            entity_id: Primary key ID

        Returns:
            Entity or None if not found
        """
        result = await self.session.execute(
            select(self.model_class).where(self.model_class.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def get_or_raise(self, entity_id: int) -> ModelType:
        """Get entity by ID or raise not_found_error."""
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise self.not_found_error(entity_id)
        return entity

    async def get_all(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None
    ) -> List[ModelType]:
        """
        Get all entities ordered by ID.

        Args:
            limit: Optional maximum number of results
            offset: Optional number of rows to skip

        Returns:
            List of entities
        """
        query = select(self.model_class).order_by(self.model_class.id)
        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update(self, entity_id: int, fields: Mapping[str, Any]) -> ModelType:
        """
        Update entity in database.

        Every key in ``fields`` must be listed in ``mutable_fields``.
        Changes are flushed but not committed.

        Args:
            entity_id: Primary key ID
            fields: New values keyed by attribute name

        Returns:
            Updated entity

        Raises:
            ValidationError: If a key is not a mutable field
            NotFoundError: If no entity has this ID
        """
        for name in fields:
            if name not in self.mutable_fields:
                raise ValidationError(name, "field cannot be updated")

        entity = await self.get_or_raise(entity_id)
        for name, value in fields.items():
            setattr(entity, name, value)
        await self.session.flush()
        return entity

    async def delete(self, entity_id: int) -> None:
        """
        Delete entity by ID.

        Args:
            entity_id: Primary key ID

        Raises:
            NotFoundError: If no entity has this ID
        """
        entity = await self.get_or_raise(entity_id)
        await self.session.delete(entity)
        await self.session.flush()

    async def count(self) -> int:
        """
        Count all entities.

        Returns:
            Total count of entities
        """
        result = await self.session.execute(
            select(func.count(self.model_class.id))
        )
        return result.scalar() or 0

    async def exists(self, entity_id: int) -> bool:
        """
        Check if entity exists by ID.

        Args:
            entity_id: Primary key ID

        Returns:
            True if exists, False otherwise
        """
        result = await self.session.execute(
            select(func.count(self.model_class.id)).where(
                self.model_class.id == entity_id
            )
        )
        return (result.scalar() or 0) > 0
