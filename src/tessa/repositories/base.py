"""
Generic repository over the account store.

Owner and user repositories share the same primary-key lookups,
filtered listing and single-row writes; those live here. Each write
commits on its own, so a record is durable as soon as the call returns
and a later compensating write sees it.
"""

from typing import Generic, TypeVar, Type, List, Optional, Dict, Any, Sequence
from sqlalchemy.orm import Query, Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import desc, asc

from models.base import Base
from core.exceptions import DatabaseException, DuplicateException, NotFoundException


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Account store access for one model.

    Store failures surface as DatabaseException. IntegrityError from
    ``create`` is the exception: it is re-raised as is so subclasses can
    turn unique-constraint violations into DuplicateException.

    Example:
        class OwnerRepository(BaseRepository[Owner]):
            def __init__(self, db: Session):
                super().__init__(Owner, db)
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    @property
    def model_name(self) -> str:
        return self.model.__name__

    def _filtered(self, filters: Optional[Dict[str, Any]]) -> Query:
        query = self.db.query(self.model)
        for column_name, value in (filters or {}).items():
            if hasattr(self.model, column_name):
                query = query.filter(getattr(self.model, column_name) == value)
        return query

    # ========================================================================
    # Reads
    # ========================================================================

    def get(self, id: str) -> Optional[ModelType]:
        """Record with the primary key ``id``, or None."""
        try:
            return self.db.get(self.model, id)
        except Exception as e:
            raise DatabaseException(f"Failed to get {self.model_name} with id {id}") from e

    def get_or_fail(self, id: str) -> ModelType:
        """
        Raises:
            NotFoundException: If no record has the id
        """
        record = self.get(id)
        if record is None:
            raise NotFoundException(self.model_name, id)
        return record

    def get_by_filter(
        self,
        filters: Dict[str, Any],
        order_by: Sequence[str] = (),
        order_desc: bool = False
    ) -> List[ModelType]:
        """
        Records whose columns equal the given values.

        Args:
            filters: Column name to value; unknown columns are ignored
            order_by: Column names, most significant first
            order_desc: Sort every ``order_by`` column descending
        """
        direction = desc if order_desc else asc
        try:
            query = self._filtered(filters)
            columns = [getattr(self.model, name) for name in order_by if hasattr(self.model, name)]
            if columns:
                query = query.order_by(*(direction(column) for column in columns))
            return query.all()
        except Exception as e:
            raise DatabaseException(f"Failed to filter {self.model_name}") from e

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        try:
            return self._filtered(filters).count()
        except Exception as e:
            raise DatabaseException(f"Failed to count {self.model_name}") from e

    # ========================================================================
    # Writes
    # ========================================================================

    def create(self, record: ModelType) -> ModelType:
        """Insert ``record`` and return it as stored."""
        try:
            self.db.add(record)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        except Exception as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to create {self.model_name}") from e

        self.db.refresh(record)
        return record

    def create_from_dict(self, data: Dict[str, Any]) -> ModelType:
        return self.create(self.model(**data))

    def update_by_id(self, id: str, data: Dict[str, Any]) -> Optional[ModelType]:
        """
        Set the given columns on the record ``id``.

        Returns:
            The updated record, or None when no record has the id
        """
        record = self.get(id)
        if record is None:
            return None

        for column_name, value in data.items():
            if hasattr(record, column_name):
                setattr(record, column_name, value)

        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to update {self.model_name}") from e

        self.db.refresh(record)
        return record

    def delete(self, record: ModelType) -> None:
        try:
            self.db.delete(record)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            raise DatabaseException(f"Failed to delete {self.model_name}") from e

    def exists(self, id: str) -> bool:
        try:
            return self._filtered({"id": id}).count() > 0
        except Exception as e:
            raise DatabaseException(f"Failed to check existence of {self.model_name}") from e


class EmailKeyedRepository(BaseRepository[ModelType]):
    """Repository for models with a unique ``email`` column."""

    def get_by_email(self, email: str) -> Optional[ModelType]:
        try:
            return self._filtered({"email": email}).first()
        except Exception as e:
            raise DatabaseException(f"Failed to get {self.model_name} by email") from e

    def create_unique(self, data: Dict[str, Any]) -> ModelType:
        """
        Insert a record whose email is not yet taken.

        Raises:
            DuplicateException: If another record already uses the email
        """
        email = data.get("email")
        if self.get_by_email(email) is not None:
            raise DuplicateException(self.model_name, "email", email)

        try:
            return self.create_from_dict(data)
        except IntegrityError as e:
            # Concurrent insert won the unique index
            raise DuplicateException(self.model_name, "email", email) from e
