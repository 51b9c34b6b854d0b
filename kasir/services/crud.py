"""
Generic list/create/update/delete over a single table.
"""
import logging
from typing import Any, Dict, List, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from kasir.core.exceptions import ConflictError, NotFoundError, ServiceError, StoreError, ValidationError

logger = logging.getLogger(__name__)


class CrudService:
    """
    List/create/update/delete for one model.

    Subclasses set ``model``, ``label`` (used in client messages),
    ``order_by`` (column names; ``id`` last keeps listings stable) and the
    writable ``fields``.
    """

    model = None
    label = "Record"
    order_by: Sequence[str] = ("id",)
    fields: Sequence[str] = ()

    def list(self, db: Session) -> List[Dict[str, Any]]:
        """Return every row in a fixed order."""
        order = [getattr(self.model, name) for name in self.order_by]
        try:
            records = db.query(self.model).order_by(*order).all()
        except SQLAlchemyError as e:
            raise self._store_failure(db, "list", e)
        return [record.to_dict() for record in records]

    def get(self, db: Session, record_id: int):
        """Load one row or raise ``NotFoundError``."""
        try:
            record = db.get(self.model, record_id)
        except SQLAlchemyError as e:
            raise self._store_failure(db, "load", e)
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        return record

    def create(self, db: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        record = self.model(**self._writable(data))
        db.add(record)
        self._commit(db, "create", ValidationError(f"Invalid {self.label} data"))
        db.refresh(record)
        logger.info(f"{self.label} {record.id} created")
        return record.to_dict()

    def update(self, db: Session, record_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        record = self.get(db, record_id)
        for name, value in self._writable(data).items():
            setattr(record, name, value)
        self._commit(db, "update", ValidationError(f"Invalid {self.label} data"))
        db.refresh(record)
        logger.info(f"{self.label} {record_id} updated")
        return record.to_dict()

    def delete(self, db: Session, record_id: int) -> Dict[str, str]:
        record = self.get(db, record_id)
        db.delete(record)
        self._commit(
            db, "delete",
            ConflictError(f"{self.label} is still referenced by other records"),
        )
        logger.info(f"{self.label} {record_id} deleted")
        return {"message": f"{self.label} deleted successfully"}

    def _writable(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {name: data[name] for name in self.fields if name in data}

    def _commit(self, db: Session, action: str, on_integrity_error: ServiceError) -> None:
        """Commit, translating constraint violations into ``on_integrity_error``."""
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"Failed to {action} {self.label}: {e.orig}")
            raise on_integrity_error
        except SQLAlchemyError as e:
            raise self._store_failure(db, action, e)

    def _store_failure(self, db: Session, action: str, error: Exception) -> StoreError:
        db.rollback()
        logger.error(f"Failed to {action} {self.label}: {error}", exc_info=True)
        return StoreError()
