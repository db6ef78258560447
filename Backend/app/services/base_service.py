import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class BaseService:
    """Holds the open store and turns database failures into StorageError."""

    def __init__(self, db_session: Session):
        self.db = db_session

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise StorageError(f"Failed to {action}: {e}") from e

    def _execute(self, stmt, action: str):
        try:
            return self.db.execute(stmt)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise StorageError(f"Failed to {action}: {e}") from e
