from typing import Optional
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from movies_api.repositories.base_repository import BaseRepository
from movies_api.models.director import Director

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

class DirectorRepository(BaseRepository[Director]):
    """Director repository"""

    def __init__(self, db: Session):
        super().__init__(Director, db)

    def get_by_name(self, first_name: str, last_name: str) -> Optional[Director]:
        return self.filter_one_by(first_name=first_name, last_name=last_name)

    def get_or_create(self, first_name: str, last_name: str) -> int:
        """Return the ID of the director with this name, inserting it if absent.

        Relies on the (first_name, last_name) unique constraint, so concurrent
        callers always end up with the same row.
        """
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Director upsert is not supported on dialect {dialect}")

        stmt = insert(Director).values(first_name=first_name, last_name=last_name)
        # No-op update so RETURNING yields the existing row on conflict
        stmt = stmt.on_conflict_do_update(
            index_elements=["first_name", "last_name"],
            set_={"first_name": stmt.excluded.first_name},
        ).returning(Director.id)
        return self.db.execute(stmt).scalar_one()

