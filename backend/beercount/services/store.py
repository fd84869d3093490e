from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from beercount.core.database import Base, make_engine, make_session_factory
from beercount.core.errors import ConstraintError, NotFound, StorageError
from beercount.models.batch import BatchRow
from beercount.models.beer import BeerRow
from beercount.schemas.batch import Batch
from beercount.schemas.beer import Beer

logger = logging.getLogger("beercount.store")


def beer_from_row(row: BeerRow) -> Beer:
    return Beer(id=row.id, name=row.name, desc=row.desc)


def beer_to_row(beer: Beer, row: BeerRow | None = None) -> BeerRow:
    if row is None:
        row = BeerRow()
    row.name = beer.name
    row.desc = beer.desc
    return row


def batch_from_row(row: BatchRow) -> Batch:
    return Batch(
        id=row.id,
        beer_id=row.beer_id,
        user=row.user,
        date=row.date,
        count03=row.count03,
        count05=row.count05,
    )


def batch_to_row(batch: Batch, row: BatchRow | None = None) -> BatchRow:
    if row is None:
        row = BatchRow()
    row.beer_id = batch.beer_id
    row.user = batch.user
    row.date = batch.date
    row.count03 = batch.count03
    row.count05 = batch.count05
    return row


class Store:
    def __init__(self, engine: Engine, session_factory: sessionmaker[Session] | None = None) -> None:
        self.engine = engine
        self._session_factory = session_factory or make_session_factory(engine)

    @classmethod
    def open(cls, database_url: str) -> Store:
        return cls(make_engine(database_url))

    def create_schema(self) -> None:
        with self._errors("table creation"):
            Base.metadata.create_all(bind=self.engine)

    def close(self) -> None:
        self.engine.dispose()

    @contextmanager
    def _errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            logger.error("%s violated a constraint: %s", action, exc.orig)
            raise ConstraintError(f"{action} violated a constraint") from exc
        except SQLAlchemyError as exc:
            logger.exception("%s failed", action)
            raise StorageError(f"{action} failed") from exc

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        with self._errors(action), self._session_factory() as session:
            yield session

    # beers

    def insert_beer(self, beer: Beer) -> Beer:
        with self._session("beer insert") as session:
            row = beer_to_row(beer)
            session.add(row)
            session.commit()
            return beer_from_row(row)

    def get_beer(self, beer_id: int) -> Beer:
        with self._session("beer select") as session:
            row = session.get(BeerRow, beer_id)
            if row is None:
                raise NotFound("beer", beer_id)
            return beer_from_row(row)

    def list_beers(self) -> list[Beer]:
        with self._session("beer list select") as session:
            rows = session.scalars(select(BeerRow).order_by(BeerRow.id)).all()
            return [beer_from_row(row) for row in rows]

    def update_beer(self, beer: Beer) -> Beer:
        with self._session("beer update") as session:
            row = session.get(BeerRow, beer.id)
            if row is None:
                raise NotFound("beer", beer.id)
            beer_to_row(beer, row)
            session.commit()
            return beer_from_row(row)

    def delete_beer(self, beer_id: int) -> int:
        with self._session("beer delete") as session:
            row = session.get(BeerRow, beer_id)
            if row is None:
                raise NotFound("beer", beer_id)
            result = session.execute(delete(BeerRow).where(BeerRow.id == beer_id))
            session.commit()
            return result.rowcount

    # batches

    def insert_batch(self, batch: Batch) -> Batch:
        with self._session("batch insert") as session:
            row = batch_to_row(batch)
            session.add(row)
            session.commit()
            return batch_from_row(row)

    def get_batch(self, batch_id: int) -> Batch:
        with self._session("batch select") as session:
            row = session.get(BatchRow, batch_id)
            if row is None:
                raise NotFound("batch", batch_id)
            return batch_from_row(row)

    def list_batches_by_user(self, user: str) -> list[Batch]:
        with self._session("batch list select") as session:
            rows = session.scalars(select(BatchRow).where(BatchRow.user == user)).all()
            return [batch_from_row(row) for row in rows]

    def update_batch(self, batch: Batch) -> Batch:
        with self._session("batch update") as session:
            row = session.get(BatchRow, batch.id)
            if row is None:
                raise NotFound("batch", batch.id)
            batch_to_row(batch, row)
            session.commit()
            return batch_from_row(row)

    def delete_batch(self, batch_id: int) -> int:
        with self._session("batch delete") as session:
            row = session.get(BatchRow, batch_id)
            if row is None:
                raise NotFound("batch", batch_id)
            result = session.execute(delete(BatchRow).where(BatchRow.id == batch_id))
            session.commit()
            return result.rowcount
