from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from beercount.core.database import Base


class BatchRow(Base):
    __tablename__ = "batches"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column("batch_id", Integer, primary_key=True, autoincrement=True)
    # Plain column, not a foreign key: deleting a beer leaves its batches alone.
    beer_id: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    user: Mapped[str] = mapped_column(Text, nullable=False, default="", index=True)
    date: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    count03: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    count05: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
