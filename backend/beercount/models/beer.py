from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from beercount.core.database import Base


class BeerRow(Base):
    __tablename__ = "beers"
    __table_args__ = {"sqlite_autoincrement": True}

    # SQLite only aliases rowid (64-bit) for a column declared exactly INTEGER.
    id: Mapped[int] = mapped_column("beer_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    desc: Mapped[str] = mapped_column(Text, nullable=False, default="")
