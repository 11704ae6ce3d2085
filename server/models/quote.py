from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from server.core.database import Base


class StoredQuote(Base):
    """
    Persisted USD/BRL bid (cotação)

    One row is written per successful request to the quote endpoint.
    Rows are never updated or deleted.
    """

    __tablename__ = "cotacoes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    bid: Mapped[str | None] = mapped_column(Text)
    timestamp: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"StoredQuote(id={self.id!r}, bid={self.bid!r}, timestamp={self.timestamp!r})"
