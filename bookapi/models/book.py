from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookapi.models.base import Base


class BookRecord(Base):
    """Shape of the externally owned ``BOOKS`` table."""

    __tablename__ = "BOOKS"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column("TITLE", Text)
    author_name: Mapped[str] = mapped_column("AUTHOR_NAME", Text)
