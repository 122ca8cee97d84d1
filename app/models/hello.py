"""SQLAlchemy model for persisted greetings."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text, func

from app.models.base import Base

NAME_MAX_LENGTH = 100


class HelloRecord(Base):
    __tablename__ = "hellos"
    __table_args__ = (
        CheckConstraint(
            f"name IS NULL OR length(name) <= {NAME_MAX_LENGTH}",
            name="ck_hellos_name_length",
        ),
        CheckConstraint("length(message) > 0", name="ck_hellos_message_not_empty"),
        # SQLite otherwise recycles the highest rowid after a delete.
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=True)
    message = Column(Text, nullable=False)
    created_at = Column(
        "createdAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
