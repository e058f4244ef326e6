"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import Annotated, Optional, Sequence, TypeVar

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC so all timestamps compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]

R = TypeVar("R")


def oldest_first(record) -> tuple[bool, Optional[datetime]]:
    """Sort key for ascending creation time with undated records last."""
    timestamp = record.creation_timestamp
    return (timestamp is None, timestamp)


def sort_newest_first(records: Sequence[R]) -> list[R]:
    """Order records by descending creation time, undated records last.

    Records created at the same instant keep their input order.
    """
    # sorted() is stable, including with reverse=True
    return sorted(
        records,
        key=lambda r: (r.creation_timestamp is not None, r.creation_timestamp),
        reverse=True,
    )


# Backends disagree on the spelling of ids and creation timestamps
ID_ALIASES = AliasChoices("id", "_id")
CREATED_ALIASES = AliasChoices("creation_timestamp", "created_at", "createdAt")


def id_field():
    """Entity id accepting both ``id`` and ``_id``."""
    return Field(validation_alias=ID_ALIASES)


def created_field():
    """Creation timestamp accepting every backend spelling.

    Records read from a backend keep None when the timestamp is missing;
    services stamp the records they create.
    """
    return Field(default=None, validation_alias=CREATED_ALIASES)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
        populate_by_name=True,
    )
