from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker, with_loader_criteria

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def enum_column_type(enum_cls, name: str) -> Enum:
    """Store the enum's *values* (e.g. 'A+'), not its member names."""
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )


class SoftDeleteMixin:
    """Paranoid delete: rows are marked with deleted_at and hidden from ORM selects."""

    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    def soft_delete(self) -> None:
        self.deleted_at = utcnow()

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


@event.listens_for(Session, "do_orm_execute")
def _exclude_soft_deleted(execute_state):
    # pass execution_options(include_deleted=True) to see deleted rows
    if (
        execute_state.is_select
        and not execute_state.is_column_load
        and not execute_state.is_relationship_load
        and not execute_state.execution_options.get("include_deleted", False)
    ):
        execute_state.statement = execute_state.statement.options(
            with_loader_criteria(
                SoftDeleteMixin,
                lambda cls: cls.deleted_at.is_(None),
                include_aliases=True,
            )
        )


# Async engine and session factory
async def get_engine(database_url: str, **kwargs):
    return create_async_engine(database_url, **kwargs)

async def get_session_factory(engine):
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autocommit=False, autoflush=False
    )
