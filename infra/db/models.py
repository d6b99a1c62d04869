# infra/db/models.py
from __future__ import annotations
from datetime import date, datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum as SAEnum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.domain import ResourceType, ScheduleType, ValorizationStatus


class ProjectORM(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    contract_total: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    actual_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    currency: Mapped[Optional[str]] = mapped_column(String(8), nullable=True)  # PEN, USD, ...


class ScheduleORM(Base):
    __tablename__ = "schedules"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    schedule_type: Mapped[ScheduleType] = mapped_column(
        SAEnum(ScheduleType), default=ScheduleType.PLANNING, nullable=False
    )
    is_baseline: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

Index("idx_schedules_project_id", ScheduleORM.project_id)
Index("idx_schedules_created", ScheduleORM.created_at)


class ResourceORM(Base):
    __tablename__ = "resources"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    resource_type: Mapped[ResourceType] = mapped_column(
        SAEnum(ResourceType), default=ResourceType.INDIVIDUAL, nullable=False
    )
    hourly_cost: Mapped[float] = mapped_column(Float, default=0.0)


class TaskORM(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    schedule_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("schedules.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    estimated_hours: Mapped[float] = mapped_column(Float, default=0.0)
    estimated_headcount: Mapped[int] = mapped_column(Integer, default=1)
    resource_id: Mapped[Optional[str]] = mapped_column(
        String,
        ForeignKey("resources.id", ondelete="SET NULL"),
        nullable=True,
    )

Index("idx_tasks_schedule_id", TaskORM.schedule_id)


class ValorizationORM(Base):
    __tablename__ = "valorizations"
    __table_args__ = (UniqueConstraint("project_id", "number", name="uq_valorizations_project_number"),)

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    period_start: Mapped[date] = mapped_column(Date, nullable=False)
    period_end: Mapped[date] = mapped_column(Date, nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    status: Mapped[ValorizationStatus] = mapped_column(
        SAEnum(ValorizationStatus), default=ValorizationStatus.DRAFT, nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

Index("idx_valorizations_project_id", ValorizationORM.project_id)
Index("idx_valorizations_period_end", ValorizationORM.period_end)
