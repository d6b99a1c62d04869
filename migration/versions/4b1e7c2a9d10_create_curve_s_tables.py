"""create projects, schedules, resources, tasks and valorizations

Revision ID: 4b1e7c2a9d10
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "4b1e7c2a9d10"
down_revision = None
branch_labels = None
depends_on = None

_schedule_type = sa.Enum("COMMERCIAL", "PLANNING", "EXECUTION", name="scheduletype")
_resource_type = sa.Enum("INDIVIDUAL", "CREW", name="resourcetype")
_valorization_status = sa.Enum(
    "DRAFT",
    "SENT",
    "OBSERVED",
    "CORRECTED",
    "CLIENT_APPROVED",
    "INVOICED",
    "PAID",
    "CANCELLED",
    name="valorizationstatus",
)


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("code", sa.String(length=32), nullable=False, unique=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("contract_total", sa.Float(), nullable=True),
        sa.Column("actual_cost", sa.Float(), nullable=True),
        sa.Column("currency", sa.String(length=8), nullable=True),
    )
    op.create_table(
        "schedules",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("project_id", sa.String(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("schedule_type", _schedule_type, nullable=False),
        sa.Column("is_baseline", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
    )
    op.create_index("idx_schedules_project_id", "schedules", ["project_id"])
    op.create_index("idx_schedules_created", "schedules", ["created_at"])
    op.create_table(
        "resources",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("resource_type", _resource_type, nullable=False),
        sa.Column("hourly_cost", sa.Float(), nullable=True),
    )
    op.create_table(
        "tasks",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("schedule_id", sa.String(), sa.ForeignKey("schedules.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("estimated_hours", sa.Float(), nullable=True),
        sa.Column("estimated_headcount", sa.Integer(), nullable=True),
        sa.Column("resource_id", sa.String(), sa.ForeignKey("resources.id", ondelete="SET NULL"), nullable=True),
    )
    op.create_index("idx_tasks_schedule_id", "tasks", ["schedule_id"])
    op.create_table(
        "valorizations",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("project_id", sa.String(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("number", sa.Integer(), nullable=False),
        sa.Column("period_start", sa.Date(), nullable=False),
        sa.Column("period_end", sa.Date(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("status", _valorization_status, nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.UniqueConstraint("project_id", "number", name="uq_valorizations_project_number"),
    )
    op.create_index("idx_valorizations_project_id", "valorizations", ["project_id"])
    op.create_index("idx_valorizations_period_end", "valorizations", ["period_end"])


def downgrade() -> None:
    op.drop_index("idx_valorizations_period_end", table_name="valorizations")
    op.drop_index("idx_valorizations_project_id", table_name="valorizations")
    op.drop_table("valorizations")
    op.drop_index("idx_tasks_schedule_id", table_name="tasks")
    op.drop_table("tasks")
    op.drop_table("resources")
    op.drop_index("idx_schedules_created", table_name="schedules")
    op.drop_index("idx_schedules_project_id", table_name="schedules")
    op.drop_table("schedules")
    op.drop_table("projects")
