"""Initial database schema for the gym back office."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.sql import expression


revision = "20240601_0001"
down_revision = None
branch_labels = None
depends_on = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    )


def upgrade() -> None:
    membership_status_enum = sa.Enum(
        "active",
        "expired",
        "cancelled",
        name="membership_status_enum",
        native_enum=False,
    )
    payment_method_enum = sa.Enum(
        "cash",
        "card",
        "bank_transfer",
        "online",
        name="payment_method_enum",
        native_enum=False,
    )
    payment_status_enum = sa.Enum(
        "completed",
        "pending",
        "failed",
        "refunded",
        name="payment_status_enum",
        native_enum=False,
    )

    op.create_table(
        "members",
        sa.Column("member_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False, unique=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("join_date", sa.Date(), nullable=False),
        sa.Column("emergency_contact_name", sa.String(), nullable=True),
        sa.Column("emergency_contact_phone", sa.String(), nullable=True),
        sa.Column("medical_conditions", sa.Text(), nullable=True),
        _created_at(),
    )

    op.create_table(
        "member_progress",
        sa.Column("progress_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "member_id",
            sa.Integer(),
            sa.ForeignKey("members.member_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("weight", sa.Numeric(5, 2), nullable=True),
        sa.Column("body_fat_percentage", sa.Numeric(5, 2), nullable=True),
        sa.Column("muscle_mass", sa.Numeric(5, 2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("recorded_date", sa.Date(), nullable=False),
        _created_at(),
        sa.CheckConstraint("weight IS NULL OR weight > 0", name="ck_member_progress_weight_positive"),
        sa.CheckConstraint(
            "body_fat_percentage IS NULL OR (body_fat_percentage >= 0 AND body_fat_percentage <= 100)",
            name="ck_member_progress_body_fat_range",
        ),
        sa.CheckConstraint(
            "muscle_mass IS NULL OR muscle_mass > 0",
            name="ck_member_progress_muscle_mass_positive",
        ),
    )
    op.create_index(
        "member_progress_member_date_idx", "member_progress", ["member_id", "recorded_date"]
    )

    op.create_table(
        "trainers",
        sa.Column("trainer_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False, unique=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("specialization", sa.String(), nullable=True),
        sa.Column("hourly_rate", sa.Numeric(8, 2), nullable=True),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=expression.true()),
        _created_at(),
        sa.CheckConstraint(
            "hourly_rate IS NULL OR hourly_rate > 0",
            name="ck_trainers_hourly_rate_positive",
        ),
    )

    op.create_table(
        "membership_types",
        sa.Column("membership_type_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("duration_months", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=expression.true()),
        _created_at(),
        sa.CheckConstraint("duration_months > 0", name="ck_membership_types_duration_positive"),
        sa.CheckConstraint("price > 0", name="ck_membership_types_price_positive"),
    )

    op.create_table(
        "memberships",
        sa.Column("membership_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "member_id",
            sa.Integer(),
            sa.ForeignKey("members.member_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "membership_type_id",
            sa.Integer(),
            sa.ForeignKey("membership_types.membership_type_id"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("status", membership_status_enum, nullable=False),
        _created_at(),
        sa.CheckConstraint("end_date >= start_date", name="ck_memberships_dates_ordered"),
    )
    op.create_index("memberships_member_idx", "memberships", ["member_id"])
    op.create_index("memberships_status_idx", "memberships", ["status"])

    op.create_table(
        "classes",
        sa.Column("class_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "trainer_id",
            sa.Integer(),
            sa.ForeignKey("trainers.trainer_id"),
            nullable=False,
        ),
        sa.Column("max_capacity", sa.Integer(), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("class_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("is_cancelled", sa.Boolean(), nullable=False, server_default=expression.false()),
        _created_at(),
        sa.CheckConstraint("max_capacity > 0", name="ck_classes_capacity_positive"),
        sa.CheckConstraint("duration_minutes > 0", name="ck_classes_duration_positive"),
    )
    op.create_index("classes_date_time_idx", "classes", ["class_date", "start_time"])
    op.create_index("classes_trainer_idx", "classes", ["trainer_id"])

    op.create_table(
        "class_attendance",
        sa.Column("attendance_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "class_id",
            sa.Integer(),
            sa.ForeignKey("classes.class_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "member_id",
            sa.Integer(),
            sa.ForeignKey("members.member_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("attended", sa.Boolean(), nullable=False),
        sa.Column("check_in_time", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        sa.UniqueConstraint("class_id", "member_id", name="uq_class_attendance_class_member"),
    )

    op.create_table(
        "payments",
        sa.Column("payment_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "member_id",
            sa.Integer(),
            sa.ForeignKey("members.member_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "membership_id",
            sa.Integer(),
            sa.ForeignKey("memberships.membership_id"),
            nullable=True,
        ),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("payment_method", payment_method_enum, nullable=False),
        sa.Column("payment_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", payment_status_enum, nullable=False),
        _created_at(),
        sa.CheckConstraint("amount > 0", name="ck_payments_amount_positive"),
    )
    op.create_index("payments_date_status_idx", "payments", ["payment_date", "status"])
    op.create_index("payments_member_idx", "payments", ["member_id"])


def downgrade() -> None:
    op.drop_index("payments_member_idx", table_name="payments")
    op.drop_index("payments_date_status_idx", table_name="payments")
    op.drop_table("payments")
    op.drop_table("class_attendance")
    op.drop_index("classes_trainer_idx", table_name="classes")
    op.drop_index("classes_date_time_idx", table_name="classes")
    op.drop_table("classes")
    op.drop_index("memberships_status_idx", table_name="memberships")
    op.drop_index("memberships_member_idx", table_name="memberships")
    op.drop_table("memberships")
    op.drop_table("membership_types")
    op.drop_table("trainers")
    op.drop_index("member_progress_member_date_idx", table_name="member_progress")
    op.drop_table("member_progress")
    op.drop_table("members")
