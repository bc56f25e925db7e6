"""Initial schema - societies, membership, roles, privileges, assignments.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


PRIVILEGES = [
    ("event_management", "Event Management", "Can create, update, and delete events."),
    ("member_management", "Member Management", "Can invite, approve, or remove members from the society."),
    ("announcement_management", "Announcement Management", "Can create and publish announcements."),
    ("content_management", "Content Management", "Can create, edit, and delete posts on the society's public page."),
    ("event_ticket_handling", "Event Ticket Handling", "Can scan and validate tickets to manage event entry."),
    ("payment_finance_management", "Payment and Finance Management", "Can manage society finances, event payments, withdrawals, and payment methods."),
    ("society_settings_management", "Society Settings Management", "Can update society settings."),
    ("task_management", "Task Management", "Can assign tasks to society members."),
    ("meeting_management", "Meeting Management", "Can initiate and manage video meetings."),
]


def upgrade() -> None:
    op.create_table(
        "society",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("logo", sa.String(1024), nullable=True),
    )

    op.create_table(
        "student",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
    )

    op.create_table(
        "student_society",
        sa.Column("student_id", sa.UUID(), sa.ForeignKey("student.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("society_id", sa.UUID(), sa.ForeignKey("society.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "privilege",
        sa.Column("id", sa.UUID(), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("key", sa.String(100), nullable=False, unique=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
    )

    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("society_id", sa.UUID(), sa.ForeignKey("society.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("min_semester", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.execute("CREATE UNIQUE INDEX ix_role_society_name ON role (society_id, lower(name))")

    op.create_table(
        "role_privilege",
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("privilege_id", sa.UUID(), sa.ForeignKey("privilege.id"), primary_key=True),
    )

    op.create_table(
        "student_society_role",
        sa.Column("student_id", sa.UUID(), nullable=False),
        sa.Column("society_id", sa.UUID(), nullable=False),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("role.id"), nullable=False),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("student_id", "society_id", "role_id"),
        sa.ForeignKeyConstraint(
            ["student_id", "society_id"],
            ["student_society.student_id", "student_society.society_id"],
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_student_society_role_role", "student_society_role", ["role_id"])

    op.create_table(
        "activity_log",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("society_id", sa.UUID(), sa.ForeignKey("society.id", ondelete="CASCADE"), nullable=False),
        sa.Column("action", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("nature", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=True),
        sa.Column("target_type", sa.String(50), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_activity_log_society_created", "activity_log", ["society_id", "created_at"])

    op.create_table(
        "notification",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image", sa.String(1024), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "notification_recipient",
        sa.Column("notification_id", sa.UUID(), sa.ForeignKey("notification.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("student_id", sa.UUID(), sa.ForeignKey("student.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("web_redirect_url", sa.String(1024), nullable=True),
        sa.Column("mobile_redirect_url", sa.String(1024), nullable=True),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    privilege = sa.table(
        "privilege",
        sa.column("key", sa.String),
        sa.column("title", sa.String),
        sa.column("description", sa.String),
    )
    op.bulk_insert(
        privilege,
        [{"key": k, "title": t, "description": d} for k, t, d in PRIVILEGES],
    )


def downgrade() -> None:
    op.drop_table("notification_recipient")
    op.drop_table("notification")
    op.drop_table("activity_log")
    op.drop_table("student_society_role")
    op.drop_table("role_privilege")
    op.drop_table("role")
    op.drop_table("privilege")
    op.drop_table("student_society")
    op.drop_table("student")
    op.drop_table("society")
