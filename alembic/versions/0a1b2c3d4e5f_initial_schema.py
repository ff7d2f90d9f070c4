"""initial_schema

Revision ID: 0a1b2c3d4e5f
Revises:
Create Date: 2026-10-18 10:00:00.000000
"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0a1b2c3d4e5f"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("type", sa.String(32), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_games"),
        sa.UniqueConstraint("type", name="uq_games_type"),
    )

    op.create_table(
        "sessions",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("score", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("streak", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("round_number", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.CheckConstraint("score >= 0", name="ck_sessions_score_non_negative"),
        sa.CheckConstraint("streak >= 0", name="ck_sessions_streak_non_negative"),
        sa.CheckConstraint("round_number >= 1", name="ck_sessions_round_number_positive"),
        sa.PrimaryKeyConstraint("id", name="pk_sessions"),
    )
    op.create_index("idx_sessions_start_time", "sessions", ["start_time"])

    op.create_table(
        "game_results",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("session_id", sa.Integer(), nullable=False),
        sa.Column("game_id", sa.Integer(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("time_taken", sa.Integer(), nullable=False),
        sa.Column("difficulty", sa.String(16), nullable=True),
        sa.CheckConstraint("time_taken >= 0", name="ck_game_results_time_taken_non_negative"),
        sa.ForeignKeyConstraint(
            ["session_id"],
            ["sessions.id"],
            name="fk_game_results_session_id_sessions",
        ),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], name="fk_game_results_game_id_games"),
        sa.PrimaryKeyConstraint("id", name="pk_game_results"),
    )
    op.create_index("idx_game_results_session", "game_results", ["session_id"])

    op.create_table(
        "user_stats",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("total_games", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("longest_streak", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("last_played", sa.DateTime(timezone=True), nullable=True),
        sa.Column("daily_streak", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.CheckConstraint("total_games >= 0", name="ck_user_stats_total_games_non_negative"),
        sa.CheckConstraint(
            "longest_streak >= 0",
            name="ck_user_stats_longest_streak_non_negative",
        ),
        sa.CheckConstraint("daily_streak >= 0", name="ck_user_stats_daily_streak_non_negative"),
        sa.PrimaryKeyConstraint("id", name="pk_user_stats"),
    )

    op.create_table(
        "word_bank",
        sa.Column("id", sa.Integer(), autoincrement=True),
        sa.Column("game_type", sa.String(32), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("options", sa.Text(), nullable=True),
        sa.Column("difficulty", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.PrimaryKeyConstraint("id", name="pk_word_bank"),
    )
    op.create_index("idx_word_bank_type_difficulty", "word_bank", ["game_type", "difficulty"])


def downgrade() -> None:
    op.drop_index("idx_word_bank_type_difficulty", table_name="word_bank")
    op.drop_table("word_bank")
    op.drop_table("user_stats")
    op.drop_index("idx_game_results_session", table_name="game_results")
    op.drop_table("game_results")
    op.drop_index("idx_sessions_start_time", table_name="sessions")
    op.drop_table("sessions")
    op.drop_table("games")
