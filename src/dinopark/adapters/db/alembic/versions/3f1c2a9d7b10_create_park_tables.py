"""create park tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-09-28 14:05:12.481337

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "species",
        sa.Column(
            "name",
            sa.String(length=100),
            nullable=False,
            comment="Species name (e.g. 'Tyrannosaurus').",
        ),
        sa.Column(
            "diet",
            sa.String(length=20),
            nullable=False,
            comment="Diet classification: 'Carnivore' or 'Herbivore'.",
        ),
        sa.CheckConstraint(
            "diet IN ('Carnivore', 'Herbivore')", name=op.f("ck_species_known_diet")
        ),
        sa.PrimaryKeyConstraint("name", name=op.f("pk_species")),
        comment="Species registry. Reference data seeded by migration.",
    )

    op.create_table(
        "cage",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "label",
            sa.String(length=100),
            nullable=False,
            comment="Caller-assigned cage label.",
        ),
        sa.Column(
            "max_occupancy",
            sa.Integer(),
            nullable=False,
            comment="Maximum number of dinosaurs the cage can hold.",
        ),
        sa.Column(
            "has_power",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
            comment="Whether the cage's containment power is on.",
        ),
        sa.Column(
            "version",
            sa.Integer(),
            server_default=sa.text("0"),
            nullable=False,
            comment="Bumped on every placement/power change; compare-and-swap fence.",
        ),
        sa.CheckConstraint(
            "max_occupancy >= 1", name=op.f("ck_cage_positive_max_occupancy")
        ),
        sa.CheckConstraint("version >= 0", name=op.f("ck_cage_non_negative_version")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_cage")),
        sa.UniqueConstraint("label", name=op.f("uq_cage_label")),
        comment="Cages. Occupancy is derived from dinosaur.cage_id.",
    )

    op.create_table(
        "dinosaur",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "name",
            sa.String(length=100),
            nullable=False,
            comment="Caller-assigned dinosaur name.",
        ),
        sa.Column(
            "species",
            sa.String(length=100),
            nullable=False,
            comment="Species of the dinosaur; diet is joined from the registry.",
        ),
        sa.Column(
            "cage_id",
            sa.Integer(),
            nullable=True,
            comment="Current cage; NULL while awaiting placement.",
        ),
        sa.ForeignKeyConstraint(
            ["cage_id"], ["cage.id"], name=op.f("fk_dinosaur_cage_id_cage")
        ),
        sa.ForeignKeyConstraint(
            ["species"], ["species.name"], name=op.f("fk_dinosaur_species_species")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_dinosaur")),
        sa.UniqueConstraint("name", name=op.f("uq_dinosaur_name")),
        comment="Dinosaurs and their current cage assignment.",
    )
    op.create_index(
        op.f("ix_dinosaur_cage_id"), "dinosaur", ["cage_id"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_dinosaur_cage_id"), table_name="dinosaur")
    op.drop_table("dinosaur")
    op.drop_table("cage")
    op.drop_table("species")
