"""seed species

Revision ID: 8e4b6c0d21a7
Revises: 3f1c2a9d7b10
Create Date: 2026-09-28 14:31:40.902114

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "8e4b6c0d21a7"
down_revision: str | Sequence[str] | None = "3f1c2a9d7b10"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# frozen copy: later changes to the domain list need their own migration
SPECIES = [
    ("Tyrannosaurus", "Carnivore"),
    ("Velociraptor", "Carnivore"),
    ("Spinosaurus", "Carnivore"),
    ("Megalosaurus", "Carnivore"),
    ("Brachiosaurus", "Herbivore"),
    ("Stegosaurus", "Herbivore"),
    ("Ankylosaurus", "Herbivore"),
    ("Triceratops", "Herbivore"),
]

species_table = sa.table(
    "species",
    sa.column("name", sa.String),
    sa.column("diet", sa.String),
)


def upgrade() -> None:
    """Upgrade schema."""

    op.bulk_insert(
        species_table, [{"name": name, "diet": diet} for name, diet in SPECIES]
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.execute(
        species_table.delete().where(
            species_table.c.name.in_([name for name, _ in SPECIES])
        )
    )
