"""Park schema.

Defines the ``species``, ``cage`` and ``dinosaur`` tables. Occupancy is not a
column: it is always counted from ``dinosaur.cage_id``.

Constraints (enforced here):

| Constraint                              | Purpose                                  |
|-----------------------------------------|------------------------------------------|
| CHECK(diet IN ('Carnivore','Herbivore'))| closed diet classification               |
| UNIQUE(cage.label)                      | caller-assigned cage identity            |
| CHECK(max_occupancy >= 1)               | a cage holds at least one dinosaur       |
| CHECK(version >= 0)                     | compare-and-swap fence starts at 0       |
| UNIQUE(dinosaur.name)                   | names act as primary key                 |
| FK dinosaur.species → species.name      | only registered species                  |
| FK dinosaur.cage_id → cage.id           | assignment references an existing cage   |
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    false,
    text,
)

from dinopark.adapters.db.metadata import metadata

__all__ = ["species", "cage", "dinosaur"]

species = Table(
    "species",
    metadata,
    Column(
        "name",
        String(100),
        primary_key=True,
        comment="Species name (e.g. 'Tyrannosaurus').",
    ),
    Column(
        "diet",
        String(20),
        nullable=False,
        comment="Diet classification: 'Carnivore' or 'Herbivore'.",
    ),
    CheckConstraint("diet IN ('Carnivore', 'Herbivore')", name="known_diet"),
    comment="Species registry. Reference data seeded by migration.",
)

cage = Table(
    "cage",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "label",
        String(100),
        nullable=False,
        unique=True,
        comment="Caller-assigned cage label.",
    ),
    Column(
        "max_occupancy",
        Integer,
        nullable=False,
        comment="Maximum number of dinosaurs the cage can hold.",
    ),
    Column(
        "has_power",
        Boolean,
        nullable=False,
        server_default=false(),
        comment="Whether the cage's containment power is on.",
    ),
    Column(
        "version",
        Integer,
        nullable=False,
        server_default=text("0"),
        comment="Bumped on every placement/power change; compare-and-swap fence.",
    ),
    CheckConstraint("max_occupancy >= 1", name="positive_max_occupancy"),
    CheckConstraint("version >= 0", name="non_negative_version"),
    comment="Cages. Occupancy is derived from dinosaur.cage_id.",
)

dinosaur = Table(
    "dinosaur",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "name",
        String(100),
        nullable=False,
        unique=True,
        comment="Caller-assigned dinosaur name.",
    ),
    Column(
        "species",
        String(100),
        ForeignKey("species.name"),
        nullable=False,
        comment="Species of the dinosaur; diet is joined from the registry.",
    ),
    Column(
        "cage_id",
        Integer,
        ForeignKey("cage.id"),
        nullable=True,
        comment="Current cage; NULL while awaiting placement.",
    ),
    Index(None, "cage_id"),
    comment="Dinosaurs and their current cage assignment.",
)
