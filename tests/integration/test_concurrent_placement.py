"""Concurrent placements into one cage never overfill it.

Each thread runs the real handler through its own SQL unit of work. Losers
of a race see a capacity rejection, a version conflict, or (SQLite) a busy
database; none of them may leave a dinosaur behind in the cage.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from dinopark.adapters.unit_of_work import SqlAlchemyUnitOfWork
from dinopark.bootstrap import bootstrap
from dinopark.domain.errors import CapacityExceededError, IncompatibleSpeciesError
from dinopark.interfaces.errors import CageVersionConflictError, StoreUnavailableError
from dinopark.service_layer import commands

THREADS = 8
CAPACITY = 3

EXPECTED_LOSSES = (
    CapacityExceededError,
    IncompatibleSpeciesError,
    CageVersionConflictError,
    StoreUnavailableError,
)


def _seed(engine, species_for) -> None:
    app = bootstrap(uow=SqlAlchemyUnitOfWork(engine))
    app.message_bus.handle(commands.AddCage("Pen", CAPACITY, has_power=True))
    for i in range(THREADS):
        app.message_bus.handle(commands.AddDinosaur(f"d{i}", species_for(i)))


def _race(engine) -> list[BaseException | None]:
    barrier = threading.Barrier(THREADS)

    def place(i: int) -> BaseException | None:
        app = bootstrap(uow=SqlAlchemyUnitOfWork(engine))
        barrier.wait()
        try:
            app.message_bus.handle(commands.AssignDinosaurToCage(f"d{i}", "Pen"))
        except EXPECTED_LOSSES as e:
            return e
        return None

    with ThreadPoolExecutor(max_workers=THREADS) as pool:
        return list(pool.map(place, range(THREADS)))


@pytest.mark.slow
@pytest.mark.parametrize("engine", ["sqlite_engine_file", "postgres_engine"], indirect=True)
def test_capacity_holds_under_concurrency(engine):
    _seed(engine, lambda i: "Triceratops")
    outcomes = _race(engine)

    placed = [i for i, outcome in enumerate(outcomes) if outcome is None]
    app = bootstrap(uow=SqlAlchemyUnitOfWork(engine))
    cage = app.queries.get_cage("Pen")
    occupants = {d.name for d in app.queries.list_dinosaurs_in_cage("Pen")}

    assert 1 <= len(placed) <= CAPACITY
    assert cage.occupancy == len(placed)
    assert occupants == {f"d{i}" for i in placed}


@pytest.mark.slow
@pytest.mark.parametrize("engine", ["sqlite_engine_file", "postgres_engine"], indirect=True)
def test_species_rule_holds_under_concurrency(engine):
    """Half carnivores, half herbivores race for one cage; it never mixes."""
    _seed(engine, lambda i: "Velociraptor" if i % 2 else "Stegosaurus")
    _race(engine)

    app = bootstrap(uow=SqlAlchemyUnitOfWork(engine))
    species = {d.species for d in app.queries.list_dinosaurs_in_cage("Pen")}
    assert len(species) == 1
