"""Contract tests shared by every implementation of the park ports."""

from __future__ import annotations

import pytest

from dinopark.domain.errors import (
    CageAlreadyExistsError,
    DinosaurAlreadyExistsError,
    InvalidSpeciesError,
)
from dinopark.domain.model import Cage
from dinopark.domain.value_objects import KNOWN_SPECIES, Diet
from dinopark.interfaces.cage_store import CageFilter
from dinopark.interfaces.dinosaur_store import DinosaurFilter
from dinopark.interfaces.errors import CageVersionConflictError

# pylint: disable=magic-value-comparison


def seed(make_uow, cages=(), dinosaurs=(), placements=()) -> None:
    """Commit cages, dinosaurs and placements in one unit of work."""
    with make_uow() as uow:
        for label, max_occupancy, has_power in cages:
            uow.cages.add(Cage(label, max_occupancy, has_power))
        for name, species in dinosaurs:
            uow.dinosaurs.add(name, species)
        for name, label in placements:
            uow.dinosaurs.assign(name, label)
        uow.commit()


# --- species registry ---


def test_species_registry_is_seeded(make_uow):
    with make_uow() as uow:
        species = uow.species.all()
        assert {(s.name, s.diet) for s in species} == {
            (s.name, s.diet) for s in KNOWN_SPECIES
        }
        assert [s.name for s in species] == sorted(s.name for s in species)
        assert uow.species.get("Velociraptor").diet is Diet.CARNIVORE
        assert uow.species.get("Purplesaurus") is None


def test_resolve_diet(make_uow):
    with make_uow() as uow:
        assert uow.species.resolve_diet("Stegosaurus") is Diet.HERBIVORE
        with pytest.raises(InvalidSpeciesError):
            uow.species.resolve_diet("Purplesaurus")


# --- cages ---


def test_add_and_get_cage(make_uow):
    seed(make_uow, cages=[("Pen-1", 3, True)])
    with make_uow() as uow:
        cage = uow.cages.get("Pen-1")
    assert cage == Cage("Pen-1", 3, True, occupancy=0, version=0)


def test_get_unknown_cage(make_uow):
    with make_uow() as uow:
        assert uow.cages.get("Nowhere") is None
        assert uow.cages.get("Nowhere", for_update=True) is None


def test_add_duplicate_cage(make_uow):
    seed(make_uow, cages=[("Pen-1", 3, True)])
    with make_uow() as uow:
        with pytest.raises(CageAlreadyExistsError):
            uow.cages.add(Cage("Pen-1", 9, False))


def test_find_cages_in_creation_order_with_power_filter(make_uow):
    seed(make_uow, cages=[("B", 1, True), ("A", 1, False), ("C", 1, True)])
    with make_uow() as uow:
        assert [c.label for c in uow.cages.find()] == ["B", "A", "C"]
        assert [c.label for c in uow.cages.find(CageFilter(has_power=True))] == ["B", "C"]
        assert [c.label for c in uow.cages.find(CageFilter(has_power=False))] == ["A"]


def test_occupancy_is_derived_from_assignments(make_uow):
    seed(
        make_uow,
        cages=[("Pen-1", 3, True), ("Pen-2", 3, True)],
        dinosaurs=[("Rex", "Tyrannosaurus"), ("Rexy", "Tyrannosaurus")],
        placements=[("Rex", "Pen-1"), ("Rexy", "Pen-1")],
    )
    seed(make_uow, placements=[("Rexy", "Pen-2")])
    with make_uow() as uow:
        assert uow.cages.get("Pen-1").occupancy == 1
        assert uow.cages.get("Pen-2", for_update=True).occupancy == 1
        assert [c.occupancy for c in uow.cages.find()] == [1, 1]


def test_claim_bumps_version(make_uow):
    seed(make_uow, cages=[("Pen-1", 3, True)])
    with make_uow() as uow:
        uow.cages.claim("Pen-1", expected_version=0)
        uow.commit()
    with make_uow() as uow:
        assert uow.cages.get("Pen-1").version == 1


def test_claim_with_stale_version_conflicts(make_uow):
    seed(make_uow, cages=[("Pen-1", 3, True)])
    with make_uow() as uow:
        uow.cages.claim("Pen-1", expected_version=0)
        uow.commit()
    with make_uow() as uow:
        with pytest.raises(CageVersionConflictError) as exc:
            uow.cages.claim("Pen-1", expected_version=0)
    assert exc.value.expected == 0
    assert exc.value.actual == 1


def test_claim_unknown_cage_conflicts(make_uow):
    with make_uow() as uow:
        with pytest.raises(CageVersionConflictError) as exc:
            uow.cages.claim("Nowhere", expected_version=0)
    assert exc.value.actual is None


def test_set_power(make_uow):
    seed(make_uow, cages=[("Pen-1", 3, False)])
    with make_uow() as uow:
        uow.cages.set_power("Pen-1", True, expected_version=0)
        uow.commit()
    with make_uow() as uow:
        cage = uow.cages.get("Pen-1")
    assert cage.has_power is True
    assert cage.version == 1


def test_set_power_with_stale_version_leaves_cage_alone(make_uow):
    seed(make_uow, cages=[("Pen-1", 3, False)])
    with make_uow() as uow:
        with pytest.raises(CageVersionConflictError):
            uow.cages.set_power("Pen-1", True, expected_version=5)
    with make_uow() as uow:
        cage = uow.cages.get("Pen-1")
    assert cage.has_power is False
    assert cage.version == 0


# --- dinosaurs ---


def test_add_and_get_dinosaur(make_uow):
    seed(make_uow, dinosaurs=[("Rex", "Tyrannosaurus")])
    with make_uow() as uow:
        rex = uow.dinosaurs.get("Rex")
    assert rex is not None
    assert (rex.name, rex.species, rex.diet, rex.cage_label) == (
        "Rex",
        "Tyrannosaurus",
        Diet.CARNIVORE,
        None,
    )


def test_get_unknown_dinosaur(make_uow):
    with make_uow() as uow:
        assert uow.dinosaurs.get("Barney") is None


def test_add_duplicate_dinosaur(make_uow):
    seed(make_uow, dinosaurs=[("Rex", "Tyrannosaurus")])
    with make_uow() as uow:
        with pytest.raises(DinosaurAlreadyExistsError):
            uow.dinosaurs.add("Rex", "Triceratops")
    with make_uow() as uow:
        assert uow.dinosaurs.get("Rex").species == "Tyrannosaurus"


def test_add_dinosaur_with_unknown_species(make_uow):
    with make_uow() as uow:
        with pytest.raises(InvalidSpeciesError):
            uow.dinosaurs.add("Barney", "Purplesaurus")


def test_assign_and_list_in_cage(make_uow):
    seed(
        make_uow,
        cages=[("Meadow", 5, True)],
        dinosaurs=[("Cera", "Triceratops"), ("Rex", "Tyrannosaurus"), ("Foot", "Brachiosaurus")],
        placements=[("Foot", "Meadow"), ("Cera", "Meadow")],
    )
    with make_uow() as uow:
        assert [d.name for d in uow.dinosaurs.list_in_cage("Meadow")] == ["Cera", "Foot"]
        assert uow.dinosaurs.get("Foot").cage_label == "Meadow"
        assert uow.dinosaurs.list_in_cage("Nowhere") == []


@pytest.mark.parametrize(
    ("dinosaur_filter", "expected"),
    [
        (None, ["Rex", "Blue", "Cera", "Foot"]),
        (DinosaurFilter(species="Tyrannosaurus"), ["Rex"]),
        (DinosaurFilter(diet=Diet.HERBIVORE), ["Cera", "Foot"]),
        (DinosaurFilter(awaiting_cage=True), ["Blue", "Foot"]),
        (DinosaurFilter(awaiting_cage=False), ["Rex", "Cera"]),
        (DinosaurFilter(diet=Diet.CARNIVORE, awaiting_cage=True), ["Blue"]),
    ],
)
def test_find_dinosaurs(make_uow, dinosaur_filter, expected):
    seed(
        make_uow,
        cages=[("Pen", 2, True), ("Meadow", 2, True)],
        dinosaurs=[
            ("Rex", "Tyrannosaurus"),
            ("Blue", "Velociraptor"),
            ("Cera", "Triceratops"),
            ("Foot", "Brachiosaurus"),
        ],
        placements=[("Rex", "Pen"), ("Cera", "Meadow")],
    )
    with make_uow() as uow:
        assert [d.name for d in uow.dinosaurs.find(dinosaur_filter)] == expected


def test_occupancy_counts(make_uow):
    seed(
        make_uow,
        cages=[("Mixed", 5, True)],
        dinosaurs=[
            ("Rex", "Tyrannosaurus"),
            ("Rexy", "Tyrannosaurus"),
            ("Blue", "Velociraptor"),
            ("Cera", "Triceratops"),
        ],
        placements=[("Rex", "Mixed"), ("Rexy", "Mixed"), ("Blue", "Mixed"), ("Cera", "Mixed")],
    )
    with make_uow() as uow:
        assert uow.dinosaurs.count_in_cage("Mixed") == 4
        assert uow.dinosaurs.count_in_cage_excluding_species("Mixed", "Tyrannosaurus") == 2
        assert uow.dinosaurs.count_in_cage_excluding_species("Mixed", "Ankylosaurus") == 4
        assert uow.dinosaurs.count_carnivores_in_cage("Mixed") == 3
        assert uow.dinosaurs.count_in_cage("Nowhere") == 0
        assert uow.dinosaurs.count_carnivores_in_cage("Nowhere") == 0


# --- transactions ---


def test_uncommitted_writes_are_discarded(make_uow, backend):
    if backend == "memory":
        pytest.skip("in-memory stores write through without transactions")
    with make_uow() as uow:
        uow.cages.add(Cage("Pen-1", 1, True))
        uow.dinosaurs.add("Rex", "Tyrannosaurus")
    with make_uow() as uow:
        assert uow.cages.get("Pen-1") is None
        assert uow.dinosaurs.get("Rex") is None
