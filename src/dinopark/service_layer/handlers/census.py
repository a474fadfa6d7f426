"""Occupant census backed by the dinosaur store of an open unit of work."""

from dinopark.interfaces.dinosaur_store import DinosaurStore

# pylint: disable=too-few-public-methods


class StoreCensus:
    """`OccupantCensus` for one cage that queries the store on every call.

    Nothing is cached, so each rule sees the state of the current transaction.
    """

    def __init__(self, dinosaurs: DinosaurStore, cage_label: str):
        self._dinosaurs = dinosaurs
        self._cage_label = cage_label

    def occupancy(self) -> int:
        return self._dinosaurs.count_in_cage(self._cage_label)

    def count_other_species(self, species: str) -> int:
        return self._dinosaurs.count_in_cage_excluding_species(
            self._cage_label, species
        )

    def count_carnivores(self) -> int:
        return self._dinosaurs.count_carnivores_in_cage(self._cage_label)
