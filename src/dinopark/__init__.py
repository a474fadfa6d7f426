"""DINOPARK

Enclosure management for a themed dinosaur facility. Keeps track of cages and
their inhabitants, and enforces the placement rules (capacity, power, species
compatibility) that keep both the animals and the visitors safe.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
