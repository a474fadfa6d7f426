"""Domain layer for DINOPARK.

Contains the business rules: cage and dinosaur models, the diet/species value
objects, and the placement rule engine that decides whether an animal may move
into a cage and whether a cage may be powered down. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `dinopark.adapters` or `dinopark.entrypoints`.
"""
