"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class EntityNotFoundError(DomainError):
    """Raised when a referenced cage or dinosaur does not exist."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} '{key}' not found.")
        self.kind = kind
        self.key = key


class EntityAlreadyExistsError(DomainError):
    """Raised when creating an entity whose identifier is already taken."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} '{key}' already exists.")
        self.kind = kind
        self.key = key


# ============================================================================
#                           Cage related errors
# ============================================================================


class CageNotFoundError(EntityNotFoundError):
    """Raised when a cage label is unknown."""

    def __init__(self, label: str) -> None:
        super().__init__("Cage", label)
        self.label = label


class CageAlreadyExistsError(EntityAlreadyExistsError):
    """Raised when adding a cage with a label that is already in use."""

    def __init__(self, label: str) -> None:
        super().__init__("Cage", label)
        self.label = label


class InvalidCageError(DomainError):
    """Raised when cage attributes are malformed."""

    def __init__(self, label: str, reason: str) -> None:
        super().__init__(f"Invalid cage '{label}': {reason}")
        self.label = label
        self.reason = reason


# ============================================================================
#                         Dinosaur related errors
# ============================================================================


class DinosaurNotFoundError(EntityNotFoundError):
    """Raised when a dinosaur name is unknown."""

    def __init__(self, name: str) -> None:
        super().__init__("Dinosaur", name)
        self.name = name


class DinosaurAlreadyExistsError(EntityAlreadyExistsError):
    """Raised when adding a dinosaur whose name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__("Dinosaur", name)
        self.name = name


class InvalidDinosaurError(DomainError):
    """Raised when dinosaur attributes are malformed."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid dinosaur '{name}': {reason}")
        self.name = name
        self.reason = reason


class InvalidSpeciesError(DomainError):
    """Raised when a species is not in the species registry."""

    def __init__(self, species: str) -> None:
        super().__init__(f"'{species}' is not a known dinosaur species.")
        self.species = species


# ============================================================================
#                         Placement rule violations
# ============================================================================


class PlacementError(DomainError):
    """Base class for rejections issued by the placement rule engine."""


class CapacityExceededError(PlacementError):
    """Raised when a cage is already at its maximum occupancy."""

    def __init__(self, label: str, max_occupancy: int) -> None:
        super().__init__(
            f"Cage '{label}' is at capacity ({max_occupancy} of {max_occupancy})."
        )
        self.label = label
        self.max_occupancy = max_occupancy


class IncompatiblePowerStateError(PlacementError):
    """Raised when a cage's power state forbids the requested action."""

    def __init__(self, label: str, reason: str) -> None:
        super().__init__(f"Cage '{label}': {reason}")
        self.label = label
        self.reason = reason


class IncompatibleSpeciesError(PlacementError):
    """Raised when a dinosaur cannot share a cage with its current occupants."""

    def __init__(self, name: str, species: str, label: str, reason: str) -> None:
        super().__init__(
            f"{name} ({species}) cannot be placed in cage '{label}': {reason}"
        )
        self.name = name
        self.species = species
        self.label = label
        self.reason = reason
