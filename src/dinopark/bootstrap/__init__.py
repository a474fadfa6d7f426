"""Bootstrap (composition root) for DINOPARK.

Assembles the application at runtime: wires concrete adapters to the
service-layer handlers and queries, reads configuration, and exposes an
`AppContainer` for entrypoints.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `dinopark.adapters`, `dinopark.service_layer`,
  `dinopark.interfaces`, `dinopark.domain`, and `dinopark.config`.
- Inner layers must not import `dinopark.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
