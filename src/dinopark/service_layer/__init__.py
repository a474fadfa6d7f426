"""Service layer for DINOPARK.

Implements application use-cases: command handlers, read queries and
transaction boundaries. Calls the placement rule engine and the outbound
ports defined under `dinopark.interfaces`.

Dependency rule: may import `dinopark.domain` and `dinopark.interfaces`, but
not `dinopark.adapters` or `dinopark.entrypoints`.
"""
