"""Adapters (outbound) for DINOPARK.

Concrete implementations of the ports in `dinopark.interfaces`: SQLAlchemy
stores for SQLite/PostgreSQL, in-memory stores for tests and prototyping,
and database plumbing (engine, metadata, migrations).

Dependency rule: may import `dinopark.interfaces` and `dinopark.domain`; never
import `dinopark.service_layer` or `dinopark.entrypoints`.
"""
