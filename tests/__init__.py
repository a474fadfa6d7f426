"""DINOPARK test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of the rule engine, handlers, bus and CLI helpers.
- contract/     : The store contract, run against every backend (memory, SQLite, PostgreSQL).
- integration/  : Real databases: unit of work, migrations, bootstrap, concurrent placements.
- functional/   : The ``dinopark db`` onboarding flow and help output, as a user sees them.
- e2e/          : The full CLI, logging options included, against an in-memory park.
- fixtures/     : Shared pytest fixtures loaded as plugins (no tests here).

General guidance
- Keep unit tests fast and deterministic; prefer the in-memory adapters over mocks.
- Tests needing Docker (PostgreSQL via Testcontainers) are skipped when it is unavailable.
- Markers are applied per folder: unit, contract, integration, functional, e2e; plus slow.
"""
