"""Entrypoints (inbound adapters) for DINOPARK.

Expose the application to the outside world. Today that is the `dinopark` CLI.
Parse and validate inputs, send commands through the message bus, run
queries, and present results.

Dependency rule: may import `dinopark.bootstrap` and `dinopark.service_layer`;
avoid importing `dinopark.adapters` directly (the `db` group is the exception,
it talks to Alembic and the engine factory).
"""
