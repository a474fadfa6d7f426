"""Alembic migration scripts for DINOPARK (see `dinopark.config.build_alembic_config`)."""
