"""Outbound ports for DINOPARK.

Abstract stores and registries the service layer depends on. Concrete
implementations live in `dinopark.adapters`.
"""
