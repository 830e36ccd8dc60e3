"""Shared utilities — cross-cutting concerns such as logging setup.

Rules
-----
* No business logic.
* Importable by any layer.
"""
