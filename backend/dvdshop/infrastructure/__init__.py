"""Infrastructure Layer — presentation and cross-cutting concerns.

Invariants:
    - Infrastructure consumes core results; it never computes prices
    - No module here is imported by core/
"""
