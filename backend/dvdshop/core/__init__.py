"""Core Layer — pure pricing logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from api/, schemas/, infrastructure/ or config
    - All functions are pure and deterministic
    - Configuration arrives through constructor arguments, never from the environment

Design Decisions:
    - Functional core separated from imperative shell: the FastAPI layer only
      forwards titles in and renders CalculationResult out
"""
