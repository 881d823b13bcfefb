"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
