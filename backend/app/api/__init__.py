"""API Layer — FastAPI routes and error handlers (the presentation driver).

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
"""
