"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services own IO orchestration (bundle loading, preference writes)
    - Business rules stay in core/; services only sequence calls
"""
