"""Infrastructure Layer — IO adapters (database, bundle files, logging).

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - Never imported by core/
"""
