"""ORM Models — SQLAlchemy declarative models for persisted state.

Invariants:
    - All models inherit from Base (db/base.py)
    - Only preferences are persisted; carts and favorites live in memory

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from app.models.preference import Preference  # noqa: F401
