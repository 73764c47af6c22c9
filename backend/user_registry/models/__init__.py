"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models imported here so Base.metadata is complete before create_all runs
"""

from user_registry.models.user import User  # noqa: F401
