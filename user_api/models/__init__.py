"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model is imported here so Base.metadata is complete before
      create_all runs
"""

from user_api.models.user import User  # noqa: F401
