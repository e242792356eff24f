"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete once the package loads
"""

from enrollment.models.enrollment import Enrollment  # noqa: F401
