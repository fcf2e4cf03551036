"""SQL host role store.

Named after the production database; any SQLAlchemy URL works.

Notes
- We avoid logging connection URLs to prevent accidental secret leakage.
"""

from .config import PostgresConfig
from .stores import PostgresRoleHost

__all__ = ["PostgresConfig", "PostgresRoleHost"]
