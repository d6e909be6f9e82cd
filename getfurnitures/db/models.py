"""Database base for DDD architecture"""

from sqlalchemy.orm import declarative_base

# Keep Base for ORM models
Base = declarative_base()

# NOTE: All model classes live in infrastructure/orm/ so that persistence
# details stay out of the domain layer. Import them there, not here, to
# avoid circular imports.
