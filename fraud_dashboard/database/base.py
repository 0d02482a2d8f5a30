from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Objects owned by the store (views) rather than this service; never passed to create_all.
reporting_metadata = MetaData()

__all__ = ["Base", "reporting_metadata"]
