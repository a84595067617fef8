from sqlalchemy import Boolean, Column, Integer, String
from aham.core.database import Base


class Target(Base):
    __tablename__ = "targets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String, nullable=True)  # daily, weekly, monthly
    title = Column(String, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)  # stored as 0/1
    period_key = Column(String, index=True, nullable=True)  # e.g. '2023-10-21', '2023-42', '2023-10'
