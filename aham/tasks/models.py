from sqlalchemy import Boolean, Column, Integer, String
from aham.core.database import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(String, index=True, nullable=True)  # YYYY-MM-DD
    title = Column(String, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)  # stored as 0/1
