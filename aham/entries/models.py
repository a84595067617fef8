from sqlalchemy import Column, Integer, String, Text
from aham.core.database import Base


class Entry(Base):
    __tablename__ = "entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(String, unique=True, index=True)  # YYYY-MM-DD, one entry per day

    journal_text = Column(Text, nullable=True)
    mood = Column(String, nullable=True)
    sleep_start = Column(String, nullable=True)  # HH:MM
    sleep_end = Column(String, nullable=True)  # HH:MM
    reflection_json = Column(Text, nullable=True)
    image_data = Column(Text, nullable=True)  # data:image/png;base64,...
