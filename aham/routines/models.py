from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from aham.core.database import Base


class RoutineTemplate(Base):
    __tablename__ = "routine_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=True)

    tasks = relationship(
        "RoutineTemplateTask",
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="RoutineTemplateTask.id",
    )


class RoutineTemplateTask(Base):
    __tablename__ = "routine_template_tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    template_id = Column(
        Integer,
        ForeignKey("routine_templates.id", ondelete="CASCADE"),
        index=True,
        nullable=True,
    )
    title = Column(String, nullable=True)

    template = relationship("RoutineTemplate", back_populates="tasks")
