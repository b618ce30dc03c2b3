from datetime import datetime
from enum import Enum as pyEnum
from sqlalchemy import Column, Integer, String, Date, DateTime, Enum, ForeignKey, Table, CheckConstraint
from sqlalchemy.orm import relationship
from db.database import Base


class ProjectStatus(str, pyEnum):
    active = "active"
    completed = "completed"
    cancelled = "cancelled"


# Association table for many-to-many relationship between projects and users
project_user = Table(
    "project_user",
    Base.metadata,
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Project(Base):
    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint("end_date IS NULL OR end_date >= start_date", name="ck_projects_end_after_start"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    department = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    status = Column(Enum(ProjectStatus), nullable=False, default=ProjectStatus.active)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    users = relationship("User", secondary=project_user, back_populates="projects")
    timesheets = relationship("Timesheet", back_populates="project", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<Project id={self.id} name={self.name}>"
