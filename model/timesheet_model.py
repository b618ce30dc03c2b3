from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from db.database import Base

class Timesheet(Base):
    __tablename__ = "timesheets"
    __table_args__ = (
        CheckConstraint("hours >= 0 AND hours <= 24", name="ck_timesheets_hours_range"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", onupdate="CASCADE", ondelete="CASCADE"), nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", onupdate="CASCADE", ondelete="CASCADE"), nullable=False, index=True)
    task_name = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)
    hours = Column(Numeric(5, 2, asdecimal=False), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="timesheets")
    project = relationship("Project", back_populates="timesheets")
