from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from solobiz.db.base import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # No ORM-level cascade: client deletion removes dependents explicitly
    services = relationship("Service", back_populates="client", passive_deletes="all")
    reminders = relationship("Reminder", back_populates="client", passive_deletes="all")
