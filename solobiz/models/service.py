import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from solobiz.db.base import Base


class ServiceStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)

    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)

    description = Column(String, nullable=False)
    value = Column(Float, nullable=False, default=0)

    date = Column(DateTime, nullable=False, default=datetime.utcnow)
    status = Column(String, nullable=False, default=ServiceStatus.PENDING.value)
    completion_date = Column(DateTime, nullable=True)

    client = relationship("Client", back_populates="services")
