from typing import List

from pydantic import BaseModel

from solobiz.schemas.client import ClientResponse
from solobiz.schemas.service import ServiceResponse


class MonthlyRevenue(BaseModel):
    month: str
    total: float


# Field names are part of the dashboard contract
class DashboardStats(BaseModel):
    totalClients: int
    totalRevenue: float
    activeReminders: int
    pendingServices: int
    recentServices: List[ServiceResponse]
    monthlyRevenue: List[MonthlyRevenue]
    recentClients: List[ClientResponse]
