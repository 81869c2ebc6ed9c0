from .agent import AgentRepository
from .plan import PlanRepository

__all__ = ['AgentRepository', 'PlanRepository']
