from .agent import StaticAgentRepository
from .directory import DEFAULT_AGENTS

__all__ = ['DEFAULT_AGENTS', 'StaticAgentRepository']
