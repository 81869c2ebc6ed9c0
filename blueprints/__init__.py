# ruff: noqa: N812

from .agent import blp as BlueprintAgent
from .health import blp as BlueprintHealth
from .invoice import blp as BlueprintInvoice
from .plan import blp as BlueprintPlan
from .reset import blp as BlueprintReset

__all__ = ['BlueprintAgent', 'BlueprintHealth', 'BlueprintInvoice', 'BlueprintPlan', 'BlueprintReset']
