from .plan import FirestorePlanRepository

__all__ = ['FirestorePlanRepository']
