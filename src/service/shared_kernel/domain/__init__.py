"""Shared Kernel Domain Layer"""

from src.service.shared_kernel.domain.value_object import ClubIdentity

__all__ = ['ClubIdentity']
