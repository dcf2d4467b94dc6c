"""Shared Kernel Value Objects"""

from src.service.shared_kernel.domain.value_object.club_identity import ClubIdentity

__all__ = ['ClubIdentity']
