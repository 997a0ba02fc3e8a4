"""User mapping models."""

from typing import Optional

from .base import ApiModel


class UserMapping(ApiModel):
    """Link between the integrator's user ID and a MatchEngine user"""
    user_id: str
    external_id: str
    email: Optional[str] = None
    created: bool = False
    mapping_created: bool = False
