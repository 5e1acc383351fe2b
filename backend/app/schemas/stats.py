"""
Admin dashboard statistics schema.
"""

from app.schemas.base import CamelModel


class AdminStatsResponse(CamelModel):
    """Four independent counts; not a single snapshot."""
    total_clients: int
    active_projects: int
    pending_signatures: int
    new_inquiries: int
