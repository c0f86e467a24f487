"""
schemas.py — Pydantic Response Models
=======================================
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Config service health check response."""

    status: str
    service: str
    chain_id: int
    rpc_connected: bool
