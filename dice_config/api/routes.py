"""
routes.py — Config Service Endpoints
======================================
Serves the contract configuration record to front-end pages and build
tooling.

Endpoints:
    GET /config               — Full configuration record
    GET /config/{group}       — One group: network, contracts, ui or gas
    GET /contract-config.js   — Browser/CommonJS script exporting CONTRACT_CONFIG
    GET /health               — Health check
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from dice_config.api.schemas import HealthResponse
from dice_config.config import settings
from dice_config.core.contract_config import CONTRACT_CONFIG
from dice_config.core.render import render_js, to_dict
from dice_config.services.chain_client import ChainClient

logger = logging.getLogger(__name__)

router = APIRouter()

# ── Service Instance (initialized lazily) ──────────────
_chain_client: Optional[ChainClient] = None


def get_chain_client() -> ChainClient:
    """Get or create the chain client singleton."""
    global _chain_client
    if _chain_client is None:
        _chain_client = ChainClient(CONTRACT_CONFIG, rpc_url=settings.RPC_URL or None)
    return _chain_client


# ── Configuration ──────────────────────────────────────

@router.get("/config")
async def get_config():
    """Return the full configuration record."""
    return to_dict(CONTRACT_CONFIG)


@router.get("/config/{group}")
async def get_config_group(group: str):
    """Return a single configuration group."""
    data = to_dict(CONTRACT_CONFIG)
    key = group.upper()
    if key not in data:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown config group: {group}",
        )
    return data[key]


@router.get("/contract-config.js")
async def get_config_script():
    """Serve the record as a script front-end pages can load with <script>."""
    return Response(
        content=render_js(CONTRACT_CONFIG),
        media_type="application/javascript",
    )


# ── Health Check ───────────────────────────────────────

@router.get("/health", response_model=HealthResponse)
def health_check():
    """
    Report whether the configured RPC endpoint is reachable.

    Sync route: ``is_connected`` blocks on HTTP and must stay off the event loop.
    """
    connected = get_chain_client().is_connected()
    if not connected:
        logger.warning("RPC endpoint unreachable, reporting degraded")

    return HealthResponse(
        status="healthy" if connected else "degraded",
        service="dice-config",
        chain_id=CONTRACT_CONFIG.NETWORK.CHAIN_ID,
        rpc_connected=connected,
    )
