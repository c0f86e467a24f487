"""
main.py — Config Service Entrypoint
=====================================
Runs the FastAPI service that hands the DiceGame contract configuration
to front-end pages.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dice_config.api.routes import router
from dice_config.config import settings
from dice_config.core.contract_config import CONTRACT_CONFIG

# ── Logging Configuration ─────────────────────────────────
def log_level(name: str) -> int:
    """Numeric logging level for a level name; unknown names fall back to INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    level=log_level(settings.LOG_LEVEL),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("dice_config")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    network = CONTRACT_CONFIG.NETWORK
    logger.info("Config service starting on %s:%d", settings.HOST, settings.PORT)
    logger.info("Network:  %s (chain %d)", network.NAME, network.CHAIN_ID)
    logger.info("RPC:      %s", settings.RPC_URL or network.RPC_URL)
    logger.info("DiceGame: %s", CONTRACT_CONFIG.CONTRACTS.DICE_GAME_V2)
    yield
    logger.info("Config service shutting down")


# ── FastAPI Application ───────────────────────────────────
app = FastAPI(
    title="DiceGame — Contract Config API",
    description=(
        "Network parameters, deployed contract addresses, UI constants "
        "and gas limits for the DiceGame front-end."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(router)
