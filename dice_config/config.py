"""
config.py — Service Configuration
===================================
Settings for the HTTP surface, loaded from environment variables with
sensible defaults. These never alter the contract configuration record.
"""

import os


class Settings:
    """Config service settings from environment."""

    HOST: str = os.getenv("DICE_CONFIG_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("DICE_CONFIG_PORT", "8000"))
    LOG_LEVEL: str = os.getenv("DICE_CONFIG_LOG_LEVEL", "INFO").upper()
    RPC_URL: str = os.getenv("DICE_CONFIG_RPC_URL", "")  # empty: use NETWORK.RPC_URL


settings = Settings()
