"""
dice_config — DiceGame Contract Configuration
===============================================
Network, contract, UI and gas settings for the DiceGame front-end.
"""

from dice_config.core.contract_config import CONTRACT_CONFIG, build_contract_config
from dice_config.core.export import ExportTarget, export_config
from dice_config.core.schema import ContractConfig

__all__ = [
    "CONTRACT_CONFIG",
    "ContractConfig",
    "ExportTarget",
    "build_contract_config",
    "export_config",
]
