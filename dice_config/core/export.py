"""
export.py — Configuration Provider
====================================
Attaches the configuration record to whichever registration point the
hosting environment offers, chosen by a single feature check:

  1. module registration (``scope["module"].exports``)   → replaced by the record
  2. global namespace   (``scope["window"]``)            → ``CONTRACT_CONFIG`` property
  3. neither                                             → nothing is exported

Exactly one path fires per call.
"""

import logging
from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any

from dice_config.core.schema import ContractConfig

logger = logging.getLogger(__name__)

EXPORT_NAME = "CONTRACT_CONFIG"


class ExportTarget(str, Enum):
    """Which export surface received the record."""

    MODULE = "module"
    GLOBAL = "global"
    NONE = "none"


def _lookup(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _truthy(value: Any) -> bool:
    # Containers count as present even when empty, like JS objects and arrays.
    if isinstance(value, (Mapping, list, tuple, set)):
        return True
    return bool(value)


def _writable(obj: Any) -> bool:
    return not isinstance(obj, Mapping) or isinstance(obj, MutableMapping)


def _attach(obj: Any, name: str, value: Any) -> None:
    if isinstance(obj, MutableMapping):
        obj[name] = value
    else:
        setattr(obj, name, value)


def detect_export_target(scope: Mapping[str, Any]) -> ExportTarget:
    """
    Feature-detect the export surface of a host scope without touching it.

    A module counts as a registration point when it is writable and its
    ``exports`` is truthy. A falsy ``exports`` (``None``, ``0``, ``""``,
    ``False``) or a read-only mapping module falls through to ``window``.

    Args:
        scope: Host scope, keyed by global name.

    Returns:
        The ExportTarget that ``export_config`` would use.
    """
    module = scope.get("module")
    if module is not None and _writable(module) and _truthy(_lookup(module, "exports")):
        return ExportTarget.MODULE
    if scope.get("window") is not None:
        return ExportTarget.GLOBAL
    return ExportTarget.NONE


def export_config(config: ContractConfig, scope: Mapping[str, Any]) -> ExportTarget:
    """
    Register the configuration record with the host scope.

    Args:
        config: The record to expose.
        scope: Host scope. ``module`` and ``window`` entries may be plain
               objects or mappings.

    Returns:
        The ExportTarget that fired. ``ExportTarget.NONE`` is not an error.
    """
    target = detect_export_target(scope)

    if target is ExportTarget.MODULE:
        _attach(scope["module"], "exports", config)
    elif target is ExportTarget.GLOBAL:
        _attach(scope["window"], EXPORT_NAME, config)

    logger.debug("Contract config export target: %s", target.value)
    return target
