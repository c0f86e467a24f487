"""
render.py — Configuration Artifacts
=====================================
Serialises the configuration record for build tooling and front-end
scripts: a plain dict, JSON text, or the browser/CommonJS script that
front-end pages load directly.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from dice_config.core.export import EXPORT_NAME
from dice_config.core.schema import ContractConfig

logger = logging.getLogger(__name__)

FORMATS = ("json", "js")

# Same branch the export provider applies in Python hosts.
_JS_EXPORT_BRANCH = f"""\
if (typeof module !== 'undefined' && module.exports) {{
    module.exports = {EXPORT_NAME};
}} else if (typeof window !== 'undefined') {{
    window.{EXPORT_NAME} = {EXPORT_NAME};
}}
"""


def to_dict(config: ContractConfig) -> Dict[str, Any]:
    """Nested plain dict with upper-case keys, in schema field order."""
    return config.model_dump()


def render_json(config: ContractConfig, indent: int = 2) -> str:
    return json.dumps(to_dict(config), indent=indent) + "\n"


def render_js(config: ContractConfig) -> str:
    """
    Render the record as a front-end script.

    The script declares ``const CONTRACT_CONFIG`` and exports it through
    ``module.exports`` when a module system is present, otherwise as
    ``window.CONTRACT_CONFIG``.

    Args:
        config: The record to render.

    Returns:
        JavaScript source text.
    """
    body = json.dumps(to_dict(config), indent=4)
    return (
        f"// DiceGame contract configuration ({config.NETWORK.NAME})\n"
        "// Generated by dice-config. Do not edit by hand.\n"
        "\n"
        f"const {EXPORT_NAME} = {body};\n"
        "\n"
        f"{_JS_EXPORT_BRANCH}"
    )


def render(config: ContractConfig, fmt: str) -> str:
    """Render the record in one of ``FORMATS``."""
    if fmt == "json":
        return render_json(config)
    if fmt == "js":
        return render_js(config)
    raise ValueError(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")


def write_artifact(
    config: ContractConfig,
    path: Union[str, Path],
    fmt: str,
) -> Path:
    """
    Write the rendered record to disk.

    Args:
        config: The record to render.
        path: Destination file. Parent directories are created.
        fmt: ``"json"`` or ``"js"``.

    Returns:
        The path written.

    Raises:
        ValueError: If the format is unknown.
    """
    text = render(config, fmt)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    logger.info("Wrote %s config artifact to %s (%d bytes)", fmt, out, len(text))
    return out
