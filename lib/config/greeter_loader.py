import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from lib.contracts.settings import GreeterSection, ServerSection
from lib.utils.validation import ensure, ensure_text

from .yaml_loader import load_yaml

DEFAULT_CONFIG_PATH = "config/greeter.yaml"
CONFIG_ENV_VAR = "GREETER_CONFIG"


@dataclass(frozen=True)
class GreeterConfig:
    """Typed view over ``greeter.yaml``.

    The raw mapping is kept alongside the validated sections so that callers
    can inspect keys this service does not interpret.
    """

    raw: Dict[str, Any] = field(default_factory=dict)
    greeter: GreeterSection = field(default_factory=GreeterSection)
    server: ServerSection = field(default_factory=ServerSection)


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key) or {}
    ensure(isinstance(value, dict), f"'{key}' section must be a mapping")
    return value


def parse_greeter_config(raw: Dict[str, Any]) -> GreeterConfig:
    """Validate an already loaded mapping and return a :class:`GreeterConfig`."""

    greeter = GreeterSection(**_section(raw, "greeter"))
    ensure_text(greeter.default_name, "greeter.default_name")
    server = ServerSection(**_section(raw, "server"))
    return GreeterConfig(raw=raw, greeter=greeter, server=server)


def load_greeter_config(path: Optional[Union[str, Path]] = None) -> GreeterConfig:
    """Load ``greeter.yaml`` and return a :class:`GreeterConfig`.

    Parameters
    ----------
    path:
        File to read.  When omitted the ``GREETER_CONFIG`` environment
        variable is consulted, then ``config/greeter.yaml``.  Only the
        implicit default may be absent, in which case built-in defaults apply.
    """

    explicit = path if path is not None else os.getenv(CONFIG_ENV_VAR)
    cfg_path = Path(explicit or DEFAULT_CONFIG_PATH)
    if not cfg_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found at {cfg_path}")
        return GreeterConfig()
    return parse_greeter_config(load_yaml(cfg_path))
