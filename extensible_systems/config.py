"""
Demo configuration: YAML file validated with pydantic.

The packaged ``data/demo.yaml`` reproduces the classic demonstration
(three payment methods charged 100.0, three channels broadcast). Environment
variables, optionally read from a ``.env`` file:

- EXTENSIBLE_CONFIG: path to an alternative config file
- EXTENSIBLE_LOG_LEVEL: logging level for the CLI (default WARNING)
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .ledger import DispatchLedger
from .notifications import NotificationManager, create_notification
from .payments import PaymentProcessor, create_payment_method
from .registry import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "data" / "demo.yaml"
CONFIG_ENV_VAR = "EXTENSIBLE_CONFIG"
LOG_LEVEL_ENV_VAR = "EXTENSIBLE_LOG_LEVEL"


class StrategyEntry(BaseModel):
    """One strategy to construct: its factory key plus constructor fields."""
    model_config = ConfigDict(extra="allow")

    type: str
    balance: Optional[float] = None  # payment methods only

    @property
    def options(self) -> Dict[str, Any]:
        """Constructor keyword arguments (every key except ``type``)."""
        options = dict(self.model_extra or {})
        if self.balance is not None:
            options["balance"] = self.balance
        return options


class PaymentsConfig(BaseModel):
    amount: float = 100.0
    initial_capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    methods: List[StrategyEntry] = Field(default_factory=list)


class NotificationsConfig(BaseModel):
    recipient: str = "user@example.com"
    message: str = "Hello"
    initial_capacity: int = Field(default=DEFAULT_CAPACITY, ge=1)
    channels: List[StrategyEntry] = Field(default_factory=list)


class DemoConfig(BaseModel):
    payments: PaymentsConfig = Field(default_factory=PaymentsConfig)
    notifications: NotificationsConfig = Field(default_factory=NotificationsConfig)


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Explicit path, else $EXTENSIBLE_CONFIG, else the packaged demo config."""
    if path:
        return Path(path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Union[str, Path]] = None) -> DemoConfig:
    """
    Load and validate a demo config file.

    Args:
        path: Config file path (see resolve_config_path for the fallback)

    Returns:
        Validated DemoConfig

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or fails
            schema validation
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    try:
        config = DemoConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e

    logger.debug(
        "Loaded %s: %d payment methods, %d channels",
        config_path,
        len(config.payments.methods),
        len(config.notifications.channels),
    )
    return config


def build_payment_processor(
    config: PaymentsConfig,
    ledger: Optional[DispatchLedger] = None,
) -> PaymentProcessor:
    """Create a PaymentProcessor with every configured method registered."""
    processor = PaymentProcessor(initial_capacity=config.initial_capacity, ledger=ledger)
    for entry in config.methods:
        try:
            method = create_payment_method(entry.type, **entry.options)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Bad fields for payment method '{entry.type}': {e}") from e
        processor.add_method(method)
    return processor


def build_notification_manager(
    config: NotificationsConfig,
    ledger: Optional[DispatchLedger] = None,
) -> NotificationManager:
    """Create a NotificationManager with every configured channel registered."""
    manager = NotificationManager(initial_capacity=config.initial_capacity, ledger=ledger)
    for entry in config.channels:
        try:
            channel = create_notification(entry.type, **entry.options)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Bad fields for notification channel '{entry.type}': {e}") from e
        manager.add_channel(channel)
    return manager


def load_environment(dotenv_path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load a .env file into the process environment.

    Variables already set in the environment are not overridden.

    Args:
        dotenv_path: Explicit .env path; if None, search upward from the
            working directory

    Returns:
        True if a .env file was found and loaded
    """
    path = dotenv_path or find_dotenv(usecwd=True)
    if not path or not Path(path).is_file():
        return False
    logger.debug("Loading environment from %s", path)
    return load_dotenv(path)


def get_log_level(default: str = "WARNING") -> int:
    """Logging level from $EXTENSIBLE_LOG_LEVEL."""
    name = os.getenv(LOG_LEVEL_ENV_VAR, default).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
