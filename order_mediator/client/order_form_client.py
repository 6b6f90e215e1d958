import logging
import os
from typing import Any, Dict, Mapping, Optional

import dotenv

from order_mediator.components import DateSelector, PickupFlag, RecipientFields, RecipientFlag, SlotList
from order_mediator.core.mediator import Coordinator
from order_mediator.core.reactions import Reaction
from order_mediator.domain.slots import ScheduleSlotProvider, SlotProvider
from order_mediator.utils.config import CoordinatorConfig, create_default_config, read_config
from order_mediator.utils.enums import Event
from order_mediator.utils.helpers import format_snapshot
from order_mediator.utils.logger import ThreadLogger, create_console_handler, create_file_handler

CONFIG_ENV_VAR = "ORDER_MEDIATOR_CONFIG"
LOG_LEVEL_ENV_VAR = "ORDER_MEDIATOR_LOG_LEVEL"


class OrderFormClientError(Exception):
    """Custom exception for OrderFormClient errors"""
    pass


class OrderFormClient:
    """
    Composition root of an order form.
    Builds the components, the slot provider and the coordinator from one
    configuration, and owns the logger they share.
    """

    def __init__(self,
                config_path: Optional[str] = None,
                log_level: Optional[str] = None,
                slot_provider: Optional[SlotProvider] = None,
                reactions: Optional[Mapping[Event, Reaction]] = None,
                console: bool = True,
                load_env: bool = True):
        """
        Initialize the order-form client.

        Args:
            config_path: Path to configuration file (YAML); falls back to
                $ORDER_MEDIATOR_CONFIG, then to the built-in defaults
            log_level: Console logging level; overrides the config file
            slot_provider: Callable used instead of the configured schedule
            reactions: Reaction overrides passed to the coordinator
            console: Attach a console log handler
            load_env: Read a .env file before resolving environment overrides
        """
        if load_env:
            dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))

        self.config_path = config_path or os.getenv(CONFIG_ENV_VAR)
        log_level = log_level or os.getenv(LOG_LEVEL_ENV_VAR)

        try:
            self.thread_logger = ThreadLogger(
                name="order-mediator",
                signal_level=log_level or "INFO",
            )
            self.logger = self.thread_logger.get_logger()
        except Exception as e:
            raise OrderFormClientError(f"Failed to initialize logger: {e}") from e

        self.config: Optional[CoordinatorConfig] = None
        self.coordinator: Optional[Coordinator] = None

        self._load_configuration()
        try:
            self._init_log_handlers(log_level, console)
            self._init_coordinator(slot_provider, reactions)
        except Exception:
            self.thread_logger.shutdown()
            raise

    def _load_configuration(self):
        """Load configuration with proper error handling"""
        try:
            if self.config_path:
                self.config = read_config(self.config_path, self.logger)
                self.logger.info(f"Loaded configuration from {self.config_path}")
            else:
                self.config = create_default_config(logger=self.logger)
                self.logger.info("Using default configuration")
        except Exception as e:
            raise OrderFormClientError(f"Failed to load configuration: {e}") from e

    def _init_log_handlers(self, log_level: Optional[str], console: bool):
        try:
            if console:
                self.add_log_handler(create_console_handler(
                    level=(log_level or self.config.ConsoleLevel).upper(),
                    colored=self.config.ColoredConsole,
                ))
            if self.config.LogFile:
                self.add_log_handler(create_file_handler(
                    log_file=self.config.LogFile,
                    level=self.config.FileLevel,
                ))
            if self.config.HandleSignals:
                self.thread_logger.setup_signal_handlers()
        except Exception as e:
            raise OrderFormClientError(f"Failed to set up log handlers: {e}") from e

    def _init_coordinator(self, slot_provider: Optional[SlotProvider], reactions: Optional[Mapping[Event, Reaction]]):
        """Create the five components and bind them to a new coordinator"""
        try:
            if slot_provider is None:
                slot_provider = ScheduleSlotProvider.from_config(self.config.Slots)
                self.logger.debug(f"Using configured slot schedule {slot_provider!r}")

            self.coordinator = Coordinator(
                DateSelector(self.logger),
                SlotList(self.logger),
                RecipientFlag(self.logger),
                RecipientFields(self.logger),
                PickupFlag(self.logger),
                slot_provider,
                reactions=reactions,
                logger=self.logger,
                enforce_delivery_lock=self.config.EnforceDeliveryLock,
                history_size=self.config.HistorySize,
            )
            self.logger.info("Order form initialized successfully")
        except Exception as e:
            self.logger.error(f"Failed to initialize order form: {e}")
            raise OrderFormClientError(f"Coordinator initialization failed: {e}") from e

    def add_log_handler(self, handler: logging.Handler):
        self.thread_logger.add_handler(handler)

    def remove_log_handler(self, handler: logging.Handler):
        self.thread_logger.remove_handler(handler)

    @property
    def date_selector(self) -> DateSelector:
        return self.coordinator.date_selector

    @property
    def slot_list(self) -> SlotList:
        return self.coordinator.slot_list

    @property
    def recipient_flag(self) -> RecipientFlag:
        return self.coordinator.recipient_flag

    @property
    def recipient_fields(self) -> RecipientFields:
        return self.coordinator.recipient_fields

    @property
    def pickup_flag(self) -> PickupFlag:
        return self.coordinator.pickup_flag

    @property
    def delivery_enabled(self) -> bool:
        return self.coordinator.delivery_enabled

    def snapshot(self) -> Dict[str, Any]:
        return self.coordinator.snapshot()

    def render_snapshot(self, tablefmt: str = "simple") -> str:
        return format_snapshot(self.snapshot(), tablefmt=tablefmt)

    def shutdown(self):
        self.logger.info("Shutting down order form client")
        self.thread_logger.shutdown()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False
