import logging
import os
import signal
import time

import pytest

from order_mediator.utils.logger import (
    ColoredFormatter,
    StandardFormatter,
    ThreadLogger,
    create_console_handler,
    create_file_handler,
)


class ListHandler(logging.Handler):
    def __init__(self, level=logging.DEBUG):
        super().__init__(level)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def make_record(level=logging.INFO, msg="slots refreshed"):
    return logging.LogRecord("order-mediator", level, __file__, 1, msg, None, None, func="react")


def test_records_reach_handlers_through_listener():
    thread_logger = ThreadLogger(name="order-mediator-test-listener")
    handler = ListHandler()
    thread_logger.add_handler(handler)

    thread_logger.get_logger().info("Delivery components enabled")
    assert thread_logger.shutdown() is True

    assert "Delivery components enabled" in [r.getMessage() for r in handler.records]


def test_handler_levels_are_respected():
    thread_logger = ThreadLogger(name="order-mediator-test-levels")
    handler = ListHandler(level=logging.WARNING)
    thread_logger.add_handler(handler)

    thread_logger.get_logger().info("quiet")
    thread_logger.get_logger().warning("loud")
    thread_logger.shutdown()

    assert [r.getMessage() for r in handler.records] == ["loud"]


def test_set_all_handler_levels():
    thread_logger = ThreadLogger(name="order-mediator-test-set-levels")
    handler = ListHandler()
    thread_logger.add_handler(handler)

    thread_logger.set_all_handler_levels("error")
    assert handler.level == logging.ERROR
    assert thread_logger.signal_level == logging.ERROR

    with pytest.raises(ValueError):
        thread_logger.set_all_handler_levels("LOUD")
    thread_logger.shutdown()


def test_remove_handler_stops_listener():
    thread_logger = ThreadLogger(name="order-mediator-test-remove")
    handler = ListHandler()
    thread_logger.add_handler(handler)
    thread_logger.remove_handler(handler)

    assert thread_logger.listener is None
    assert thread_logger.shutdown() is False


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        ThreadLogger(name="order-mediator-test-invalid", signal_level="LOUD")


def test_formatters():
    record = make_record(logging.WARNING)

    plain = StandardFormatter().format(record)
    colored = ColoredFormatter().format(make_record(logging.WARNING))

    assert "WARNING" in plain and "react()" in plain and "slots refreshed" in plain
    assert colored.startswith(ColoredFormatter.yellow)
    assert colored.endswith(ColoredFormatter.reset)


def test_handler_factories(tmp_path):
    console = create_console_handler(level=logging.WARNING, colored=False)
    assert console.level == logging.WARNING
    assert isinstance(console.formatter, StandardFormatter)

    log_file = tmp_path / "nested" / "form.log"
    file_handler = create_file_handler(log_file=str(log_file), rotate=False)
    try:
        assert log_file.parent.is_dir()
        assert isinstance(file_handler.formatter, StandardFormatter)
    finally:
        file_handler.close()


def send_signal(signum):
    os.kill(os.getpid(), signum)
    # Python handlers run on the main thread at the next check
    time.sleep(0.05)


@pytest.fixture
def restore_signals():
    saved = {signum: signal.getsignal(signum) for signum in (signal.SIGUSR1, signal.SIGUSR2)}
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def test_sigusr_signals_change_verbosity(restore_signals):
    thread_logger = ThreadLogger(name="order-mediator-test-signals", signal_level="INFO")
    handler = ListHandler(level=logging.INFO)
    thread_logger.add_handler(handler)
    thread_logger.setup_signal_handlers()

    send_signal(signal.SIGUSR1)
    assert handler.level == logging.DEBUG

    send_signal(signal.SIGUSR2)
    send_signal(signal.SIGUSR2)
    assert handler.level == logging.WARNING
    thread_logger.shutdown()


def test_shutdown_closes_handlers(tmp_path):
    thread_logger = ThreadLogger(name="order-mediator-test-close")
    file_handler = create_file_handler(log_file=str(tmp_path / "form.log"), rotate=False)
    thread_logger.add_handler(file_handler)
    thread_logger.get_logger().info("Delivery date selected: 2025-10-25")

    assert thread_logger.shutdown() is True
    assert thread_logger.listener is None
    assert file_handler.stream is None
    assert "2025-10-25" in (tmp_path / "form.log").read_text(encoding="utf-8")
