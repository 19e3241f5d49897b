import logging

from sketch_algebra import EditingSession, Line, Parabola, Point, export_session
from sketch_algebra.logging_system import (
    LogLevel, SketchLogger, configure_logging, get_logger, log_debug, log_info, log_warning,
    set_log_level
)


def test_silent_logger_has_no_console_handler():
    logger = configure_logging(LogLevel.SILENT)
    assert logger.logger.handlers == []
    assert get_logger() is logger


def test_set_log_level_updates_global_logger():
    configure_logging(LogLevel.MINIMAL)
    set_log_level(LogLevel.VERBOSE)
    assert get_logger().log_level == LogLevel.VERBOSE


def test_messages_are_filtered_by_level(caplog):
    logger = SketchLogger(LogLevel.MODERATE)
    with caplog.at_level(logging.DEBUG, logger="sketch_algebra"):
        logger.info("shown", LogLevel.MODERATE)
        logger.info("hidden", LogLevel.DETAILED)
        logger.debug("also hidden")
    messages = [record.getMessage() for record in caplog.records]
    assert "shown" in messages
    assert "hidden" not in messages
    assert not any("also hidden" in message for message in messages)


def test_session_reports_added_shapes(caplog):
    logger = SketchLogger(LogLevel.MODERATE)
    session = EditingSession(logger=logger)
    with caplog.at_level(logging.INFO, logger="sketch_algebra"):
        session.add(Line(Point(0, 0), Point(1, 1)))
    assert any("Added Line #0" in record.getMessage() for record in caplog.records)


def test_export_reports_statement_count(caplog):
    configure_logging(LogLevel.MODERATE)
    session = EditingSession()
    session.add(Line(Point(0, 0), Point(1, 1)))
    with caplog.at_level(logging.INFO, logger="sketch_algebra"):
        export_session(session)
    assert any("Exported 1 statement(s)" in record.getMessage() for record in caplog.records)


def test_degenerate_parabola_logs_a_warning(caplog):
    configure_logging(LogLevel.MINIMAL)
    with caplog.at_level(logging.WARNING, logger="sketch_algebra"):
        Parabola(Point(1, 1), Point(1, 5)).to_expression()
    assert any("degenerate" in record.getMessage() for record in caplog.records)


def test_module_helpers_use_the_global_logger(caplog):
    configure_logging(LogLevel.VERBOSE)
    with caplog.at_level(logging.DEBUG, logger="sketch_algebra"):
        log_info("info message")
        log_warning("warning message")
        log_debug("debug message")
    messages = [record.getMessage() for record in caplog.records]
    assert "info message" in messages
    assert "warning message" in messages
    assert "DEBUG: debug message" in messages
