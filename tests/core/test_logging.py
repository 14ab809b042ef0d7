# tests/core/test_logging.py
import json

def test_get_logger_creates_structured_logger():
    """Test logger is created"""
    from career_advisor.core.logging import get_logger

    logger = get_logger("test.module")
    assert logger is not None

def test_logger_outputs_json_format(tmp_path, settings):
    """Test logger writes JSON to file"""
    import structlog
    from career_advisor.core.logging import configure_logging

    log_file = tmp_path / "logs" / "test.log"
    configure_logging(settings, log_file=str(log_file))

    logger = structlog.get_logger("test")
    logger.info("test_event", key1="value1", key2=42)

    # Read log file
    with open(log_file) as f:
        log_line = f.readline()
        log_data = json.loads(log_line)

    assert log_data["event"] == "test_event"
    assert log_data["key1"] == "value1"
    assert log_data["key2"] == 42
    assert log_data["level"] == "info"
    assert "timestamp" in log_data

def test_logger_filters_below_level(tmp_path, settings):
    """Test messages below LOG_LEVEL are dropped"""
    import structlog
    from career_advisor.core.logging import configure_logging

    log_file = tmp_path / "filtered.log"
    settings.log_level = "WARNING"
    configure_logging(settings, log_file=str(log_file))

    logger = structlog.get_logger("test")
    logger.info("quiet_event")
    logger.warning("loud_event")

    lines = log_file.read_text().splitlines()
    events = [json.loads(line)["event"] for line in lines]
    assert events == ["loud_event"]

def test_request_logging_hook_registered(app):
    """Test the app factory installs the request logging hook"""
    hooks = app.before_request_funcs[None]

    assert any(hook.__name__ == 'log_request' for hook in hooks)
