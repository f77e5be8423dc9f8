import logging

from logit.config import load_config
from logit.logger import Logger
from logit.utils.internal_log import get_logger


def test_module_loggers_are_children_of_the_package_logger():
    assert get_logger().name == "logit"
    assert get_logger("logit.session_file").name == "logit.session_file"
    assert get_logger("session_file").name == "logit.session_file"


def test_package_logger_stays_quiet_until_the_host_configures_logging(console, clock, tmp_path, capsys):
    package = logging.getLogger("logit")
    assert any(isinstance(handler, logging.NullHandler) for handler in package.handlers)
    assert package.level == logging.NOTSET

    logger = Logger(console=console, clock=clock)
    logger.setup(write_to_file=True, file_directory=str(tmp_path / "d"))
    logger.info("x")

    assert capsys.readouterr().err == ""


def test_session_file_creation_is_reported(console, clock, tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="logit")
    logger = Logger(console=console, clock=clock)
    config = logger.setup(write_to_file=True, file_directory=str(tmp_path / "d"))

    logger.info("first")
    logger.info("second")

    messages = [record.getMessage() for record in caplog.records if record.name == "logit.session_file"]
    assert messages == [
        f"Created log directory {tmp_path / 'd'}",
        f"Created session log {config.session_path}",
    ]


def test_config_load_is_reported(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="logit")
    path = tmp_path / "logit.yaml"
    path.write_text("include_timestamp: true\n", encoding="utf-8")

    load_config(path)

    assert f"Loaded logger configuration from {path}" in caplog.text
