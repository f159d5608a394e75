from unittest.mock import ANY, patch

from muzzle.logging import LOG_FORMAT, configure_logging


def test_configure_logging_with_explicit_level():
    with patch("muzzle.logging.logger") as mock_logger:
        configure_logging("debug")

    mock_logger.remove.assert_called_once_with()
    mock_logger.add.assert_called_once_with(ANY, level="DEBUG", format=LOG_FORMAT, filter="muzzle")


def test_configure_logging_reads_the_level_from_settings(monkeypatch):
    monkeypatch.setenv("MUZZLE_LOG_LEVEL", "ERROR")

    with patch("muzzle.logging.logger") as mock_logger:
        configure_logging()

    assert mock_logger.add.call_args.kwargs["level"] == "ERROR"


def test_configure_logging_falls_back_to_info_on_invalid_settings(monkeypatch):
    monkeypatch.setenv("MUZZLE_CAPTURE_TIMEOUT", "-1")

    with patch("muzzle.logging.logger") as mock_logger:
        configure_logging()

    assert mock_logger.add.call_args.kwargs["level"] == "INFO"
