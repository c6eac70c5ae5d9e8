import sys
from unittest.mock import patch

from chesslist.core.log_config import configure_logging


def test_configure_logging_replaces_default_sink():
    with patch("chesslist.core.log_config.logger") as logger:
        configure_logging("warning")
    logger.remove.assert_called_once_with()
    logger.add.assert_called_once()
    args, kwargs = logger.add.call_args
    assert args == (sys.stderr,)
    assert kwargs["level"] == "WARNING"
