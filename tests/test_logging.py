"""Tests for logger setup and ANSI-safe output."""

import io
import logging
import uuid

from termcomplete.ui import ANSI, ColorizingStreamHandler, init_logger, strip_ansi


def _unique_name() -> str:
    return f"tc-test-{uuid.uuid4().hex}"


class TestInitLogger:
    """Handlers are installed once and honour the level."""

    def test_handlers_are_not_duplicated(self) -> None:
        name = _unique_name()
        logger = init_logger(name, level="INFO")
        init_logger(name, level="INFO")
        assert sum(isinstance(h, ColorizingStreamHandler) for h in logger.handlers) == 1
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_file_output_is_plain(self, tmp_path) -> None:
        logfile = tmp_path / "termcomplete.log"
        logger = init_logger(_unique_name(), level="DEBUG", logfile=str(logfile))
        logger.warning("%sred alert%s", ANSI["red"], ANSI["reset"])
        for handler in logger.handlers:
            handler.flush()
            handler.close()
        content = logfile.read_text(encoding="utf-8")
        assert "red alert" in content
        assert "\x1b[" not in content


class TestColorizingStreamHandler:
    """ANSI colors only reach terminals."""

    def test_non_tty_stream_gets_plain_text(self) -> None:
        stream = io.StringIO()
        handler = ColorizingStreamHandler(stream)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger = logging.getLogger(_unique_name())
        logger.propagate = False
        logger.addHandler(handler)

        logger.error("%sfailed%s", ANSI["bold"], ANSI["reset"])
        assert stream.getvalue() == "[ERROR] failed\n"

    def test_strip_ansi(self) -> None:
        assert strip_ansi(f"{ANSI['green']}ok{ANSI['reset']}") == "ok"
