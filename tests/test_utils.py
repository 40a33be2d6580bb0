"""Tests for Quire utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefix_added(self) -> None:
        from quire.utils.logger import get_logger

        assert get_logger("mymodule").name == "quire.mymodule"

    def test_package_names_unchanged(self) -> None:
        from quire.utils.logger import get_logger

        assert get_logger("quire").name == "quire"
        assert get_logger("quire.lexer.core").name == "quire.lexer.core"

    def test_returns_stdlib_logger(self) -> None:
        from quire.utils import get_logger

        assert isinstance(get_logger("x"), logging.Logger)

    def test_lookalike_prefix(self) -> None:
        from quire.utils.logger import get_logger

        assert get_logger("quirely").name == "quire.quirely"
