from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from sources_bulk.common.logging import LOG_FORMAT, configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_force_replaces_handlers(restore_root_logger: logging.Logger) -> None:
    configure_logging(level=logging.DEBUG, force=True)

    assert restore_root_logger.level == logging.DEBUG
    formats = [
        handler.formatter._fmt  # noqa: SLF001
        for handler in restore_root_logger.handlers
        if handler.formatter is not None
    ]
    assert formats == [LOG_FORMAT]
