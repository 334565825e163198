from __future__ import annotations

import logging
from unittest.mock import patch

from cafe_service.__main__ import main
from cafe_service.config import ServiceConfig
from cafe_service.logging_config import resolve_level


def test_resolve_known_levels():
    assert resolve_level("DEBUG") == logging.DEBUG
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(" error ") == logging.ERROR


def test_resolve_unknown_level_falls_back_to_info():
    assert resolve_level("LOUD") == logging.INFO
    assert resolve_level("") == logging.INFO


@patch("cafe_service.__main__.uvicorn.run")
def test_main_passes_resolved_level(mock_run):
    main(ServiceConfig(log_level="debug", host="0.0.0.0", port=9000))

    mock_run.assert_called_once_with(
        "cafe_service.app:app", host="0.0.0.0", port=9000, log_level=logging.DEBUG,
    )


@patch("cafe_service.__main__.uvicorn.run")
def test_main_with_bad_level_uses_info(mock_run):
    main(ServiceConfig(log_level="LOUD"))

    assert mock_run.call_args.kwargs["log_level"] == logging.INFO
