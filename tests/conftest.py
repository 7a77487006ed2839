import logging

import pytest

from ocrscanner.config import ConfigurationManager
from ocrscanner.extraction import reset_classifier
from ocrscanner.utils.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def fresh_configuration():
    """Start every test from the packaged default configuration."""
    ConfigurationManager.reset()
    reset_classifier()
    yield
    ConfigurationManager.reset()
    reset_classifier()

    # Handlers installed by the CLI point at per-test capture streams
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()
    root.propagate = True
    root.setLevel(logging.NOTSET)
