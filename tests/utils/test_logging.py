import logging
import re

from equalgrid.utils.logging import LOGGER, warn_once


def test_logger():
    assert LOGGER.name == 'equalgrid'
    assert LOGGER.level == logging.WARNING


def test_warn_once(caplog):
    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_warn_once_formats_args(caplog):
    warn_once('span of %s degrees', 370.)
    warn_once('span of %s degrees', 370.)
    warn_once('span of %s degrees', 380.)
    assert len(re.findall('span of 370.0 degrees', caplog.text)) == 1
    assert 'span of 380.0 degrees' in caplog.text
