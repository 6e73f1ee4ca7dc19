import logging

from parallaxcalc.utils.logging import LOGGER


def test_logger(caplog):
    assert LOGGER.name == 'parallaxcalc'
    assert LOGGER.level == logging.WARNING

    LOGGER.warning('test')
    assert 'test' in caplog.text

    LOGGER.info('hidden')
    assert 'hidden' not in caplog.text
