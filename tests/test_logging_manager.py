import sys

from loguru import logger

from config.schema import LoggingConfig
from logging_manager import LoggingManager, NullLogger, get_logger


def test_null_logger_discards_everything():
    log = NullLogger()
    bound = log.bind(request_id='abc')
    assert bound is log
    assert bound.debug('message', content='x') is None
    assert bound.error('message', error='boom') is None


def test_get_logger_is_loguru():
    assert get_logger() is logger


def test_file_logging(tmp_path):
    log_file = tmp_path / 'logs' / 'client.log'
    manager = LoggingManager()
    try:
        manager.setup_logging(LoggingConfig(level='DEBUG', file=str(log_file), colorize=False, compression=None))
        manager.get_logger().bind(request_id='req-1').info('request completed successfully')
    finally:
        logger.remove()
        logger.add(sys.stderr)

    text = log_file.read_text()
    assert 'request completed successfully' in text
    assert 'req-1' in text
