"""
Консольное логирование приложения.
Все логгеры пакета quiz_ai пишут в stdout через один handler.
"""
import logging
import sys

ROOT_LOGGER_NAME = "quiz_ai"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Настройка консольного логгера.
    Повторный вызов меняет уровень, но не добавляет handler.

    Args:
        level: Имя уровня логирования (DEBUG, INFO, ...)

    Returns:
        Корневой логгер пакета
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    # Проверяем, что handler еще не добавлен
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger
