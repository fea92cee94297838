"""
Пакет textcrypt
===============

Text signing, verification and encryption over flat key files.

Этот пакет предоставляет:
    - Подпись ключевым хешем BLAKE3 и Ed25519
    - Шифрование ChaCha20-Poly1305 с nonce-префиксом
    - Загрузку и генерацию ключей
    - Armoring в URL-safe Base64 без паддинга

Пример базового использования:
    >>> from textcrypt import process_text_sign, process_text_verify, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> sig = process_text_sign("message.txt", "blake3.txt", "blake3")
    >>> process_text_verify("message.txt", "blake3.txt", "blake3", sig)
    True

Управление конфигурацией:
    >>> import os
    >>> os.environ['TEXTCRYPT_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from textcrypt import load_config, TextCryptoService
    >>> service = TextCryptoService(load_config())

Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__description__ = "Text signing, verification and encryption core"
__license__ = "MIT"

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

_ROOT_LOGGER_NAME = "textcrypt"
_DEFAULT_CONFIG_PATH = Path("textcrypt.json")


def _setup_logging() -> None:
    """
    Инициализировать логирование пакета.

    - Консольный обработчик (stderr)
    - Ротирующий файловый обработчик, если задан TEXTCRYPT_LOG_FILE
    - Уровень из TEXTCRYPT_LOG_LEVEL (по умолчанию WARNING)

    Идемпотентна: повторные вызовы не добавляют обработчики.
    """
    log_level_str = os.environ.get("TEXTCRYPT_LOG_LEVEL", "WARNING").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.WARNING)

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("TEXTCRYPT_LOG_FILE")
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. "
                "Используется только консоль.",
                e,
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён textcrypt.

    Пример:
        >>> get_logger("cli").name
        'textcrypt.cli'
        >>> get_logger("textcrypt.crypto").name
        'textcrypt.crypto'
    """
    if module_name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.main")
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{module_name.lstrip('.')}")


_setup_logging()

from .crypto import *  # noqa: E402,F401,F403
from .crypto import __all__ as _crypto_all  # noqa: E402
from .crypto.config import TextCryptConfig  # noqa: E402

# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================


def load_config(config_path: Optional[Path] = None) -> TextCryptConfig:
    """
    Загрузить конфигурацию из JSON-файла (по умолчанию ./textcrypt.json).

    Значения из файла переопределяют значения по умолчанию; неизвестные ключи
    игнорируются. Если файл отсутствует, недоступен или некорректен,
    возвращается конфигурация по умолчанию с предупреждением в логе.

    Пример:
        >>> cfg = load_config(Path("missing.json"))
        >>> cfg.key_policy.value
        'lenient'
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = _DEFAULT_CONFIG_PATH

    if not config_path.exists():
        logger.info("Файл конфигурации %s не найден, используются значения по умолчанию", config_path)
        return TextCryptConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config: Any = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )
        config = TextCryptConfig.from_mapping(user_config)
    except json.JSONDecodeError as e:
        logger.warning(
            "Не удалось разобрать %s: недопустимый JSON в строке %d, столбце %d. "
            "Используется конфигурация по умолчанию.",
            config_path,
            e.lineno,
            e.colno,
        )
        return TextCryptConfig()
    except OSError as e:
        logger.warning("Не удалось прочитать %s: %s. Используется конфигурация по умолчанию.", config_path, e)
        return TextCryptConfig()
    except (TypeError, ValueError) as e:
        logger.warning("Недопустимая конфигурация: %s. Используется конфигурация по умолчанию.", e)
        return TextCryptConfig()

    logger.info("Конфигурация загружена из %s", config_path)
    return config


__all__ = [
    "__version__",
    "get_logger",
    "load_config",
    *_crypto_all,
]

