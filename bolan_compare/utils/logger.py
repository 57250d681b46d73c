# logger.py
import logging
import os
import inspect
from dotenv import load_dotenv

load_dotenv()
default_log_level = "DEBUG"  # 預設日誌等級
LOG_LEVEL = os.getenv("LOG_LEVEL", default_log_level).upper()

def get_logger(logger_level: str = "DEBUG") -> logging.Logger:
    """取得以呼叫端模組命名的 logger

    Args:
        logger_level: logger 本身的等級，handler 等級由環境變數 LOG_LEVEL 決定

    Returns:
        logging.Logger: 已掛上 StreamHandler 的 logger
    """
    # 自動取得呼叫此函數的模組名稱
    caller_frame = inspect.stack()[1]
    module = inspect.getmodule(caller_frame[0])
    name = module.__name__ if module else "unknown"

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, logger_level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        formatter = logging.Formatter(f"[%(levelname)s] [{name}] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
