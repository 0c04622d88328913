from aws_lambda_powertools import Logger

from .config import get_env


def get_logger(service_name: str) -> Logger:
    """アプリケーション層用の Logger を返す

    ログレベルは LOG_LEVEL（未設定なら INFO）に従う。
    """
    return Logger(service=service_name, level=get_env("LOG_LEVEL", "INFO"))
