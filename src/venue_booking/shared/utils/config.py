import os

from botocore.config import Config

DEFAULT_EXTERNAL_CALL_TIMEOUT_SECONDS = 5.0


def get_env(name: str, default: str | None = None) -> str | None:
    """環境変数を取得する（空文字は未設定扱い）"""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value


def get_bool_env(name: str, default: bool = False) -> bool:
    value = get_env(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_float_env(name: str, default: float) -> float:
    value = get_env(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be a number: {value}") from e


def boto_client_config() -> Config:
    """外部呼び出しのタイムアウトを設定した botocore Config

    タイムアウトはチャネル単位の失敗として扱われ、もう一方のチャネルは止めない。
    """
    timeout = get_float_env(
        "EXTERNAL_CALL_TIMEOUT_SECONDS", DEFAULT_EXTERNAL_CALL_TIMEOUT_SECONDS
    )
    return Config(
        connect_timeout=timeout,
        read_timeout=timeout,
        retries={"max_attempts": 2, "mode": "standard"},
    )
