import json

from pydantic import BaseModel


def api_response(status_code: int, body: BaseModel | dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する

    body に Pydantic モデルを渡した場合は JSON モードでダンプする。
    """
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }
