from enum import Enum


class DispatchChannel(str, Enum):
    """通知チャネル"""

    # 外部メッセージ（メール）: 配信の正とするチャネル
    MESSAGE = "MESSAGE"
    # アプリ内通知レコード: ベストエフォートの冗長チャネル
    IN_APP = "IN_APP"
