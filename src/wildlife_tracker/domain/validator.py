"""
レコードバリデーションロジック

手入力・プログラムからの更新・一括インポートの全経路で共有する
前提条件チェックを提供します。
"""

from typing import Optional, Tuple

from .errors import ErrorKind
from .models import AnimalAttributes, HealthStatus


class RecordValidator:
    """
    レコード属性の前提条件チェック

    age → weight → health_status の順に検査し、最初の違反のみを返します。
    """

    VALID_HEALTH_STATUSES = HealthStatus.values()

    @staticmethod
    def check(attributes: AnimalAttributes) -> Optional[Tuple[ErrorKind, str]]:
        """
        属性セットの値域を検査

        Args:
            attributes: 検査対象の属性セット（AnimalRecord も可）

        Returns:
            Optional[Tuple[ErrorKind, str]]: 最初に違反した規則の種別とメッセージ、
            すべて満たす場合は None
        """
        if not RecordValidator.is_valid_age(attributes.age):
            return ErrorKind.INVALID_AGE, "Age must be non-negative."

        if not RecordValidator.is_valid_weight(attributes.weight):
            return ErrorKind.INVALID_WEIGHT, "Weight must be positive."

        if not RecordValidator.is_valid_health_status(attributes.health_status):
            return (
                ErrorKind.INVALID_HEALTH_STATUS,
                f"Invalid health status: {attributes.health_status}",
            )

        return None

    @staticmethod
    def is_valid_age(age: int) -> bool:
        return age >= 0

    @staticmethod
    def is_valid_weight(weight: float) -> bool:
        # NaN は比較がすべて False になるため除外される
        return weight > 0

    @staticmethod
    def is_valid_health_status(health_status: str) -> bool:
        return health_status in RecordValidator.VALID_HEALTH_STATUSES
