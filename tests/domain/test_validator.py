"""
RecordValidator のユニットテスト
"""
import pytest

from src.wildlife_tracker.domain.errors import ErrorKind
from src.wildlife_tracker.domain.models import AnimalAttributes
from src.wildlife_tracker.domain.validator import RecordValidator


def make_attributes(**overrides) -> AnimalAttributes:
    data = {
        "species": "Lion",
        "name": "Leo",
        "age": 3,
        "gender": "Male",
        "weight": 190.5,
        "health_status": "Healthy",
    }
    data.update(overrides)
    return AnimalAttributes(**data)


class TestRecordValidatorCheck:
    """check() のテスト"""

    def test_valid_attributes(self):
        """すべての規則を満たす場合は None"""
        assert RecordValidator.check(make_attributes()) is None

    def test_zero_age_is_valid(self):
        """年齢 0 は有効"""
        assert RecordValidator.check(make_attributes(age=0)) is None

    @pytest.mark.parametrize("status", ["Healthy", "Injured", "Sick", "Unknown"])
    def test_all_health_statuses_are_valid(self, status):
        """正規値セットの健康状態はすべて有効"""
        assert RecordValidator.check(make_attributes(health_status=status)) is None

    def test_negative_age(self):
        """負の年齢は INVALID_AGE"""
        kind, message = RecordValidator.check(make_attributes(age=-1))
        assert kind == ErrorKind.INVALID_AGE
        assert message == "Age must be non-negative."

    @pytest.mark.parametrize("weight", [0, -5.0])
    def test_non_positive_weight(self, weight):
        """0 以下の体重は INVALID_WEIGHT"""
        kind, _ = RecordValidator.check(make_attributes(weight=weight))
        assert kind == ErrorKind.INVALID_WEIGHT

    def test_nan_weight_is_invalid(self):
        """NaN の体重は INVALID_WEIGHT"""
        kind, _ = RecordValidator.check(make_attributes(weight=float("nan")))
        assert kind == ErrorKind.INVALID_WEIGHT

    @pytest.mark.parametrize("status", ["Recovering", "healthy", "Dead", ""])
    def test_invalid_health_status(self, status):
        """正規値セット以外の健康状態は INVALID_HEALTH_STATUS（大文字小文字を区別）"""
        kind, message = RecordValidator.check(make_attributes(health_status=status))
        assert kind == ErrorKind.INVALID_HEALTH_STATUS
        assert message == f"Invalid health status: {status}"

    def test_first_violation_wins(self):
        """複数違反時は age → weight → health_status の順で最初の違反を返す"""
        attributes = make_attributes(age=-1, weight=0, health_status="Recovering")
        assert RecordValidator.check(attributes)[0] == ErrorKind.INVALID_AGE

        attributes = make_attributes(weight=0, health_status="Recovering")
        assert RecordValidator.check(attributes)[0] == ErrorKind.INVALID_WEIGHT
