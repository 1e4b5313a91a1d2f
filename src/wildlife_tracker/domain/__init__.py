"""
ドメイン層

動物レコードのデータモデル・バリデーション・行パース・集計ロジックを提供します。
"""

from .models import HealthStatus, AnimalAttributes, AnimalRecord
from .errors import ErrorKind, OperationResult, RecordOperationError
from .validator import RecordValidator
from .row_parser import RawAnimalRow, RowParser, RowParseError
from .aggregator import SpeciesWeightSummary, WeightAggregator

__all__ = [
    "HealthStatus",
    "AnimalAttributes",
    "AnimalRecord",
    "ErrorKind",
    "OperationResult",
    "RecordOperationError",
    "RecordValidator",
    "RawAnimalRow",
    "RowParser",
    "RowParseError",
    "SpeciesWeightSummary",
    "WeightAggregator",
]
