"""
エラー分類と操作結果

レコード操作の失敗を種別付きの結果 (OperationResult) として表現します。
例外を好む呼び出し側向けに RecordOperationError への変換も提供します。
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """エラー種別"""
    DUPLICATE_KEY = "duplicate_key"
    INVALID_AGE = "invalid_age"
    INVALID_WEIGHT = "invalid_weight"
    INVALID_HEALTH_STATUS = "invalid_health_status"
    NOT_FOUND = "not_found"
    MALFORMED_ROW = "malformed_row"
    NUMERIC_PARSE_FAILURE = "numeric_parse_failure"
    FILE_ERROR = "file_error"


class RecordOperationError(Exception):
    """
    レコード操作エラー例外

    OperationResult.raise_for_error() から送出されます。
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        tag_id: Optional[int] = None,
    ):
        """
        Args:
            message: エラーメッセージ
            kind: エラー種別
            tag_id: 対象のタグ ID（該当する場合）
        """
        super().__init__(message)
        self.kind = kind
        self.tag_id = tag_id


class OperationResult(BaseModel):
    """
    単一レコード操作 (insert / update / delete) の結果

    Attributes:
        success: 操作が成功したか
        tag_id: 対象のタグ ID
        error: 失敗時のエラー種別（最初に違反した前提条件）
        message: 失敗時のエラーメッセージ
    """
    success: bool
    tag_id: Optional[int] = None
    error: Optional[ErrorKind] = Field(default=None, description="エラー種別")
    message: Optional[str] = Field(default=None, description="エラーメッセージ")

    @classmethod
    def ok(cls, tag_id: int) -> "OperationResult":
        return cls(success=True, tag_id=tag_id)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, tag_id: Optional[int] = None) -> "OperationResult":
        return cls(success=False, tag_id=tag_id, error=kind, message=message)

    def raise_for_error(self) -> None:
        """
        失敗結果を例外に変換

        Raises:
            RecordOperationError: success が False の場合
        """
        if not self.success:
            raise RecordOperationError(
                self.message or self.error.value,
                kind=self.error,
                tag_id=self.tag_id
            )
