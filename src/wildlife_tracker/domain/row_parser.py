"""
インポート行パースロジック

区切り文字付きテキストの 1 行を生データ (RawAnimalRow) に分割し、
候補レコード (AnimalRecord) に変換します。

形式: tagId,species,name,age,gender,weight,healthStatus
ヘッダー行なし・クォート/エスケープなし。フィールド内のカンマは区切り文字と
区別できません（形式上の制約）。

フィールド数は分割結果そのままで判定します。行末のカンマによる空の
8 番目のフィールドも数えるため、"...,Healthy," は 8 フィールドとなりスキップされます。
"""

import re
from typing import List, Optional
from pydantic import BaseModel, Field

from .models import AnimalRecord


class RowParseError(Exception):
    """
    行パースエラー例外

    数値フィールドを数値として解釈できない場合に送出されます。
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[str] = None,
    ):
        """
        Args:
            message: エラーメッセージ
            field: 解釈に失敗したフィールド名
            value: 解釈に失敗した値
        """
        super().__init__(message)
        self.field = field
        self.value = value


class RawAnimalRow(BaseModel):
    """
    インポート行から分割した正規化前の生データ

    全フィールドが文字列型（前後の空白は除去済み）です。
    """

    tag_id: str = Field(..., description="タグ ID (パース前)")
    species: str = Field(..., description="動物種")
    name: str = Field(..., description="個体名")
    age: str = Field(..., description="年齢 (パース前)")
    gender: str = Field(..., description="性別")
    weight: str = Field(..., description="体重 (パース前)")
    health_status: str = Field(..., description="健康状態")


class RowParser:
    """
    インポート行のパースクラス

    行の分割と数値フィールドの変換を行う静的メソッドを提供します。
    値域の検証は行いません (RecordValidator の責務)。
    """

    DELIMITER = ","
    FIELD_NAMES = ["tag_id", "species", "name", "age", "gender", "weight", "health_status"]
    FIELD_COUNT = len(FIELD_NAMES)

    @staticmethod
    def split_line(line: str) -> Optional[RawAnimalRow]:
        """
        1 行をフィールドに分割

        Args:
            line: インポート行（行末の改行は除去済みであること）

        Returns:
            Optional[RawAnimalRow]: 分割結果、フィールド数が 7 でない場合は None
        """
        parts: List[str] = line.split(RowParser.DELIMITER)
        if len(parts) != RowParser.FIELD_COUNT:
            return None

        return RawAnimalRow(**dict(zip(RowParser.FIELD_NAMES, (p.strip() for p in parts))))

    @staticmethod
    def to_record(raw_row: RawAnimalRow) -> AnimalRecord:
        """
        生データを候補レコードに変換

        Args:
            raw_row: 分割済みの生データ

        Returns:
            AnimalRecord: 候補レコード（未検証）

        Raises:
            RowParseError: tag_id / age / weight を数値に変換できない場合
        """
        return AnimalRecord(
            tag_id=RowParser._parse_int("tag_id", raw_row.tag_id),
            species=raw_row.species,
            name=raw_row.name,
            age=RowParser._parse_int("age", raw_row.age),
            gender=raw_row.gender,
            weight=RowParser._parse_float("weight", raw_row.weight),
            health_status=raw_row.health_status,
        )

    @staticmethod
    def _parse_int(field: str, value: str) -> int:
        # ASCII 10 進表記のみ ("1_0" や非 ASCII 数字は不可)
        if not re.fullmatch(r"[+-]?[0-9]+", value):
            raise RowParser._invalid(field, value)
        return int(value)

    @staticmethod
    def _parse_float(field: str, value: str) -> float:
        if "_" in value or not value.isascii():
            raise RowParser._invalid(field, value)
        try:
            return float(value)
        except ValueError:
            raise RowParser._invalid(field, value)

    @staticmethod
    def _invalid(field: str, value: str) -> RowParseError:
        return RowParseError(
            f"Invalid number format for {field}: '{value}'",
            field=field,
            value=value
        )
