"""
データモデル定義

このモジュールは wildlife-tracker のドメイン層のデータモデルを定義します:
- HealthStatus: 健康状態の正規値セット
- AnimalAttributes: 更新可能な属性セット (tag_id 以外)
- AnimalRecord: 1 個体を表す動物レコード (tag_id は不変)
"""

from enum import Enum
from pydantic import BaseModel, Field, field_validator


class HealthStatus(str, Enum):
    """健康状態の正規値 (全入力経路で共通)"""
    HEALTHY = "Healthy"
    INJURED = "Injured"
    SICK = "Sick"
    UNKNOWN = "Unknown"

    @classmethod
    def values(cls) -> list:
        """正規値の文字列リストを定義順で返す"""
        return [status.value for status in cls]


class AnimalAttributes(BaseModel):
    """
    動物レコードの更新可能な属性セット

    update 操作のペイロードとして使用します。全フィールド必須のため、
    部分更新は表現できません。

    age / weight / health_status の値域はここでは検証せず、
    RecordStore の挿入・更新経路 (RecordValidator) で検証します。
    不正な候補レコードも表現・報告できるようにするためです。
    """

    species: str = Field(..., description="動物種 (例: 'Lion')")
    name: str = Field(..., description="個体名")
    age: int = Field(..., description="年齢 (0 以上)")
    gender: str = Field(..., description="性別")
    weight: float = Field(..., description="体重 (正の値)")
    health_status: str = Field(..., description="健康状態 (HealthStatus のいずれか)")

    @field_validator("species", "name", "gender", "health_status", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        """
        前後の空白を除去

        Args:
            v: 入力値

        Returns:
            前後の空白を除去した文字列 (文字列以外はそのまま)
        """
        if isinstance(v, str):
            return v.strip()
        return v

    class Config:
        """Pydantic 設定"""
        validate_assignment = True
        json_schema_extra = {
            "example": {
                "species": "Lion",
                "name": "Leo",
                "age": 3,
                "gender": "Male",
                "weight": 190.5,
                "health_status": "Healthy"
            }
        }


class AnimalRecord(AnimalAttributes):
    """
    追跡対象の動物 1 個体のレコード

    tag_id はストア内で一意な主キーで、生成後は変更できません
    (代入すると ValidationError)。
    """

    tag_id: int = Field(..., frozen=True, description="タグ ID (一意な整数)")

    @classmethod
    def from_attributes(cls, tag_id: int, attributes: AnimalAttributes) -> "AnimalRecord":
        """
        属性セットとタグ ID からレコードを生成

        Args:
            tag_id: タグ ID
            attributes: 更新可能な属性セット

        Returns:
            AnimalRecord: 生成したレコード
        """
        # attributes に AnimalRecord が渡された場合も元の tag_id は使わない
        return cls(tag_id=tag_id, **attributes.model_dump(exclude={"tag_id"}))

    def attributes(self) -> AnimalAttributes:
        """tag_id を除いた属性セットを返す"""
        return AnimalAttributes(**self.model_dump(exclude={"tag_id"}))

    def describe(self) -> str:
        """一覧表示用の 1 行表現"""
        return (
            f"ID: {self.tag_id} | Species: {self.species} | Name: {self.name} | "
            f"Age: {self.age} | Gender: {self.gender} | Weight: {self.weight:.2f} | "
            f"Health: {self.health_status}"
        )
