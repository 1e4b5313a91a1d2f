"""
体重集計ロジック

動物種ごとの平均体重を計算します。状態を持たず、レコードのスナップショットを
読むだけです。
"""

from typing import Dict, Iterable, List, Optional
from pydantic import BaseModel, Field

from .models import AnimalRecord


class SpeciesWeightSummary(BaseModel):
    """
    動物種別の体重集計結果

    該当レコードがない場合 average_weight は None になり、
    平均がたまたま 0 の場合と区別できます。
    """

    species: str = Field(..., description="問い合わせた動物種")
    count: int = Field(default=0, description="該当レコード数")
    average_weight: Optional[float] = Field(default=None, description="平均体重")

    @property
    def has_matches(self) -> bool:
        return self.count > 0


class WeightAggregator:
    """
    平均体重の集計

    動物種は大文字小文字を区別せず完全一致で比較します。
    """

    @staticmethod
    def summarize(records: Iterable[AnimalRecord], species: str) -> SpeciesWeightSummary:
        """
        指定動物種の体重を集計

        Args:
            records: 集計対象のレコード
            species: 動物種（大文字小文字を区別しない）

        Returns:
            SpeciesWeightSummary: 該当件数と平均体重
        """
        key = WeightAggregator._species_key(species)
        weights: List[float] = [
            record.weight
            for record in records
            if WeightAggregator._species_key(record.species) == key
        ]

        if not weights:
            return SpeciesWeightSummary(species=species)

        return SpeciesWeightSummary(
            species=species,
            count=len(weights),
            average_weight=sum(weights) / len(weights)
        )

    @staticmethod
    def average_weight(records: Iterable[AnimalRecord], species: str) -> Optional[float]:
        """
        指定動物種の平均体重

        Returns:
            Optional[float]: 平均体重、該当レコードがない場合は None
        """
        return WeightAggregator.summarize(records, species).average_weight

    @staticmethod
    def average_by_species(records: Iterable[AnimalRecord]) -> Dict[str, float]:
        """
        全動物種の平均体重（グラフ表示用データ）

        大文字小文字違いの種は 1 グループにまとめ、最初に現れた表記をキーにします。

        Args:
            records: 集計対象のレコード

        Returns:
            Dict[str, float]: 動物種 → 平均体重（最初に現れた順）
        """
        labels: Dict[str, str] = {}
        weights: Dict[str, List[float]] = {}

        for record in records:
            key = WeightAggregator._species_key(record.species)
            if key not in labels:
                labels[key] = record.species
                weights[key] = []
            weights[key].append(record.weight)

        return {
            labels[key]: sum(values) / len(values)
            for key, values in weights.items()
        }

    @staticmethod
    def _species_key(species: str) -> str:
        return species.lower()
