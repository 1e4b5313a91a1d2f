"""
レコードストア

動物レコードの正本コレクションと使用中タグ ID セットを保持します。
挿入・更新・削除はすべてここを通り、検証済みの変更のみが反映されます。
永続化は行いません（プロセス存続期間のみ）。
"""

import logging
import threading
from typing import Dict, FrozenSet, List, Optional, Set

from ..domain.aggregator import SpeciesWeightSummary, WeightAggregator
from ..domain.errors import ErrorKind, OperationResult
from ..domain.models import AnimalAttributes, AnimalRecord
from ..domain.validator import RecordValidator


class RecordStore:
    """
    動物レコードのインメモリストア

    Responsibilities:
    - tag_id をキーとしたレコードの保持（挿入順）
    - 使用中タグ ID セットの同期維持（コレクションと常に一致）
    - 挿入・更新時のバリデーション（唯一の挿入経路）
    - 集計クエリの提供

    全操作は単一のロックで直列化されます。
    """

    def __init__(self):
        """空の RecordStore を初期化"""
        self._records: Dict[int, AnimalRecord] = {}
        self._used_ids: Set[int] = set()
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

    def insert(self, record: AnimalRecord) -> OperationResult:
        """
        レコードを検証して追加

        Args:
            record: 追加するレコード

        Returns:
            OperationResult: 成功、または最初に違反した前提条件

        Note:
            - 検査順: tag_id 重複 → age → weight → health_status
            - 失敗時はストアを一切変更しない
            - 呼び出し側が保持するインスタンスとは別のコピーを保存する
        """
        with self._lock:
            if record.tag_id in self._used_ids:
                return self._reject(
                    OperationResult.fail(
                        ErrorKind.DUPLICATE_KEY,
                        f"Tag ID already exists: {record.tag_id}",
                        tag_id=record.tag_id
                    )
                )

            violation = RecordValidator.check(record)
            if violation is not None:
                kind, message = violation
                return self._reject(OperationResult.fail(kind, message, tag_id=record.tag_id))

            self._records[record.tag_id] = record.model_copy()
            self._used_ids.add(record.tag_id)

        self.logger.info("Animal added", extra={"tag_id": record.tag_id})
        return OperationResult.ok(record.tag_id)

    def update(self, tag_id: int, attributes: AnimalAttributes) -> OperationResult:
        """
        既存レコードの属性を一括更新

        Args:
            tag_id: 更新対象のタグ ID
            attributes: 新しい属性セット（全フィールド必須）

        Returns:
            OperationResult: 成功、または NOT_FOUND / 最初に違反した前提条件

        Note:
            tag_id 自体は変更されないため重複チェックは行わない
        """
        with self._lock:
            existing = self._records.get(tag_id)
            if existing is None:
                return self._reject(
                    OperationResult.fail(
                        ErrorKind.NOT_FOUND,
                        f"Animal with ID {tag_id} not found.",
                        tag_id=tag_id
                    )
                )

            violation = RecordValidator.check(attributes)
            if violation is not None:
                kind, message = violation
                return self._reject(OperationResult.fail(kind, message, tag_id=tag_id))

            # 全属性を 1 単位として置き換える
            self._records[tag_id] = AnimalRecord.from_attributes(tag_id, attributes)

        self.logger.info("Animal updated", extra={"tag_id": tag_id})
        return OperationResult.ok(tag_id)

    def delete(self, tag_id: int) -> OperationResult:
        """
        レコードを削除

        Args:
            tag_id: 削除対象のタグ ID

        Returns:
            OperationResult: 成功、または NOT_FOUND
        """
        with self._lock:
            if tag_id not in self._records:
                return self._reject(
                    OperationResult.fail(
                        ErrorKind.NOT_FOUND,
                        f"Animal with ID {tag_id} not found.",
                        tag_id=tag_id
                    )
                )

            del self._records[tag_id]
            self._used_ids.discard(tag_id)

        self.logger.info("Animal deleted", extra={"tag_id": tag_id})
        return OperationResult.ok(tag_id)

    def find_by_id(self, tag_id: int) -> Optional[AnimalRecord]:
        """
        タグ ID でレコードを検索

        Returns:
            Optional[AnimalRecord]: レコードのコピー、存在しない場合は None
        """
        with self._lock:
            record = self._records.get(tag_id)
            return record.model_copy() if record is not None else None

    def list_all(self) -> List[AnimalRecord]:
        """
        全レコードのスナップショット

        Returns:
            List[AnimalRecord]: 挿入順のレコードのコピー（新しいリスト）
        """
        with self._lock:
            return [record.model_copy() for record in self._records.values()]

    def contains(self, tag_id: int) -> bool:
        """タグ ID が使用中か"""
        with self._lock:
            return tag_id in self._used_ids

    def used_tag_ids(self) -> FrozenSet[int]:
        """使用中タグ ID セットのスナップショット"""
        with self._lock:
            return frozenset(self._used_ids)

    def average_weight(self, species: str) -> Optional[float]:
        """
        指定動物種の平均体重

        Args:
            species: 動物種（大文字小文字を区別しない）

        Returns:
            Optional[float]: 平均体重、該当レコードがない場合は None
        """
        return WeightAggregator.average_weight(self.list_all(), species)

    def summarize_weight(self, species: str) -> SpeciesWeightSummary:
        """指定動物種の体重集計（件数付き）"""
        return WeightAggregator.summarize(self.list_all(), species)

    def average_weights_by_species(self) -> Dict[str, float]:
        """全動物種の平均体重"""
        return WeightAggregator.average_by_species(self.list_all())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _reject(self, result: OperationResult) -> OperationResult:
        self.logger.warning(
            f"Operation rejected: {result.message}",
            extra={"tag_id": result.tag_id, "error": result.error.value}
        )
        return result
