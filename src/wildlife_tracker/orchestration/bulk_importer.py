"""一括インポートサービス"""

from typing import Iterable, List, Optional, Union
from enum import Enum
from pathlib import Path
import logging
from pydantic import BaseModel, Field

from ..domain.errors import ErrorKind
from ..domain.models import AnimalRecord
from ..domain.row_parser import RowParser, RowParseError
from ..domain.validator import RecordValidator
from ..infrastructure.line_reader import LineReader
from ..infrastructure.record_store import RecordStore


class DiagnosticLevel(str, Enum):
    """診断メッセージのレベル"""
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


class Diagnostic(BaseModel):
    """
    インポート中の 1 件の診断メッセージ

    Attributes:
        level: レベル（スキップ警告・エラー・完了サマリー）
        kind: エラー種別（サマリーの場合は None）
        line_number: 対象行番号（1 始まり、サマリーの場合は None）
        line: 対象行の原文
        message: 表示用メッセージ
    """
    level: DiagnosticLevel
    kind: Optional[ErrorKind] = None
    line_number: Optional[int] = None
    line: Optional[str] = None
    message: str

    def render(self) -> str:
        """表示用文字列 (例: "[WARNING] Duplicate Tag ID skipped: 1")"""
        return f"[{self.level.value.upper()}] {self.message}"


class ImportReport(BaseModel):
    """
    インポート結果

    Attributes:
        diagnostics: 診断メッセージ（発生順、最後が完了サマリー）
        imported_count: 取り込んだレコード数
        skipped_count: スキップした行数
        lines_read: 読み込んだ行数
    """
    diagnostics: List[Diagnostic] = Field(default_factory=list)
    imported_count: int = 0
    skipped_count: int = 0
    lines_read: int = 0

    @property
    def has_problems(self) -> bool:
        """完了サマリー以外の診断メッセージがあるか"""
        return any(d.level != DiagnosticLevel.SUCCESS for d in self.diagnostics)

    def rendered(self) -> List[str]:
        """全診断メッセージの表示用文字列"""
        return [d.render() for d in self.diagnostics]


class BulkImporter:
    """
    区切り文字付きテキストからの一括インポート

    Responsibilities:
    - 行ごとの分割・数値変換・重複チェック・バリデーション
    - RecordStore.insert への委譲（ストアの検証が最終判定）
    - 不正行ごとの診断メッセージ蓄積（1 行の失敗でバッチを中断しない）

    表示は行わず、診断メッセージを呼び出し側に返します。
    """

    def __init__(self, store: RecordStore, line_reader: Optional[LineReader] = None):
        """
        BulkImporter を初期化

        Args:
            store: 取り込み先のレコードストア
            line_reader: ファイル読み込み（None の場合は LineReader を使用）
        """
        self.store = store
        self.line_reader = line_reader or LineReader()
        self.logger = logging.getLogger(__name__)

    def import_file(self, path: Union[str, Path]) -> ImportReport:
        """
        ファイルからインポート

        Args:
            path: インポートファイルのパス

        Returns:
            ImportReport: インポート結果

        Note:
            ファイルを読めない場合は FILE_ERROR の診断 1 件のみを返す（サマリーなし）
        """
        try:
            lines = self.line_reader.read_lines(path)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Failed to read import file: {path}", extra={"error": str(e)})
            return ImportReport(
                diagnostics=[
                    Diagnostic(
                        level=DiagnosticLevel.ERROR,
                        kind=ErrorKind.FILE_ERROR,
                        message=f"File error: {e}"
                    )
                ]
            )

        return self.import_lines(lines)

    def import_lines(self, lines: Iterable[str]) -> ImportReport:
        """
        行のシーケンスからインポート

        Args:
            lines: インポート行（行末の改行は含んでいてもよい）

        Returns:
            ImportReport: 診断メッセージと取り込み件数

        Invariants:
            不正行は 1 行につき診断 1 件、最後に完了サマリー 1 件
        """
        report = ImportReport()

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            report.lines_read += 1

            diagnostic = self._import_line(line_number, line)
            if diagnostic is None:
                report.imported_count += 1
            else:
                report.skipped_count += 1
                report.diagnostics.append(diagnostic)

        report.diagnostics.append(
            Diagnostic(
                level=DiagnosticLevel.SUCCESS,
                message=f"{report.imported_count} animals uploaded successfully."
            )
        )

        self.logger.info(
            "Import completed",
            extra={
                "lines_read": report.lines_read,
                "imported_count": report.imported_count,
                "skipped_count": report.skipped_count
            }
        )
        return report

    def _import_line(self, line_number: int, line: str) -> Optional[Diagnostic]:
        """
        1 行を取り込み

        Returns:
            Optional[Diagnostic]: 成功時は None、スキップ時はその理由
        """
        raw_row = RowParser.split_line(line)
        if raw_row is None:
            return self._skip(
                DiagnosticLevel.WARNING,
                ErrorKind.MALFORMED_ROW,
                line_number,
                line,
                f"Skipping line due to missing fields: {line}"
            )

        try:
            candidate: AnimalRecord = RowParser.to_record(raw_row)
        except RowParseError as e:
            return self._skip(
                DiagnosticLevel.ERROR,
                ErrorKind.NUMERIC_PARSE_FAILURE,
                line_number,
                line,
                str(e)
            )

        # 重複の事前チェック（最終判定は RecordStore.insert）
        if self.store.contains(candidate.tag_id):
            return self._skip(
                DiagnosticLevel.WARNING,
                ErrorKind.DUPLICATE_KEY,
                line_number,
                line,
                f"Duplicate Tag ID skipped: {candidate.tag_id}"
            )

        violation = RecordValidator.check(candidate)
        if violation is not None:
            kind, message = violation
            return self._skip(DiagnosticLevel.ERROR, kind, line_number, line, message)

        result = self.store.insert(candidate)
        if not result.success:
            return self._skip(DiagnosticLevel.ERROR, result.error, line_number, line, result.message)

        return None

    def _skip(
        self,
        level: DiagnosticLevel,
        kind: ErrorKind,
        line_number: int,
        line: str,
        message: str
    ) -> Diagnostic:
        self.logger.warning(
            f"Skipped line {line_number}: {message}",
            extra={"line_number": line_number, "error": kind.value}
        )
        return Diagnostic(
            level=level,
            kind=kind,
            line_number=line_number,
            line=line,
            message=message
        )
