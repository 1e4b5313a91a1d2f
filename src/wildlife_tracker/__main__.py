"""CLI エントリーポイント"""

import argparse
import sys
import logging
import os

from .infrastructure.record_store import RecordStore
from .orchestration.bulk_importer import BulkImporter, DiagnosticLevel
from .domain.errors import ErrorKind


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを構築"""
    parser = argparse.ArgumentParser(
        prog="wildlife_tracker",
        description="Import wildlife animal records and report average weights."
    )
    parser.add_argument(
        "file",
        help="Import file (tagId,species,name,age,gender,weight,healthStatus per line)"
    )
    parser.add_argument(
        "--species",
        action="append",
        default=[],
        help="Species to report the average weight for (repeatable)"
    )
    parser.add_argument(
        "--by-species",
        action="store_true",
        help="Report the average weight of every species"
    )
    return parser


def resolve_log_level(name: str) -> int:
    """
    ログレベル名を数値に変換

    Args:
        name: ログレベル名（大文字小文字を区別しない）

    Returns:
        int: ログレベル、未知の名前の場合は INFO
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


def main(argv=None):
    """
    CLI エントリーポイント

    Usage:
        python -m wildlife_tracker animals.csv --species Lion --by-species

    Exit codes:
        0: インポート完了（スキップ行があっても 0）
        1: ファイルエラーまたは予期しないエラー

    Environment:
        WILDLIFE_TRACKER_LOG_LEVEL: ログレベル（既定値 INFO）
    """
    args = build_parser().parse_args(argv)

    # ロギング設定
    logging.basicConfig(
        level=resolve_log_level(os.environ.get("WILDLIFE_TRACKER_LOG_LEVEL", "INFO")),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)

    try:
        store = RecordStore()
        importer = BulkImporter(store)

        logger.info(f"Importing animal records from {args.file}")
        report = importer.import_file(args.file)

        for line in report.rendered():
            print(line)

        if any(d.kind == ErrorKind.FILE_ERROR for d in report.diagnostics):
            sys.exit(1)

        records = store.list_all()
        if records:
            for record in records:
                print(record.describe())
        else:
            print("[INFO] No animals to display.")

        for species in args.species:
            summary = store.summarize_weight(species)
            if summary.has_matches:
                print(f"[INFO] Average weight for species '{species}': {summary.average_weight:.2f}")
            else:
                print(f"[INFO] No animals found for species: {species}")

        if args.by_species:
            for species, average in store.average_weights_by_species().items():
                print(f"[INFO] Average weight for species '{species}': {average:.2f}")

        warnings = sum(1 for d in report.diagnostics if d.level != DiagnosticLevel.SUCCESS)
        logger.info(
            f"Import finished: {report.imported_count} imported, {warnings} skipped"
        )
        sys.exit(0)

    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
