"""
インフラストラクチャ層

レコードストアとインポートファイル読み込みを提供します。
"""

from .record_store import RecordStore
from .line_reader import LineReader

__all__ = ["RecordStore", "LineReader"]
