"""
インポートファイル読み込み

インポート用テキストファイルを UTF-8 で読み込み、行のリストとして返します。
"""

from pathlib import Path
from typing import List, Union


class LineReader:
    """
    インポートファイルの行読み込み

    行末の改行文字 (\\n, \\r\\n) は除去します。
    """

    ENCODING = "utf-8"

    def read_lines(self, path: Union[str, Path]) -> List[str]:
        """
        ファイルを行単位で読み込み

        Args:
            path: インポートファイルのパス

        Returns:
            List[str]: 改行を除去した行リスト（ファイル内の順序）

        Raises:
            OSError: ファイルが存在しない・読み込めない場合
            UnicodeDecodeError: UTF-8 として解釈できない場合
        """
        with open(path, "r", encoding=self.ENCODING, newline="") as f:
            return [line.rstrip("\r\n") for line in f]
