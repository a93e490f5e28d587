"""
Table Importer - CSV/Excel Seeding for Reviews and Dictionary
==============================================================

Parses Excel or CSV files and auto-detects the keyword, review and id
columns. Supports .xlsx, .xls, and .csv formats.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from ...domain import MAX_REVIEW_ID

logger = logging.getLogger(__name__)

# Common column name variations for auto-detection
KEYWORD_PATTERNS = ['keyword', 'word', 'term', 'dish', 'food']
REVIEW_PATTERNS = ['review', 'content', 'text', 'comment']
ID_PATTERNS = ['review_id', 'id']

SUPPORTED_EXTENSIONS = ['.csv', '.xlsx', '.xls']


class TableImporter:
    """
    Universal Excel/CSV reader for seeding the stores.

    Usage:
        importer = TableImporter()
        keywords = importer.parse_keywords("dictionary.csv")
        # Returns: ["foie gras", "tiramisu", ...]
        reviews = importer.parse_reviews("reviews.xlsx")
        # Returns: [(8888, "the foie gras was sublime"), (None, "..."), ...]
    """

    def __init__(self):
        self.detected_columns: dict = {}

    def read_table(self, file_path: str, sheet_name: Optional[str] = None) -> pd.DataFrame:
        """Read a file into a DataFrame with normalised column names."""
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        ext = path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError(f"Unsupported file format: {ext}. Use .xlsx, .xls, or .csv")

        # Everything as text: ids are validated here, not by pandas
        if ext == '.csv':
            df = pd.read_csv(file_path, dtype=str, keep_default_na=True)
        else:
            df = pd.read_excel(file_path, sheet_name=sheet_name or 0, dtype=str)

        df.columns = df.columns.astype(str).str.strip().str.lower()
        return df

    def parse_keywords(self, file_path: str, sheet_name: Optional[str] = None) -> List[str]:
        """
        Parse dictionary keywords.

        Returns:
            Unique, stripped keywords in file order.
        """
        df = self.read_table(file_path, sheet_name)

        keyword_col = self._find_column(df.columns, KEYWORD_PATTERNS)
        self.detected_columns = {'keyword': keyword_col}
        logger.info(f"Detected columns: {self.detected_columns}")

        if not keyword_col:
            raise ValueError("Could not detect 'Keyword' column. Please ensure your file has a keyword column.")

        keywords = []
        seen = set()
        for value in df[keyword_col].dropna():
            keyword = str(value).strip()
            if not keyword or keyword in seen:
                continue
            seen.add(keyword)
            keywords.append(keyword)

        logger.info(f"Parsed {len(keywords)} keywords from {file_path}")
        return keywords

    def parse_reviews(
        self, file_path: str, sheet_name: Optional[str] = None
    ) -> List[Tuple[Optional[int], str]]:
        """
        Parse reviews.

        Returns:
            (review_id, content) pairs. review_id is None when the file has
            no id column; rows with an invalid id or empty content are skipped.
        """
        df = self.read_table(file_path, sheet_name)

        review_col = self._find_column(df.columns, REVIEW_PATTERNS, exclude=ID_PATTERNS)
        id_col = self._find_exact_column(df.columns, ID_PATTERNS)
        self.detected_columns = {'review': review_col, 'id': id_col}
        logger.info(f"Detected columns: {self.detected_columns}")

        if not review_col:
            raise ValueError("Could not detect 'Review' column. Please ensure your file has a review text column.")

        reviews = []
        skipped = 0
        for _, row in df.iterrows():
            content = row.get(review_col)
            if pd.isna(content) or not str(content).strip():
                skipped += 1
                continue

            review_id = None
            if id_col:
                review_id = self._clean_id(row.get(id_col))
                if review_id is None:
                    skipped += 1
                    continue

            reviews.append((review_id, str(content).strip()))

        logger.info(f"Parsed {len(reviews)} reviews from {file_path} ({skipped} skipped)")
        return reviews

    def _find_column(
        self, columns: pd.Index, patterns: List[str], exclude: Optional[List[str]] = None
    ) -> Optional[str]:
        """Find column matching any of the patterns."""
        exclude = exclude or []
        for pattern in patterns:
            for col in columns:
                if col in exclude:
                    continue
                if pattern == col or pattern in col:
                    return col
        return None

    def _find_exact_column(self, columns: pd.Index, names: List[str]) -> Optional[str]:
        for name in names:
            if name in columns:
                return name
        return None

    def _clean_id(self, value) -> Optional[int]:
        """Id in 0..MAX_REVIEW_ID, or None if the cell is not one."""
        if value is None or pd.isna(value):
            return None
        text = str(value).strip()
        # Excel hands back whole numbers as "8888.0"
        if text.endswith('.0'):
            text = text[:-2]
        if not text.isascii() or not text.isdigit():
            return None
        review_id = int(text)
        if review_id > MAX_REVIEW_ID:
            return None
        return review_id
