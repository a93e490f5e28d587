"""
Data Importer - Seed Review and Dictionary Databases
=====================================================

Loads dictionary keywords and reviews from .csv/.xlsx/.xls files into the
SQLite databases named in settings (REVIEW_DB_PATH, DICTIONARY_DB_PATH).
Creates the tables if they do not exist yet.

    python import_data.py --keywords dictionary.csv
    python import_data.py --reviews reviews.xlsx
"""

import sys
import logging
import argparse

from food_review.domain import StoreError
from food_review.infrastructure.config import get_settings
from food_review.infrastructure.importer import TableImporter
from food_review.infrastructure.persistence import SQLiteDictionaryStore, SQLiteReviewStore

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_import(keywords_file=None, reviews_file=None) -> dict:
    """Import the given files. Returns counts of rows added per store."""
    settings = get_settings()
    for issue in settings.validate():
        logger.warning(issue)

    importer = TableImporter()
    result = {"keywords": 0, "reviews": 0}

    if keywords_file:
        store = SQLiteDictionaryStore(
            settings.database.dictionary_db_path,
            timeout=settings.database.timeout_seconds,
        ).init()
        result["keywords"] = store.add_keywords(importer.parse_keywords(keywords_file))
        logger.info(f"Dictionary now holds {store.count()} keywords")

    if reviews_file:
        store = SQLiteReviewStore(
            settings.database.review_db_path,
            timeout=settings.database.timeout_seconds,
        ).init()
        result["reviews"] = store.add_reviews(importer.parse_reviews(reviews_file))
        logger.info(f"Review store now holds {store.count()} reviews")

    return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the food review databases")
    parser.add_argument("--keywords", help="CSV/Excel file with a keyword column")
    parser.add_argument("--reviews", help="CSV/Excel file with a review column (optional review_id)")
    args = parser.parse_args(argv)

    if not args.keywords and not args.reviews:
        parser.error("nothing to import: pass --keywords and/or --reviews")

    try:
        result = run_import(args.keywords, args.reviews)
    except (FileNotFoundError, ValueError, StoreError) as e:
        logger.error(f"Import failed: {e}")
        return 1

    print(f"Imported {result['keywords']} keywords, {result['reviews']} reviews")
    return 0


if __name__ == "__main__":
    sys.exit(main())
