"""Extractor package — dates and metadata from raw article markup."""

from freshness.extractor.dates import extract_dates, parse_date, parse_date_text
from freshness.extractor.metadata import extract_metadata

__all__ = ["extract_dates", "extract_metadata", "parse_date", "parse_date_text"]
