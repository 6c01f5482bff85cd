from .csv_parser import ParsedSheet, parse_csv

__all__ = ["ParsedSheet", "parse_csv"]
