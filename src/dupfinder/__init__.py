from .fingerprint import bucket_hash, data_digest, file_digest
from .scanner import DuplicateScanner, ScanOptions, find_duplicates
from .table import ChainedTable, DEFAULT_CAPACITY

__all__ = [
    "bucket_hash",
    "data_digest",
    "file_digest",
    "ChainedTable",
    "DEFAULT_CAPACITY",
    "DuplicateScanner",
    "ScanOptions",
    "find_duplicates",
]
