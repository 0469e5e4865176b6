"""
Dataset readers for spreadsheet uploads and spreadsheet links.
"""

from .file_reader import FileReadError, FileReader, UnsupportedFileFormatError, frame_to_dataset, read_csv_text
from .sheet_link import SheetLinkReader, SheetUrlError, export_csv_url, parse_sheet_url

__all__ = [
    "FileReader",
    "FileReadError",
    "SheetLinkReader",
    "UnsupportedFileFormatError",
    "SheetUrlError",
    "frame_to_dataset",
    "read_csv_text",
    "parse_sheet_url",
    "export_csv_url",
]
