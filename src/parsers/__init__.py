"""File name decoding and archive detection utilities."""

from .archive_checker import is_archive
from .filename_decoder import DecodedFilename, InvalidFilenameError, decode_filename

__all__ = ["DecodedFilename", "InvalidFilenameError", "decode_filename", "is_archive"]
