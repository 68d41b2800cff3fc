"""
Date helpers for report titles and download file names.
"""

import re
import unicodedata
from datetime import date
from urllib.parse import quote

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

_FILENAME_UNSAFE = re.compile(r"[^\w.-]", re.ASCII)
_DISPOSITION_UNSAFE = re.compile(r'["\\\x00-\x1f\x7f]')


def ordinal(day: int) -> str:
    """1 -> 1st, 2 -> 2nd, 11 -> 11th, 23 -> 23rd"""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_report_date_range(from_date: date, to_date: date) -> str:
    """e.g. '24th March–28th March'"""
    return (
        f"{ordinal(from_date.day)} {from_date.strftime('%B')}"
        f"–{ordinal(to_date.day)} {to_date.strftime('%B')}"
    )


def format_joining_date(value: date) -> str:
    """e.g. '1st Feb'"""
    return f"{ordinal(value.day)} {value.strftime('%b')}"


def format_daily_title_date(value: date) -> str:
    """e.g. 'Mar 24th, 2025'"""
    return f"{value.strftime('%b')} {ordinal(value.day)}, {value.year}"


def sanitize_filename_part(value: str) -> str:
    return _FILENAME_UNSAFE.sub("_", value)


def attachment_disposition(file_name: str) -> str:
    """
    Content-Disposition value for a download.

    Header values must be latin-1, so names outside ASCII get an ASCII
    fallback plus the RFC 6266 filename* form carrying the UTF-8 name.
    """
    fallback = unicodedata.normalize("NFKD", file_name).encode("ascii", "ignore").decode("ascii")
    fallback = _DISPOSITION_UNSAFE.sub("", fallback).strip()
    stem, dot, extension = fallback.rpartition(".")
    if not fallback or (dot and not stem.strip()):
        fallback = f"download.{extension}" if dot and extension else "download"

    value = f'attachment; filename="{fallback}"'
    if fallback != file_name:
        value += f"; filename*=UTF-8''{quote(file_name, safe='')}"
    return value
