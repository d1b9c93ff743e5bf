# === loader.py ===
import logging

import requests

from course_planner.course import Course
from course_planner.diagnostics import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","
DEFAULT_TIMEOUT = 10
HEADERS = {'User-Agent': 'Mozilla/5.0'}


def split_fields(line, delimiter=DEFAULT_DELIMITER):
    return [field.strip() for field in line.split(delimiter)]


def parse_record(line, delimiter=DEFAULT_DELIMITER):
    """Turn one catalog line into a Course, or None if number/title are missing."""
    fields = split_fields(line, delimiter)
    if len(fields) < 2:
        return None
    number, title = fields[0], fields[1]
    if not number or not title:
        return None
    prerequisites = [p for p in fields[2:] if p]
    return Course(number, title, prerequisites)


def _is_url(source):
    return source.startswith(("http://", "https://"))


def read_source(source, timeout=DEFAULT_TIMEOUT):
    """Return every line of a local file or http(s) URL, split on newlines only.

    Raises OSError, UnicodeDecodeError or requests.RequestException when
    the source can't be read.
    """
    if _is_url(source):
        resp = requests.get(source, headers=HEADERS, timeout=timeout)
        resp.raise_for_status()
        return resp.text.split("\n")

    with open(source, encoding="utf-8") as f:
        return f.read().split("\n")


def load_courses(source, catalog, delimiter=DEFAULT_DELIMITER, diagnostics=None, timeout=DEFAULT_TIMEOUT):
    """Replace the contents of ``catalog`` with the courses read from ``source``.

    Returns False only when the source can't be read, in which case the
    catalog is left as it was. Skipped lines and duplicate courses are
    logged and, when a ``diagnostics`` list is given, appended to it.
    """
    if diagnostics is None:
        diagnostics = []

    try:
        lines = read_source(source, timeout=timeout)
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        logger.error(f"Cannot open file '{source}': {e}")
        diagnostics.append(Diagnostic(DiagnosticKind.SOURCE_UNREADABLE, None, f"{source}: {e}"))
        return False

    catalog.clear()
    loaded = 0
    skipped = 0

    for line_number, line in enumerate(lines, 1):
        line = line.strip()
        if not line:
            continue

        course = parse_record(line, delimiter)
        if course is None:
            logger.warning(f"Line {line_number}: skipping invalid line {line!r}")
            diagnostics.append(Diagnostic(DiagnosticKind.MALFORMED_RECORD, line_number, line))
            skipped += 1
            continue

        if catalog.insert(course):
            loaded += 1
        else:
            diagnostics.append(Diagnostic(DiagnosticKind.DUPLICATE_KEY, line_number, course.number))
            skipped += 1

    logger.info(f"Loaded {loaded} courses from {source} ({skipped} lines skipped)")
    return True
