# === queries.py ===
from enum import Enum

from course_planner.course import canonical_number


class QueryOutcome(Enum):
    EMPTY_CATALOG = "empty_catalog"
    NOT_FOUND = "not_found"


EMPTY_CATALOG = QueryOutcome.EMPTY_CATALOG
NOT_FOUND = QueryOutcome.NOT_FOUND


def list_courses(catalog):
    """(number, title) rows sorted by canonical course number."""
    courses = catalog.all_courses()
    if not courses:
        return EMPTY_CATALOG
    courses.sort(key=lambda c: canonical_number(c.number))
    return [(c.number, c.title) for c in courses]


def course_detail(catalog, query):
    if len(catalog) == 0:
        return EMPTY_CATALOG
    course = catalog.search(query)
    if course is None:
        return NOT_FOUND
    return course


def format_course_list(rows):
    return [f"{number}, {title}" for number, title in rows]


def format_course_detail(course):
    if course.prerequisites:
        prereqs = ", ".join(course.prerequisites)
    else:
        prereqs = "None"
    return [f"{course.number}, {course.title}", f"Prerequisites: {prereqs}"]
