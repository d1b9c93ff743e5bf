"""Tests for listing and detail queries."""

from course_planner.catalog import CourseCatalog
from course_planner.course import Course
from course_planner.loader import load_courses
from course_planner.queries import (
    EMPTY_CATALOG,
    NOT_FOUND,
    course_detail,
    format_course_detail,
    format_course_list,
    list_courses,
)


def test_scenario_listing(scenario_file):
    catalog = CourseCatalog()
    load_courses(scenario_file, catalog)

    rows = list_courses(catalog)
    assert format_course_list(rows) == [
        "CSCI101, Intro to Programming",
        "CSCI200, Data Structures",
        "CSCI300, Algorithms",
    ]


def test_scenario_detail(scenario_file):
    catalog = CourseCatalog()
    load_courses(scenario_file, catalog)

    course = course_detail(catalog, "csci200")
    assert course.number == "CSCI200"
    assert course.title == "Data Structures"
    assert course.prerequisites == ["CSCI101"]
    assert format_course_detail(course) == ["CSCI200, Data Structures", "Prerequisites: CSCI101"]


def test_listing_round_trip_sorted():
    catalog = CourseCatalog(bucket_count=5)
    numbers = ["math201", "CSCI350", "csci100", "BIO110", "CSCI101", "art100"]
    for n in numbers:
        catalog.insert(Course(n, f"title {n}"))

    rows = list_courses(catalog)
    assert len(rows) == len(numbers)
    assert [r[0] for r in rows] == ["art100", "BIO110", "csci100", "CSCI101", "CSCI350", "math201"]


def test_empty_catalog_outcomes():
    catalog = CourseCatalog()
    assert list_courses(catalog) is EMPTY_CATALOG
    assert course_detail(catalog, "CSCI101") is EMPTY_CATALOG


def test_not_found():
    catalog = CourseCatalog()
    catalog.insert(Course("CSCI101", "Intro"))
    assert course_detail(catalog, "CSCI102") is NOT_FOUND


def test_detail_without_prerequisites():
    assert format_course_detail(Course("CSCI100", "Intro to CS")) == [
        "CSCI100, Intro to CS",
        "Prerequisites: None",
    ]


def test_detail_joins_prerequisites():
    course = Course("CSCI400", "Large Software Development", ["CSCI301", "CSCI350"])
    assert format_course_detail(course)[1] == "Prerequisites: CSCI301, CSCI350"
