# === session.py ===
from course_planner.catalog import CourseCatalog, DEFAULT_BUCKET_COUNT
from course_planner.loader import DEFAULT_DELIMITER, DEFAULT_TIMEOUT, load_courses
from course_planner.queries import EMPTY_CATALOG, course_detail, list_courses


class AdvisingSession:
    """The catalog an advisor is working with, plus whether a load has succeeded."""

    def __init__(self, bucket_count=DEFAULT_BUCKET_COUNT, delimiter=DEFAULT_DELIMITER, timeout=DEFAULT_TIMEOUT):
        self.catalog = CourseCatalog(bucket_count)
        self.delimiter = delimiter
        self.timeout = timeout
        self.loaded = False
        self.diagnostics = []  # from the most recent load

    @classmethod
    def from_config(cls, config):
        return cls(
            bucket_count=config["bucket_count"],
            delimiter=config["delimiter"],
            timeout=config["request_timeout"],
        )

    def load(self, source):
        self.diagnostics = []
        self.loaded = load_courses(
            source,
            self.catalog,
            delimiter=self.delimiter,
            diagnostics=self.diagnostics,
            timeout=self.timeout,
        )
        return self.loaded

    @property
    def warning_count(self):
        return len(self.diagnostics)

    def list_all(self):
        if not self.loaded:
            return EMPTY_CATALOG
        return list_courses(self.catalog)

    def detail(self, query):
        if not self.loaded:
            return EMPTY_CATALOG
        return course_detail(self.catalog, query)
