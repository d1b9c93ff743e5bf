# === catalog.py ===
import logging

from course_planner.course import canonical_number

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 20
_HASH_MASK = 0xFFFFFFFF  # unsigned 32-bit accumulator


def hash_key(key):
    """Polynomial (base 31) hash over the UTF-8 bytes of an already canonical key."""
    value = 0
    for byte in key.encode("utf-8"):
        value = (value * 31 + byte) & _HASH_MASK
    return value


class CourseCatalog:
    """Fixed-size hash table of courses keyed by canonical course number.

    Collisions are chained: each bucket is a list scanned linearly. The
    table never resizes. Lookups hand back copies so stored courses are
    never mutated from outside and stay valid across ``clear()``.
    """

    def __init__(self, bucket_count=DEFAULT_BUCKET_COUNT):
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be at least 1, got {bucket_count}")
        self._bucket_count = bucket_count
        self.buckets = [[] for _ in range(bucket_count)]  # index -> [Course]

    @property
    def bucket_count(self):
        return self._bucket_count

    def bucket_index(self, number):
        return hash_key(canonical_number(number)) % self._bucket_count

    def _find(self, key):
        bucket = self.buckets[hash_key(key) % self._bucket_count]
        for course in bucket:
            if course.key == key:
                return course
        return None

    def insert(self, course):
        """Store ``course``; returns False and leaves the table unchanged on a duplicate."""
        key = course.key
        if self._find(key) is not None:
            logger.warning(f"Duplicate course '{course.number}' found. Skipping duplicate.")
            return False
        self.buckets[hash_key(key) % self._bucket_count].append(course.copy())
        return True

    def search(self, number):
        found = self._find(canonical_number(number))
        return found.copy() if found is not None else None

    def all_courses(self):
        # Bucket order, then insertion order. Callers sort.
        return [course.copy() for bucket in self.buckets for course in bucket]

    def clear(self):
        for bucket in self.buckets:
            bucket.clear()

    def __len__(self):
        return sum(len(bucket) for bucket in self.buckets)

    def __contains__(self, number):
        return self._find(canonical_number(number)) is not None
