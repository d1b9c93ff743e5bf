# === course.py ===
def canonical_number(number):
    """Trimmed, uppercased form used for every course number comparison."""
    return number.strip().upper()


class Course:
    def __init__(self, number, title, prerequisites=None):
        self.number = number
        self.title = title
        self.prerequisites = list(prerequisites or [])  # list of str, verbatim

    @property
    def key(self):
        return canonical_number(self.number)

    def copy(self):
        return Course(self.number, self.title, self.prerequisites)

    def __eq__(self, other):
        if not isinstance(other, Course):
            return NotImplemented
        return (
            self.key == other.key
            and self.title == other.title
            and self.prerequisites == other.prerequisites
        )

    def __repr__(self):
        return f"Course({self.number!r}, {self.title!r}, {self.prerequisites!r})"
