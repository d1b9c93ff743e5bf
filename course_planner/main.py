# === main.py ===
import argparse
import logging
import sys

from course_planner.config import load_config, log_level_number, validate_config
from course_planner.queries import EMPTY_CATALOG, NOT_FOUND, format_course_detail, format_course_list
from course_planner.session import AdvisingSession

MENU = """1. Load Data Structure.
2. Print Course List.
3. Print Course.
9. Exit
"""


def load_file(session, filename):
    if session.load(filename):
        print("✅ Courses loaded successfully.")
        if session.warning_count:
            print(f"⚠️ {session.warning_count} line(s) skipped")
        print()
    else:
        print(f"❌ Error: Cannot open file '{filename}'. Please check the file and try again.\n")


def print_course_list(session):
    rows = session.list_all()
    if rows is EMPTY_CATALOG:
        print("No courses loaded. Please load data first.\n")
        return
    print("\nHere is a sample schedule:")
    for line in format_course_list(rows):
        print(line)
    print()


def print_course(session, query):
    course = session.detail(query)
    if course is EMPTY_CATALOG:
        print("No courses loaded. Please load data first.\n")
        return
    if course is NOT_FOUND:
        print("Course not found.\n")
        return
    print()
    for line in format_course_detail(course):
        print(line)
    print()


def run_menu(session):
    print("Welcome to the course planner.\n")

    while True:
        print(MENU)
        try:
            choice = input("What would you like to do? ").strip()
        except EOFError:
            break

        if choice == "1":
            try:
                filename = input("Enter the file name to load: ").strip()
            except EOFError:
                break
            load_file(session, filename)
        elif choice in ("2", "3") and not session.loaded:
            print("Please load data first using option 1.\n")
        elif choice == "2":
            print_course_list(session)
        elif choice == "3":
            try:
                query = input("What course do you want to know about? ").strip()
            except EOFError:
                break
            print_course(session, query)
        elif choice == "9":
            print("Thank you for using the course planner!")
            return
        else:
            print(f"{choice} is not a valid option.\n")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Browse a course catalog and its prerequisites")
    ap.add_argument("--file", "-f", help="Course file (path or URL) to load at start-up")
    ap.add_argument("--buckets", type=int, help="Number of hash table buckets")
    ap.add_argument("--config", "-c", help="JSON config file")
    ap.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    args = ap.parse_args(argv)

    try:
        config = load_config(args.config)
        if args.buckets is not None:
            config["bucket_count"] = args.buckets
        if args.log_level:
            config["log_level"] = args.log_level.upper()
        validate_config(config)
        session = AdvisingSession.from_config(config)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=log_level_number(config["log_level"]), stream=sys.stderr)

    if args.file:
        load_file(session, args.file)

    run_menu(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
