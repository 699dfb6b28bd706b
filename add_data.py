"""
Script to add sample data to the Gradebook platform via REST API.
Make sure the server is running before executing this script.

Usage:
    python add_data.py
"""

import requests
import json
import sys
import os


def _console_supports_utf8() -> bool:
    enc = getattr(sys.stdout, "encoding", None)
    return enc is not None and "utf" in enc.lower()


_OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
_FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"
_WARN_CHAR = "⚠" if _console_supports_utf8() else "[WARN]"

DEFAULT_BASE_URL = "http://127.0.0.1:8000"


def _detect_base_url() -> str:
    """Determine a reachable BASE_URL.

    Priority: environment variable `GRADEBOOK_BASE_URL`, then common local ports.
    If nothing responds, fall back to http://127.0.0.1:8000.
    """
    env = os.environ.get("GRADEBOOK_BASE_URL")
    if env:
        return env

    candidates = [
        DEFAULT_BASE_URL,
        "http://127.0.0.1:8888",
        "http://localhost:8000",
        "http://localhost:8888",
    ]

    for c in candidates:
        try:
            resp = requests.get(f"{c}/health", timeout=0.5)
            if resp.status_code == 200:
                return c
        except requests.exceptions.RequestException:
            continue

    return candidates[0]


BASE_URL = os.environ.get("GRADEBOOK_BASE_URL", DEFAULT_BASE_URL)


def check_server():
    """Check if the server is running."""
    try:
        response = requests.get(f"{BASE_URL}/health", timeout=2)
        if response.status_code == 200:
            print(f"{_OK_CHAR} Server is running")
            return True
        print(f"{_FAIL_CHAR} Server answered {response.status_code} on /health")
        return False
    except requests.exceptions.RequestException:
        print(f"{_FAIL_CHAR} Server is not running!")
        print("\nPlease start the server first:")
        print("  python -m gradebook.main --rest-port 8000")
        return False


def _post(path, data, expected_status, success_message, failure_label):
    try:
        response = requests.post(f"{BASE_URL}{path}", json=data)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error {failure_label}: {e}")
        return None
    if response.status_code == expected_status:
        print(f"{_OK_CHAR} {success_message}")
        return response.json()
    print(f"{_FAIL_CHAR} Failed {failure_label}: {response.text}")
    return None


def create_student(student_id, name, email):
    """Create a new student."""
    data = {
        "student_id": student_id,
        "name": name,
        "email": email
    }
    return _post("/students", data, 201, f"Created student: {name} ({student_id})", "creating student")


def create_course(course_code, course_name, credits):
    """Create a new course."""
    data = {
        "course_code": course_code,
        "course_name": course_name,
        "credits": credits
    }
    return _post("/courses", data, 201, f"Created course: {course_code} - {course_name}", "creating course")


def record_grade(student_id, course_code, grade_value):
    """Record a grade for a student in a course."""
    data = {
        "student_id": student_id,
        "course_code": course_code,
        "grade_value": grade_value
    }
    result = _post("/grades", data, 200,
                   f"Recorded {grade_value} for {student_id} in {course_code}", "recording grade")
    if result and result.get('letter_grade') == 'F':
        print(f"{_WARN_CHAR} {student_id} is failing {result['course_code']}")
    return result


def list_students():
    """List all students with their GPA."""
    try:
        response = requests.get(f"{BASE_URL}/students")
        if response.status_code != 200:
            print(f"{_FAIL_CHAR} Failed to list students: {response.text}")
            return []
        students = response.json()
        print(f"\n{'='*60}")
        print(f"Students ({len(students)})")
        print(f"{'='*60}")
        for student in students:
            gpa_response = requests.get(f"{BASE_URL}/students/{student['student_id']}/gpa")
            gpa = gpa_response.json()['gpa'] if gpa_response.status_code == 200 else 0.0
            print(f"  {student['student_id']:8} | {student['name']:20} | GPA {gpa:4.2f} | {student['email']}")
        return students
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error listing students: {e}")
        return []


def list_courses():
    """List all courses with their average grade."""
    try:
        response = requests.get(f"{BASE_URL}/courses")
        if response.status_code != 200:
            print(f"{_FAIL_CHAR} Failed to list courses: {response.text}")
            return []
        courses = response.json()
        print(f"\n{'='*60}")
        print(f"Courses ({len(courses)})")
        print(f"{'='*60}")
        for course in courses:
            avg_response = requests.get(f"{BASE_URL}/courses/{course['course_code']}/average")
            average = avg_response.json()['average'] if avg_response.status_code == 200 else 0.0
            print(f"  {course['course_code']:10} | {course['course_name']:30} | {course['credits']} credits | avg {average:.1f}")
        return courses
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error listing courses: {e}")
        return []


def get_statistics():
    """Get system statistics."""
    try:
        response = requests.get(f"{BASE_URL}/statistics")
        if response.status_code == 200:
            stats = response.json()
            print(f"\n{'='*60}")
            print("System Statistics")
            print(f"{'='*60}")
            print(json.dumps(stats['statistics'], indent=2))
            return stats
        print(f"{_FAIL_CHAR} Failed to get statistics: {response.text}")
        return None
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error getting statistics: {e}")
        return None


def add_sample_data():
    """Create the sample students, courses and grades. Returns what was created."""
    print("Creating students...")
    students = [
        create_student("S001", "Alice Johnson", "alice.johnson@university.edu"),
        create_student("S002", "Bob Smith", "bob.smith@university.edu"),
        create_student("S003", "Carol Davis", "carol.davis@university.edu"),
        create_student("S004", "David Wilson", "david.wilson@university.edu"),
    ]

    print("\nCreating courses...")
    courses = [
        create_course("CS101", "Introduction to Programming", 3),
        create_course("CS201", "Data Structures", 4),
        create_course("MATH101", "Calculus I", 4),
        create_course("ENG101", "English Composition", 3),
    ]

    print("\nRecording grades...")
    grades = [
        record_grade("S001", "CS101", 92.0),
        record_grade("S001", "MATH101", 81.5),
        record_grade("S002", "CS101", 78.0),
        record_grade("S002", "ENG101", 88.0),
        record_grade("S003", "cs201", 67.0),
        record_grade("S003", "MATH101", 55.0),
        record_grade("S004", "ENG101", 95.0),
    ]

    return {
        'students': [s for s in students if s],
        'courses': [c for c in courses if c],
        'grades': [g for g in grades if g],
    }


def main():
    """Main execution."""
    global BASE_URL
    BASE_URL = _detect_base_url()

    print("="*60)
    print("Gradebook Platform - Data Addition Script")
    print("="*60)
    print()

    # Check if server is running
    if not check_server():
        sys.exit(1)

    print("\n" + "="*60)
    print("Adding Sample Data...")
    print("="*60 + "\n")

    add_sample_data()

    # Display results
    list_students()
    list_courses()
    get_statistics()

    print("\n" + "="*60)
    print(f"{_OK_CHAR} Sample data added successfully!")
    print("="*60)
    print("\nYou can now:")
    print(f"  - View API docs: {BASE_URL}/docs")
    print(f"  - List students: curl {BASE_URL}/students")
    print(f"  - Student GPA: curl {BASE_URL}/students/S001/gpa")
    print(f"  - Course average: curl {BASE_URL}/courses/CS101/average")
    print()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n\n{_FAIL_CHAR} Interrupted by user")
        sys.exit(1)
