"""
Main entry point for the Gradebook platform.
"""

import json
import threading
import time
from typing import Any, Dict, Optional

from .core.entities import Student, Course
from .core.exceptions import ConfigurationError
from .services import RecordStore
from .api.rest_api import GradebookRestAPI


DEFAULT_CONFIG: Dict[str, Any] = {
    'rest_host': '0.0.0.0',
    'rest_port': 8000,
    'log_level': 'info',
    'sample_data': False,
}


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Merge defaults, an optional JSON config file and explicit overrides."""
    config = dict(DEFAULT_CONFIG)
    if path:
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}")
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        config.update(file_config)
    if overrides:
        config.update({key: value for key, value in overrides.items() if value is not None})
    return config


class GradebookPlatform:
    """Main platform class that wires the record store to the REST API."""

    def __init__(self, config: Optional[dict] = None):
        self._config = dict(DEFAULT_CONFIG)
        self._config.update(config or {})
        self._record_store = None
        self._rest_api = None
        self._rest_thread = None
        self._running = False

        self._validate_config()

        # Initialize platform
        self._initialize_platform()

    @property
    def record_store(self) -> RecordStore:
        return self._record_store

    @property
    def rest_api(self) -> GradebookRestAPI:
        return self._rest_api

    @property
    def config(self) -> Dict[str, Any]:
        return dict(self._config)

    def _validate_config(self):
        port = self._config.get('rest_port')
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            raise ConfigurationError(f"Invalid REST port: {port!r}", error_code="invalid_port")

    def _initialize_platform(self):
        """Initialize the platform with all services."""
        print("Initializing Gradebook platform...")

        self._record_store = RecordStore()
        print("✓ Record store initialized")

        self._rest_api = GradebookRestAPI(self._record_store)
        print("✓ REST API initialized")

        if self._config.get('sample_data'):
            self.create_sample_data()

        print("✓ Gradebook platform initialized successfully!")

    def start_rest_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """Start the REST server."""
        if self._rest_thread is not None:
            print("REST server already running")
            return

        import uvicorn

        host = host or self._config['rest_host']
        port = port or self._config['rest_port']

        def run_server():
            uvicorn.run(
                self._rest_api.app,
                host=host,
                port=port,
                log_level=self._config.get('log_level', 'info')
            )

        # Start server in a separate thread
        self._rest_thread = threading.Thread(target=run_server, daemon=True)
        self._rest_thread.start()
        self._running = True

        print(f"✓ REST server started on {host}:{port}")
        print(f"  - API Docs: http://localhost:{port}/docs")

    def stop_platform(self):
        """Stop the platform."""
        if not self._running:
            print("Platform not running")
            return

        print("Stopping Gradebook platform...")
        # uvicorn runs on a daemon thread and exits with the process
        self._rest_thread = None
        self._running = False
        print("✓ Gradebook platform stopped")

    def create_sample_data(self):
        """Create sample data for demonstration."""
        print("Creating sample data...")

        students = [
            Student("S001", "Alice Johnson", "alice@university.edu"),
            Student("S002", "Bob Smith", "bob@university.edu"),
            Student("S003", "Carol Davis", "carol@university.edu"),
        ]
        for student in students:
            self._record_store.add_student(student)

        courses = [
            Course("CS101", "Introduction to Computer Science", 3),
            Course("MATH101", "Calculus I", 4),
            Course("ENG101", "English Composition", 3),
        ]
        for course in courses:
            self._record_store.add_course(course)

        grades = [
            ("S001", "CS101", 95.0),
            ("S001", "MATH101", 75.0),
            ("S001", "ENG101", 85.0),
            ("S002", "CS101", 82.5),
            ("S002", "MATH101", 91.0),
            ("S003", "CS101", 58.0),
        ]
        for student_id, course_code, value in grades:
            self._record_store.record_grade(student_id, course_code, value)

        print("✓ Sample data created")

    def run_demo(self):
        """Run a demonstration of the platform."""
        print("Running Gradebook platform demonstration...")

        if not self._record_store.get_all_students():
            self.create_sample_data()

        print("\n=== Student GPAs ===")
        for student in self._record_store.get_all_students():
            gpa = self._record_store.calculate_gpa(student.student_id)
            print(f"  {student.student_id:6} | {student.name:20} | GPA {gpa:.2f}")
            for grade in self._record_store.get_grades_for_student(student.student_id):
                print(f"      {grade.course.course_code:8} {grade.grade_value:6.1f}  {grade.letter_grade}")

        print("\n=== Course Averages ===")
        for course in self._record_store.get_all_courses():
            average = self._record_store.calculate_course_average(course.course_code)
            print(f"  {course.course_code:8} | {course.course_name:35} | avg {average:.2f}")

        print("\n=== Platform Statistics ===")
        print(f"Record Store: {self._record_store.get_statistics()}")

        print("\n✓ Demo completed")


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Gradebook Academic Records Manager")
    parser.add_argument("--rest-host", type=str, help="REST server host")
    parser.add_argument("--rest-port", type=int, help="REST server port")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")
    parser.add_argument("--config", type=str, help="Configuration file path")

    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.config, {'rest_host': args.rest_host, 'rest_port': args.rest_port})

    # Create and start platform
    platform = GradebookPlatform(config)

    try:
        if args.demo:
            platform.run_demo()
        else:
            platform.start_rest_server()

            # Keep running
            print("\nPlatform is running. Press Ctrl+C to stop.")
            while True:
                time.sleep(1)

    except KeyboardInterrupt:
        print("\nShutting down...")
        platform.stop_platform()


if __name__ == "__main__":
    main()
