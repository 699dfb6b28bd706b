import pytest
from fastapi.testclient import TestClient

from gradebook.core.entities import Student, Course
from gradebook.services import RecordStore
from gradebook.api import GradebookRestAPI


# Common test fixtures
@pytest.fixture
def student1():
    return Student("S001", "John Doe", "john.doe@example.com")


@pytest.fixture
def student2():
    return Student("S002", "Jane Smith", "jane.smith@example.com")


@pytest.fixture
def cs101():
    """3 credits."""
    return Course("CS101", "Introduction to Computer Science", 3)


@pytest.fixture
def math101():
    """4 credits."""
    return Course("MATH101", "Calculus I", 4)


@pytest.fixture
def eng101():
    """3 credits."""
    return Course("ENG101", "English Composition", 3)


@pytest.fixture
def store():
    """A fresh, empty record store."""
    return RecordStore()


@pytest.fixture
def populated_store(store, student1, student2, cs101, math101):
    """Two students and two courses, no grades."""
    store.add_student(student1)
    store.add_student(student2)
    store.add_course(cs101)
    store.add_course(math101)
    return store


@pytest.fixture
def client(store):
    """REST client backed by the ``store`` fixture."""
    api = GradebookRestAPI(store)
    with TestClient(api.app) as test_client:
        yield test_client
