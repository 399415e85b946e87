import pytest
from app import create_app
from app.errors import StorageIOError
from app.store import Datastore, Storage


class MockStore(Datastore):
    """In-memory store that counts calls"""

    def __init__(self, messages=None):
        self.messages = ['motd'] if messages is None else list(messages)
        self.read_count = 0
        self.add_count = 0

    def init_data(self, path=None):
        pass

    def read(self):
        self.read_count += 1
        return list(self.messages)

    def add(self, message):
        self.add_count += 1
        self.messages.append(message)


class FailStore(Datastore):
    """Every operation fails, unless read_empty is set"""

    def __init__(self, read_empty=False):
        self.read_empty = read_empty
        self.read_count = 0
        self.add_count = 0

    def init_data(self, path=None):
        raise StorageIOError('something is wrong')

    def read(self):
        self.read_count += 1
        if self.read_empty:
            return []
        raise StorageIOError('something is wrong')

    def add(self, message):
        self.add_count += 1
        raise StorageIOError('something is wrong')


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / 'motd_test_storage.json'


@pytest.fixture
def storage(storage_path):
    return Storage(storage_path)


@pytest.fixture
def mock_store():
    return MockStore()


@pytest.fixture
def fail_store():
    return FailStore()


@pytest.fixture
def make_client():
    def _make(store):
        app = create_app({'TESTING': True}, store=store)
        return app.test_client()
    return _make
