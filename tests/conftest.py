import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.database import create_db_engine
from webapp.app import create_app
from webapp.services.user_store import JsonFileUserStore, SqlUserStore

TEST_ROUNDS = 4


@pytest.fixture
def users_file(tmp_path):
    return tmp_path / "users.json"


@pytest.fixture
def app(tmp_path, users_file):
    """A Flask app backed by a JSON file in a temporary directory."""
    public_dir = tmp_path / "public"
    public_dir.mkdir()
    (public_dir / "index.html").write_text("<h1>Sign up</h1>")

    app = create_app({
        'TESTING': True,
        'USER_STORE': 'json',
        'USERS_FILE': str(users_file),
        'PUBLIC_DIR': str(public_dir),
        'BCRYPT_ROUNDS': TEST_ROUNDS,
    })
    yield app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def store(app):
    return app.extensions['user_store']


@pytest.fixture
def json_store(users_file):
    return JsonFileUserStore(users_file)


@pytest.fixture
def sql_store(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'users.db'}")
    yield SqlUserStore(engine)
    engine.dispose()


@pytest.fixture(params=['json', 'sql'])
def any_store(request, json_store, sql_store):
    """Each backend in turn, for contract tests."""
    return json_store if request.param == 'json' else sql_store
