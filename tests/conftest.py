import pytest

from dailytrack import create_app
from dailytrack.config import TestConfig
from dailytrack.extensions import db
from dailytrack.models import User, UserRole

PASSWORD = "secret-pass"


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(app, email, name="Tester", admin=False):
    with app.app_context():
        user = User(name=name, email=email)
        user.set_password(PASSWORD)
        db.session.add(user)
        db.session.commit()
        db.session.add(UserRole(user_id=user.id, role="user"))
        if admin:
            db.session.add(UserRole(user_id=user.id, role="admin"))
        db.session.commit()
        return user.id


def login(client, email):
    return client.post("/auth/login", data={"email": email, "password": PASSWORD})


@pytest.fixture
def user_id(app):
    return make_user(app, "user@example.com")


@pytest.fixture
def auth_client(client, user_id):
    login(client, "user@example.com")
    return client


@pytest.fixture
def admin_id(app):
    return make_user(app, "admin@example.com", name="Admin", admin=True)


@pytest.fixture
def admin_client(app, admin_id):
    client = app.test_client()
    login(client, "admin@example.com")
    return client
