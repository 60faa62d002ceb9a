from dailytrack.models import UserRole
from tests.conftest import make_user


def test_grant_admin_command(app, user_id):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["grant-admin", "user@example.com"])
    assert "is now an admin" in result.output
    with app.app_context():
        assert UserRole.query.filter_by(user_id=user_id, role="admin").count() == 1

    result = runner.invoke(args=["grant-admin", "user@example.com"])
    assert "already an admin" in result.output


def test_grant_admin_command_unknown_user(app):
    result = app.test_cli_runner().invoke(args=["grant-admin", "ghost@example.com"])
    assert result.exit_code != 0
    assert "must register first" in result.output


def test_seed_reference_is_idempotent(app):
    result = app.test_cli_runner().invoke(args=["seed-reference"])
    assert "Seeded 0 reference rows" in result.output


def test_grant_admin_command_ignores_email_case(app, user_id):
    result = app.test_cli_runner().invoke(args=["grant-admin", " User@Example.com "])
    assert "is now an admin" in result.output
    with app.app_context():
        assert UserRole.query.filter_by(user_id=user_id, role="admin").count() == 1
