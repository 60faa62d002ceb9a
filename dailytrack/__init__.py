import logging

import click
from flask import Flask, redirect, render_template, url_for
from sqlalchemy.exc import SQLAlchemyError

from .extensions import db, migrate, login_manager
from .config import Config
from .gate import init_gate
from .store import init_store

from .blueprints.auth.routes import auth_bp
from .blueprints.dashboard.routes import dashboard_bp
from .blueprints.expenses.routes import expenses_bp
from .blueprints.protein.routes import protein_bp
from .blueprints.water.routes import water_bp
from .blueprints.notes.routes import notes_bp
from .blueprints.analysis.routes import analysis_bp
from .blueprints.admin.routes import admin_bp


def seed_reference_data():
    """Insert default categories and protein foods that are not there yet."""
    from . import reference
    from .models import ExpenseCategory, ProteinFood

    created = 0
    existing = {c.name.lower() for c in ExpenseCategory.query.all()}
    for row in reference.default_categories():
        if row["name"].lower() not in existing:
            db.session.add(ExpenseCategory(**row))
            created += 1
    existing = {f.name.lower() for f in ProteinFood.query.all()}
    for row in reference.default_protein_foods():
        if row["name"].lower() not in existing:
            db.session.add(ProteinFood(**row))
            created += 1
    if created:
        db.session.commit()
    return created


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(level)
    for handler in app.logger.handlers:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))


def register_commands(app):
    @app.cli.command("seed-reference")
    def seed_reference_command():
        """Seed default expense categories and protein foods."""
        created = seed_reference_data()
        click.echo(f"Seeded {created} reference rows")

    @app.cli.command("grant-admin")
    @click.argument("email")
    def grant_admin_command(email):
        """Give the admin role to an existing user."""
        from .models import User, UserRole

        email = email.strip().lower()
        user = User.query.filter_by(email=email).first()
        if not user:
            raise click.ClickException(f"No user with email {email}; they must register first")
        if UserRole.query.filter_by(user_id=user.id, role="admin").first():
            click.echo(f"{email} is already an admin")
            return
        db.session.add(UserRole(user_id=user.id, role="admin"))
        db.session.commit()
        app.logger.info("Granted admin to user %s via CLI", user.id)
        click.echo(f"{email} is now an admin")


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    init_store(app)
    init_gate(app)

    # Ensure tables exist for a smooth first run
    with app.app_context():
        db.create_all()
        try:
            seed_reference_data()
        except SQLAlchemyError:
            # Do not block app startup if seeding fails
            db.session.rollback()
            app.logger.exception("Seeding reference data failed")

    # Register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(expenses_bp)
    app.register_blueprint(protein_bp)
    app.register_blueprint(water_bp)
    app.register_blueprint(notes_bp)
    app.register_blueprint(analysis_bp)
    app.register_blueprint(admin_bp)
    register_commands(app)

    @app.route("/")
    def root():
        return redirect(url_for("dashboard.index"))

    @app.errorhandler(404)
    def not_found(error):
        return render_template("not_found.html"), 404

    return app
