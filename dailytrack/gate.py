"""Session/access gate.

A `SessionContext` is built once per request and handed to the screens via
`flask.g`. Screens never look at roles directly.
"""
from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask import flash, g, redirect, url_for
from flask_login import current_user, login_required

from .errors import AuthorizationError
from .store import get_store


@dataclass(frozen=True)
class SessionContext:
    user: Optional[object] = None
    is_admin: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self):
        return self.user.id if self.user is not None else None


ANONYMOUS = SessionContext()


def build_session_context() -> SessionContext:
    if not current_user.is_authenticated:
        return ANONYMOUS
    return SessionContext(user=current_user._get_current_object(),
                          is_admin=get_store().has_role(current_user.id, "admin"))


def current_session() -> SessionContext:
    ctx = g.get("session_ctx")
    if ctx is None:
        ctx = g.session_ctx = build_session_context()
    return ctx


def admin_required(view):
    """Only admins get through; everybody else is sent home."""
    @wraps(view)
    @login_required
    def wrapped(*args, **kwargs):
        if not current_session().is_admin:
            raise AuthorizationError("You do not have admin privileges.")
        return view(*args, **kwargs)
    return wrapped


def init_gate(app):
    @app.before_request
    def load_session_context():
        g.session_ctx = build_session_context()

    @app.context_processor
    def inject_session_context():
        return {"session_ctx": current_session()}

    @app.errorhandler(AuthorizationError)
    def handle_authorization_error(error):
        flash(f"Access Denied: {error.message}", "danger")
        return redirect(url_for("dashboard.index"))
