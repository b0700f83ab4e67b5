"""
Authentication gate
Presence of a session user decides between rendering and redirecting
"""
from functools import wraps
from urllib.parse import urlparse

from flask import jsonify, redirect, request, session, url_for

SESSION_USER_KEY = 'user'


def current_user():
    return session.get(SESSION_USER_KEY)


def login_user(email):
    session.permanent = True
    session[SESSION_USER_KEY] = {'email': email}


def logout_user():
    session.pop(SESSION_USER_KEY, None)


def safe_next_url(target, default='/dashboard'):
    """Only allow same-site relative redirect targets"""
    if not target or not target.startswith('/') or target.startswith('//'):
        return default
    # Browsers read '\' as '/' and drop tabs/newlines, either can make '//host'
    if '\\' in target or any(ord(c) < 32 for c in target):
        return default
    parsed = urlparse(target)
    if parsed.scheme or parsed.netloc:
        return default
    return target


def _reject_anonymous():
    if current_user() is not None:
        return None
    if request.path.startswith('/api/'):
        return jsonify({'error': 'Authentication required'}), 401
    return redirect(url_for('main.login', next=request.full_path.rstrip('?')))


def login_required(view):
    """Redirect anonymous visitors to the login page (401 for JSON APIs)"""
    @wraps(view)
    def wrapped(*args, **kwargs):
        rejection = _reject_anonymous()
        if rejection is not None:
            return rejection
        return view(*args, **kwargs)
    return wrapped


def protect_blueprint(blueprint):
    """Gate every route of a blueprint behind the login check"""
    blueprint.before_request(_reject_anonymous)
    return blueprint
