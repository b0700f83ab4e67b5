"""
Main page routes for dashboard
Landing page, login/logout and the not-found page
"""
import logging

from flask import Blueprint, redirect, render_template, request, url_for

from lab_dashboard.core.auth import current_user, login_user, logout_user, safe_next_url
from lab_dashboard.core.notifications import notify, notify_failure

logger = logging.getLogger(__name__)

# Create main blueprint
main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Public landing page"""
    return render_template('index.html')


@main_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Simulated sign-in: any non-empty email and password opens a session"""
    next_url = safe_next_url(request.values.get('next'))

    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        if not email or not password:
            notify_failure('Please enter your email and password.', title='Sign in failed')
            return render_template('login.html', email=email, next_url=next_url), 400

        login_user(email)
        logger.info(f"User {email} signed in")
        notify('Welcome back!', 'You have successfully logged in.')
        return redirect(next_url)

    if current_user() is not None:
        return redirect(next_url)
    return render_template('login.html', email='', next_url=next_url)


@main_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    logout_user()
    return redirect(url_for('main.login'))


def page_not_found(error):
    """Catch-all not-found page"""
    if request.path.startswith('/api/'):
        return {'error': 'Not found'}, 404
    return render_template('not_found.html', path=request.path), 404
