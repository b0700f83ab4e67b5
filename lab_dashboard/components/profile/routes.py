"""
Profile and Settings Routes
"""
import logging

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for

from lab_dashboard.core.auth import protect_blueprint
from lab_dashboard.core.errors import ValidationError
from lab_dashboard.core.notifications import notify, notify_failure
from .service import NOTIFICATION_TYPES, ProfileService

logger = logging.getLogger(__name__)

profile_bp = Blueprint('profile', __name__)
protect_blueprint(profile_bp)

# Service instance
service = ProfileService()


@profile_bp.route('/profile')
def profile_page():
    days = current_app.config.get('ACTIVITY_CALENDAR_DAYS', 60)
    return render_template(
        'profile/profile.html',
        calendar=service.activity_calendar(days=days),
    )


@profile_bp.route('/settings')
def settings_page():
    return render_template(
        'profile/settings.html',
        active_tab=request.args.get('tab', 'profile'),
        preferences=service.get_notification_preferences(),
        notification_types=NOTIFICATION_TYPES,
    )


@profile_bp.route('/settings/profile', methods=['POST'])
def save_profile():
    try:
        service.update_profile(request.form.to_dict())
        notify('Profile updated', 'Your profile has been updated successfully')
    except ValidationError as e:
        notify_failure(str(e), title='Update failed')
    return redirect(url_for('profile.settings_page', tab='profile'))


@profile_bp.route('/settings/avatar', methods=['POST'])
def upload_avatar():
    upload = request.files.get('avatar')
    if upload is None or not upload.filename:
        notify_failure('Please choose an image to upload.', title='Upload failed')
        return redirect(url_for('profile.settings_page', tab='profile'))
    try:
        service.upload_avatar(upload)
        notify('Profile updated', 'Your avatar has been updated successfully')
    except ValueError as e:
        logger.error(f"Avatar upload failed: {e}")
        notify_failure('Failed to upload avatar. Please try again.', title='Upload failed')
    return redirect(url_for('profile.settings_page', tab='profile'))


@profile_bp.route('/settings/notifications', methods=['POST'])
def save_notifications():
    service.save_notification_preferences(request.form)
    notify('Settings saved', 'Your notification preferences have been updated.')
    return redirect(url_for('profile.settings_page', tab='notifications'))


@profile_bp.route('/settings/password', methods=['POST'])
def change_password():
    try:
        service.change_password(
            request.form.get('current_password', ''),
            request.form.get('new_password', ''),
            request.form.get('confirm_password', ''),
        )
        notify('Password updated', 'Your password has been changed successfully.')
    except ValidationError as e:
        notify_failure(str(e))
    return redirect(url_for('profile.settings_page', tab='security'))


@profile_bp.route('/api/profile', methods=['GET'])
def api_profile():
    return jsonify(service.get_profile())


@profile_bp.route('/api/profile', methods=['PUT', 'PATCH'])
def api_update_profile():
    data = request.get_json(silent=True)
    if not data:
        return jsonify({'error': 'No data received'}), 400
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400
    try:
        return jsonify(service.update_profile(data))
    except ValidationError as e:
        return jsonify({'error': str(e), 'fields': e.fields}), 400


@profile_bp.route('/api/profile/avatar', methods=['POST'])
def api_upload_avatar():
    upload = request.files.get('avatar')
    if upload is None:
        return jsonify({'error': 'No file received'}), 400
    try:
        avatar = service.upload_avatar(upload)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'avatar': avatar})


@profile_bp.route('/api/profile/activity')
def api_activity():
    days = request.args.get('days', current_app.config.get('ACTIVITY_CALENDAR_DAYS', 60), type=int)
    return jsonify(service.activity_calendar(days=days))


def init_profile(app):
    """Initialize profile/settings component with Flask app"""
    app.register_blueprint(profile_bp)
    return profile_bp
