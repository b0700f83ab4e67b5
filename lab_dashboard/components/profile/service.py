"""
Profile and Settings Service
"""
from collections import Counter
from datetime import date, datetime, timedelta

from flask import current_app

from lab_dashboard.core import get_activity_log, get_local_storage, get_profile_context
from lab_dashboard.core.errors import ValidationError
from lab_dashboard.core.filtering import split_csv

PROFILE_FIELDS = ('name', 'email', 'title', 'department', 'bio')
NOTIFICATION_CHANNELS = ('email', 'push')
NOTIFICATION_TYPES = ('research_updates', 'system_announcements', 'new_publications')


def activity_level(count):
    """Map a day's activity count onto the 0-4 calendar scale"""
    if count <= 0:
        return 0
    if count == 1:
        return 1
    if count <= 3:
        return 2
    if count <= 6:
        return 3
    return 4


class ProfileService:
    """User profile, avatar, notification preferences and password form"""

    def get_profile(self):
        return get_profile_context().get()

    def update_profile(self, data):
        """Apply the submitted profile fields; tags may be comma-separated"""
        changes = {field: data[field].strip() if isinstance(data[field], str) else data[field]
                   for field in PROFILE_FIELDS if field in data}
        if 'tags' in data:
            changes['tags'] = split_csv(data['tags'])
        if 'name' in changes and not changes['name']:
            raise ValidationError('Name cannot be empty', fields=['name'])
        return get_profile_context().update(changes)

    def upload_avatar(self, file_storage):
        return get_profile_context().upload_avatar(file_storage)

    # Notification preferences

    def _preferences_key(self):
        return current_app.config['NOTIFICATION_PREFERENCES_KEY']

    def get_notification_preferences(self):
        preferences = current_app.config['DEFAULT_NOTIFICATION_PREFERENCES']
        merged = {channel: dict(preferences[channel]) for channel in NOTIFICATION_CHANNELS}
        stored = get_local_storage().get_item(self._preferences_key()) or {}
        for channel in NOTIFICATION_CHANNELS:
            merged[channel].update(stored.get(channel, {}))
        return merged

    def save_notification_preferences(self, form):
        """Checkbox form fields are named <channel>_<type>"""
        preferences = {
            channel: {kind: f'{channel}_{kind}' in form for kind in NOTIFICATION_TYPES}
            for channel in NOTIFICATION_CHANNELS
        }
        get_local_storage().set_item(self._preferences_key(), preferences)
        return preferences

    # Security

    def change_password(self, current_password, new_password, confirm_password):
        if not current_password or not new_password or not confirm_password:
            raise ValidationError('Please fill out all password fields.')
        if new_password != confirm_password:
            raise ValidationError("New passwords don't match.", fields=['confirm_password'])
        # No credential backend; the form is validated only
        return True

    # Activity

    def activity_calendar(self, days=60, today=None):
        """One entry per day for the last `days` days (inclusive of today)"""
        today = today or date.today()
        counts = Counter()
        for entry in get_activity_log().get_logs(limit=None):
            try:
                day = datetime.fromisoformat(entry['timestamp']).date()
            except (KeyError, ValueError):
                continue
            counts[day] += 1

        calendar = []
        for offset in range(days, -1, -1):
            day = today - timedelta(days=offset)
            calendar.append({'date': day.isoformat(), 'level': activity_level(counts[day])})
        return calendar
