import io
from datetime import date

from lab_dashboard.components.profile import ProfileService
from lab_dashboard.components.profile.service import activity_level
from lab_dashboard.core import get_activity_log
from lab_dashboard.dashboard_app import DashboardApp

PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 16


def test_default_profile(client):
    profile = client.get('/api/profile').get_json()
    assert profile['name'] == 'Guest User'
    assert profile['tags'] == ['NLP', 'Computer Vision']
    assert profile['avatar'] == '/static/placeholder.svg'


def test_profile_update_is_shown_everywhere(client):
    client.put('/api/profile', json={'name': 'Dr. Rivera', 'tags': 'Robotics, RL'})

    assert client.get('/api/profile').get_json()['tags'] == ['Robotics', 'RL']
    report = client.post('/api/reports', json={'title': 'R', 'type': 'Individual'}).get_json()
    assert report['author'] == 'Dr. Rivera'
    assert b'Dr. Rivera' in client.get('/dashboard').data


def test_profile_survives_restart(app, client):
    client.put('/api/profile', json={'department': 'Robotics'})

    restarted = DashboardApp().create_app({
        'TESTING': True,
        'RATELIMIT_ENABLED': False,
        'LOCAL_STORAGE_DIR': app.config['LOCAL_STORAGE_DIR'],
        'SUPABASE_URL': '',
        'SUPABASE_KEY': '',
    })
    assert restarted.extensions['lab_dashboard'].profile.get()['department'] == 'Robotics'


def test_empty_name_is_rejected(client):
    response = client.put('/api/profile', json={'name': '  '})
    assert response.status_code == 400
    assert client.get('/api/profile').get_json()['name'] == 'Guest User'


def test_settings_profile_form(client):
    response = client.post('/settings/profile', data={
        'name': 'Sam Park', 'email': 'sam@example.org', 'title': 'PhD Student',
        'department': 'CS', 'bio': 'Hi', 'tags': 'NLP',
    }, follow_redirects=True)

    assert b'Profile updated' in response.data
    assert client.get('/api/profile').get_json()['email'] == 'sam@example.org'


def test_avatar_upload_becomes_data_url(client):
    response = client.post(
        '/api/profile/avatar',
        data={'avatar': (io.BytesIO(PNG_BYTES), 'me.png')},
        content_type='multipart/form-data',
    )

    avatar = response.get_json()['avatar']
    assert avatar.startswith('data:image/png;base64,')
    assert client.get('/api/profile').get_json()['avatar'] == avatar


def test_empty_avatar_upload_fails(client):
    response = client.post(
        '/api/profile/avatar',
        data={'avatar': (io.BytesIO(b''), 'me.png')},
        content_type='multipart/form-data',
    )
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Failed to read file'


def test_notification_preferences(app, client):
    page = client.get('/settings?tab=notifications')
    assert b'name="email_research_updates" checked' in page.data

    client.post('/settings/notifications', data={'push_research_updates': 'on'})

    stored = app.extensions['lab_dashboard'].local_storage.get_item('notificationPreferences')
    assert stored['push']['research_updates'] is True
    assert stored['email']['research_updates'] is False
    assert stored['push']['system_announcements'] is False


def test_password_form_validation(client):
    mismatch = client.post('/settings/password', data={
        'current_password': 'a', 'new_password': 'b', 'confirm_password': 'c',
    }, follow_redirects=True)
    assert b't match.' in mismatch.data

    ok = client.post('/settings/password', data={
        'current_password': 'a', 'new_password': 'b', 'confirm_password': 'b',
    }, follow_redirects=True)
    assert b'Password updated' in ok.data


def test_activity_levels():
    assert [activity_level(n) for n in (0, 1, 2, 3, 4, 6, 7, 20)] == [0, 1, 2, 2, 3, 3, 4, 4]


def test_activity_calendar_counts_todays_changes(app):
    with app.app_context():
        log = get_activity_log()
        for _ in range(4):
            log.add('INFO', 'change')

        calendar = ProfileService().activity_calendar(days=7, today=date.today())

    assert len(calendar) == 8
    assert calendar[-1] == {'date': date.today().isoformat(), 'level': 3}
    assert all(day['level'] == 0 for day in calendar[:-1])


def test_activity_api(client):
    assert len(client.get('/api/profile/activity?days=10').get_json()) == 11


def test_profile_page(client):
    page = client.get('/profile')
    assert page.status_code == 200
    assert b'Guest User' in page.data
    assert page.data.count(b'class="day level-') == 61
