def test_overview_counts_each_collection(client):
    client.post('/api/reports', json={'title': 'A', 'type': 'Individual'})
    client.post('/api/reports', json={'title': 'B', 'type': 'Individual'})
    client.post('/api/news', json={'title': 'N', 'content': 'c', 'type': 'event'})

    overview = client.get('/api/overview').get_json()

    assert overview['collections']['reports']['count'] == 2
    assert overview['collections']['reports']['backing'] == 'local'
    assert overview['collections']['news']['count'] == 1
    assert overview['total_items'] == 3
    assert overview['unavailable_collections'] == 0
    assert [n['title'] for n in overview['recent_news']] == ['N']
    assert overview['activity_count'] == 3


def test_overview_marks_unreachable_collections(remote_client, unreachable):
    overview = remote_client.get('/api/overview').get_json()
    collections = overview['collections']

    for name in ('reports', 'literature', 'research_outputs', 'tools'):
        assert collections[name]['status'] == 'unavailable'
        assert collections[name]['backing'] == 'remote'
    assert collections['news']['status'] == 'ok'
    assert collections['guidelines']['status'] == 'ok'
    assert overview['unavailable_collections'] == 4


def test_dashboard_page(client):
    client.post('/api/news', json={'title': 'Lab retreat', 'content': 'c', 'type': 'event'})

    page = client.get('/dashboard')

    assert page.status_code == 200
    assert b'Lab retreat' in page.data
    assert b'Report Hub' in page.data


def test_logs_record_changes(client):
    client.post('/api/tools', json={'name': 'T', 'type': 'model', 'description': 'd'})

    logs = client.get('/api/logs').get_json()

    assert logs[-1]['collection'] == 'tools'
    assert logs[-1]['message'].startswith('Added tools item')
    assert client.get('/api/logs?level=ERROR').get_json() == []


def test_failed_calls_are_logged_as_errors(remote_client, unreachable):
    assert remote_client.get('/api/reports').status_code == 502
    remote_client.get('/literature')
    assert remote_client.delete('/api/tools/1').status_code == 502

    errors = remote_client.get('/api/logs?level=ERROR').get_json()

    assert [e['collection'] for e in errors] == ['reports', 'literature', 'tools']
    assert errors[-1]['record_id'] == '1'
    assert remote_client.get('/api/logs?limit=0').get_json() == []
