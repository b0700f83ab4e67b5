"""
Local storage, remote store client and the repository that routes between them
"""
import json
import threading

import pytest
import requests

from lab_dashboard.core.activity import ActivityLog
from lab_dashboard.core.errors import RemoteStoreError
from lab_dashboard.core.local_storage import LocalStorage
from lab_dashboard.core.profile import ProfileContext
from lab_dashboard.core.remote_store import RemoteStore
from lab_dashboard.core.repository import EntityRepository


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / 'store')


@pytest.fixture
def remote(fake_remote):
    return RemoteStore('https://example.supabase.co/', 'anon-key', session=fake_remote)


# Local storage

def test_local_storage_round_trip(storage):
    assert storage.get_item('news') is None
    storage.set_item('news', [{'id': 'a', 'title': 'Hello'}])
    assert storage.get_item('news') == [{'id': 'a', 'title': 'Hello'}]
    assert storage.keys() == ['news']

    storage.remove_item('news')
    assert storage.get_item('news') is None


def test_local_storage_rejects_path_like_keys(storage):
    with pytest.raises(ValueError):
        storage.set_item('../escape', {})


def test_corrupt_document_raises(storage):
    (storage.directory / 'news.json').write_text('{not json', encoding='utf-8')
    with pytest.raises(json.JSONDecodeError):
        storage.get_item('news')


# Remote store

def test_select_sends_credentials_and_table_url(remote, fake_remote):
    fake_remote.tables['reports'] = [{'id': 1, 'title': 'Weekly'}]

    assert remote.select('reports') == [{'id': 1, 'title': 'Weekly'}]

    call = fake_remote.calls[-1]
    assert call['method'] == 'GET'
    assert call['url'] == 'https://example.supabase.co/rest/v1/reports'
    assert call['params'] == {'select': '*'}
    assert call['headers']['apikey'] == 'anon-key'
    assert call['headers']['Authorization'] == 'Bearer anon-key'


def test_insert_returns_stored_row(remote, fake_remote):
    row = remote.insert('tools', {'name': 'Tokenizer'})

    assert row['name'] == 'Tokenizer'
    assert 'id' in row
    assert fake_remote.calls[-1]['headers']['Prefer'] == 'return=representation'


def test_update_and_delete_filter_by_id(remote, fake_remote):
    fake_remote.tables['literature'] = [{'id': 7, 'saved': False}]

    assert remote.update('literature', 7, {'saved': True}) == {'id': 7, 'saved': True}
    assert fake_remote.calls[-1]['params'] == {'id': 'eq.7'}
    assert remote.update('literature', 99, {'saved': True}) is None

    remote.delete('literature', 7)
    assert fake_remote.tables['literature'] == []


def test_http_error_carries_status_and_message(remote, fake_remote):
    fake_remote.fail_with = 500

    with pytest.raises(RemoteStoreError) as excinfo:
        remote.select('reports')

    assert excinfo.value.status_code == 500
    assert 'remote failure' in str(excinfo.value)


def test_transport_error_becomes_remote_store_error(remote, fake_remote):
    fake_remote.fail_with = requests.exceptions.ConnectionError('refused')

    with pytest.raises(RemoteStoreError):
        remote.select('reports')


# Repository

def test_local_insert_assigns_id_and_prepends(storage):
    log = ActivityLog()
    repository = EntityRepository(storage, activity_log=log)

    first = repository.insert('news', {'title': 'First'})
    second = repository.insert('news', {'title': 'Second'})

    assert first['id'] and first['created_at']
    assert [n['title'] for n in repository.list('news')] == ['Second', 'First']
    assert second['id'] != first['id']
    assert len(log) == 2


def test_local_update_and_delete(storage):
    repository = EntityRepository(storage)
    record = repository.insert('tools', {'name': 'Parser', 'stars': 0})

    assert repository.update('tools', record['id'], {'stars': 3})['stars'] == 3
    assert repository.update('tools', 'missing', {'stars': 1}) is None

    repository.delete('tools', record['id'])
    assert repository.list('tools') == []
    assert repository.delete_local('tools', 'missing') is False


def test_collections_without_remote_store_are_local(storage, remote):
    local_only = EntityRepository(storage, remote_tables=('reports',))
    assert not local_only.is_remote('reports')

    mixed = EntityRepository(storage, remote_store=remote, remote_tables=('reports',))
    assert mixed.is_remote('reports')
    assert not mixed.is_remote('news')


def test_remote_collection_goes_through_remote_store(storage, remote, fake_remote):
    repository = EntityRepository(storage, remote_store=remote, remote_tables=('reports',))

    stored = repository.insert('reports', {'title': 'Remote report'})

    assert fake_remote.tables['reports'][0]['id'] == stored['id']
    assert storage.get_item('reports') is None


def test_concurrent_local_inserts_are_all_kept(storage):
    repository = EntityRepository(storage)
    errors = []

    def insert_many(worker):
        try:
            for i in range(25):
                repository.insert('news', {'title': f'{worker}-{i}'})
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=insert_many, args=(w,)) for w in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(repository.list('news')) == 200
    assert not list(storage.directory.glob('*.tmp'))


def test_corrupt_local_collection_propagates(storage):
    (storage.directory / 'news.json').write_text('[{', encoding='utf-8')
    repository = EntityRepository(storage)

    with pytest.raises(ValueError):
        repository.list('news')


# Profile context

def test_profile_falls_back_to_defaults_when_stored_copy_is_corrupt(storage):
    (storage.directory / 'userProfile.json').write_text('oops', encoding='utf-8')

    context = ProfileContext(storage, {'name': 'Guest User', 'tags': ['NLP']})

    assert context.get()['name'] == 'Guest User'


def test_profile_updates_persist(storage):
    defaults = {'name': 'Guest User', 'tags': ['NLP']}
    ProfileContext(storage, defaults).update({'name': 'Dr. Rivera'})

    assert ProfileContext(storage, defaults).get()['name'] == 'Dr. Rivera'
    assert defaults['name'] == 'Guest User'


def test_activity_log_filters_and_limits():
    log = ActivityLog(maxlen=3)
    for i in range(4):
        log.add('INFO', f'entry {i}')
    log.add('ERROR', 'broken')

    assert len(log) == 3
    assert [e['message'] for e in log.get_logs(limit=2)] == ['entry 3', 'broken']
    assert [e['message'] for e in log.get_logs(level_filter='ERROR')] == ['broken']
    assert log.get_logs(limit=0) == []
    assert len(log.get_logs(limit=None)) == 3


def test_profile_copies_do_not_share_tags(storage):
    context = ProfileContext(storage, {'name': 'Guest User', 'tags': ['NLP']})

    context.get()['tags'].append('Robotics')
    context.update({'tags': ['Vision']})['tags'].append('Audio')

    assert context.get()['tags'] == ['Vision']
