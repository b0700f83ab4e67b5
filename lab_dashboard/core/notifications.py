"""
Transient user-facing notifications (toasts)
Backed by Flask's message flashing
"""
from flask import flash, get_flashed_messages


def notify(title, description='', variant='default'):
    """Queue a notification for the next rendered page

    variant is 'default' or 'destructive'
    """
    flash({'title': title, 'description': description}, variant)


def notify_success(description, title='Success'):
    notify(title, description)


def notify_failure(description, title='Error'):
    notify(title, description, variant='destructive')


def pop_notifications():
    """Pending notifications as dicts with title, description and variant"""
    messages = []
    for variant, message in get_flashed_messages(with_categories=True):
        if isinstance(message, dict):
            messages.append({'variant': variant, **message})
        else:
            messages.append({'variant': variant, 'title': str(message), 'description': ''})
    return messages
