"""
News Routes
"""
from flask import Blueprint, jsonify, redirect, render_template, request, url_for

from lab_dashboard.components.route_helpers import api_create, api_fetch, api_toggle, submit_form
from lab_dashboard.core.auth import protect_blueprint, safe_next_url
from lab_dashboard.core.notifications import notify_failure
from .service import NEWS_TABS, NEWS_TYPES, NewsService

news_bp = Blueprint('news', __name__)
protect_blueprint(news_bp)

# Service instance
service = NewsService()


@news_bp.route('/news')
def list_page():
    term = request.args.get('q', '')
    news_type = request.args.get('type', '')
    tab = request.args.get('tab', 'all')
    if tab not in NEWS_TABS:
        tab = 'all'

    news = service.list_all()

    return render_template(
        'news/list.html',
        news_items=service.filter(news, term, news_type, tab),
        news_types=NEWS_TYPES,
        tabs=NEWS_TABS,
        active_tab=tab,
        search_query=term,
        selected_type=news_type,
    )


@news_bp.route('/add-news', methods=['GET', 'POST'])
def add_page():
    if request.method == 'POST':
        return submit_form(
            service,
            success_message='News item added successfully',
            failure_message='An error occurred. Please try again.',
            list_endpoint='news.list_page',
            template='news/add.html',
            news_types=NEWS_TYPES,
        )
    return render_template('news/add.html', form={}, news_types=NEWS_TYPES)


@news_bp.route('/news/<record_id>/toggle-saved', methods=['POST'])
def toggle_saved(record_id):
    if service.toggle_flag(record_id, 'saved') is None:
        notify_failure('News item not found')
    return redirect(safe_next_url(request.form.get('next'), url_for('news.list_page')))


@news_bp.route('/news/<record_id>/read', methods=['POST'])
def mark_read(record_id):
    if service.mark_read(record_id) is None:
        notify_failure('News item not found')
    return redirect(safe_next_url(request.form.get('next'), url_for('news.list_page')))


@news_bp.route('/api/news', methods=['GET'])
def api_news():
    term = request.args.get('q', '')
    news_type = request.args.get('type', '')
    tab = request.args.get('tab', 'all')
    return api_fetch(service, lambda records: service.filter(records, term, news_type, tab))


@news_bp.route('/api/news', methods=['POST'])
def api_add_news():
    return api_create(service)


@news_bp.route('/api/news/<record_id>/saved', methods=['POST'])
def api_toggle_saved(record_id):
    return api_toggle(service, record_id, 'saved')


@news_bp.route('/api/news/<record_id>/read', methods=['POST'])
def api_mark_read(record_id):
    record = service.mark_read(record_id)
    if record is None:
        return jsonify({'error': 'News item not found'}), 404
    return jsonify(record)


def init_news(app):
    """Initialize News component with Flask app"""
    app.register_blueprint(news_bp)
    app.add_template_filter(NewsService.initials, 'initials')
    return news_bp
