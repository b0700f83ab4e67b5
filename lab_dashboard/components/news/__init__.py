"""
News Component
"""
from .routes import news_bp, init_news
from .service import NewsService

__all__ = ['news_bp', 'init_news', 'NewsService']
