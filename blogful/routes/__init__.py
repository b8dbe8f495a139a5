"""API route blueprints."""

from blogful.routes.articles import articles_bp
from blogful.routes.health import health_bp
from blogful.routes.users import users_bp


__all__ = ["health_bp", "articles_bp", "users_bp"]
