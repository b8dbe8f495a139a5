"""WSGI entry point: ``gunicorn blogful.wsgi:app``."""

from blogful import create_app


app = create_app()
