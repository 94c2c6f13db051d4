"""WSGI entry point for gunicorn.

Usage:
    gunicorn sms_notifier.wsgi:app --bind 0.0.0.0:8000
"""
from sms_notifier.app import create_app
from sms_notifier.providers import create_default_provider

app = create_app(create_default_provider())
