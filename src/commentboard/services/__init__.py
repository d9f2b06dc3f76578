"""Modules that provide services.

They are implemented as Flask extensions (see:
https://flask.palletsprojects.com/extensiondev/ )
"""
from flask import current_app

# This one must be imported first
from .base import Service, ServiceNotRegistered, ServiceState

from .comments import CommentStoreService

__all__ = [
    "Service",
    "ServiceState",
    "ServiceNotRegistered",
    "comments_service",
    "get_service",
]

comments_service = CommentStoreService()


def get_service(service: str) -> Service:
    return current_app.services[service]
