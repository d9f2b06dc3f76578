"""Flask application class and factory."""
import importlib
import logging
import os
import secrets
from itertools import chain
from typing import Any, Dict, Optional

from flask import Flask
from flask.config import Config

from commentboard.config import default_config
from commentboard.core import extensions
from commentboard.services import Service, comments_service
from commentboard.web.errors import ErrorManagerMixin
from commentboard.web.security import init_security_headers

logger = logging.getLogger(__name__)

__all__ = ["create_app", "Application", "ServiceManager"]


class ServiceManager:
    """Mixin that provides lifecycle (register/start/stop) support for
    services."""

    services: Dict[str, Service]

    def __init__(self) -> None:
        self.services = {}

    def start_services(self) -> None:
        for svc in self.services.values():
            svc.start()

    def stop_services(self) -> None:
        for svc in self.services.values():
            if svc.running:
                svc.stop()


class PluginManager:
    """Mixin that provides support for loading plugins."""

    config: Config

    #: Custom apps may want to always load some plugins: list them here.
    APP_PLUGINS = ("commentboard.web.comments",)

    def register_plugin(self, name: str) -> None:
        """Load and register a plugin given its package name."""
        logger.info("Registering plugin: " + name)
        module = importlib.import_module(name)
        module.register_plugin(self)  # type: ignore

    def register_plugins(self) -> None:
        """Load plugins listed in config variable 'PLUGINS'."""
        registered = set()
        for plugin_fqdn in chain(self.APP_PLUGINS, self.config["PLUGINS"]):
            if plugin_fqdn not in registered:
                self.register_plugin(plugin_fqdn)
                registered.add(plugin_fqdn)


class Application(ServiceManager, PluginManager, ErrorManagerMixin, Flask):
    """Base application class.

    Extend it in your own app.
    """

    default_config = default_config

    def __init__(self, name: Optional[Any] = None, *args: Any, **kwargs: Any) -> None:
        name = name or __name__
        kwargs.setdefault("template_folder", "web/templates")

        Flask.__init__(self, name, *args, **kwargs)

        ServiceManager.__init__(self)
        PluginManager.__init__(self)

    def setup(self, config: Optional[type]) -> None:
        self.configure(config)
        self.setup_logging()
        self.install_default_handlers()

        with self.app_context():
            self.init_extensions()
            self.register_plugins()

        # Must come after blueprints registration: some endpoints may be
        # exempted from Content-Security-Policy.
        init_security_headers(self)

        # The comment log lives from now on until stop_services() is called
        # or the process ends.
        with self.app_context():
            self.start_services()

    def configure(self, config: Optional[type]) -> None:
        if config:
            self.config.from_object(config)

        port = os.environ.get("PORT")
        if port:
            try:
                self.config["PORT"] = int(port)
            except ValueError:
                logger.warning(
                    "Ignoring PORT environment variable, not a number: %r", port
                )

        if (
            not (self.debug or self.testing)
            and self.config["SECRET_KEY"] == "CHANGEME"
        ):
            logger.warning(
                "Default secret config ('SECRET_KEY') is in use: replaced by a"
                " random key, sessions won't survive a restart"
            )
            self.config["SECRET_KEY"] = secrets.token_hex(32)

    def init_extensions(self) -> None:
        """Initialize flask extensions, helpers and services."""
        # CSRF by default
        if self.config.get("WTF_CSRF_ENABLED"):
            extensions.csrf.init_app(self)
            self.extensions["csrf"] = extensions.csrf

        comments_service.init_app(self)


def create_app(
    config: Optional[type] = None, app_class: type = Application, **kw: Any
) -> Application:
    app = app_class(**kw)
    app.setup(config=config)
    return app
