import logging
from typing import TYPE_CHECKING, Any, Optional

from flask import current_app

from commentboard.core.util import fqcn

if TYPE_CHECKING:
    from commentboard.app import Application


class ServiceNotRegistered(Exception):
    pass


class ServiceState:
    """What a service holds for one application, in ``app.extensions``.

    Subclasses set up and release their data in :meth:`start` and
    :meth:`stop`.
    """

    running = False

    def __init__(self, service: "Service") -> None:
        self.service = service

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False


class Service:
    """A single instance shared by every application; the per-application
    state is a :attr:`AppStateClass` created by :meth:`init_app`.
    """

    AppStateClass = ServiceState

    #: key in Application.extensions and Application.services
    name = ""

    def __init__(self, app: Optional[Any] = None) -> None:
        if not self.name:
            raise ValueError(f"{fqcn(self.__class__)} has no name")

        self.logger = logging.getLogger(fqcn(self.__class__))
        if app:
            self.init_app(app)

    def init_app(self, app: "Application") -> None:
        app.extensions[self.name] = self.AppStateClass(self)
        app.services[self.name] = self

    def start(self) -> None:
        state = self.app_state
        if state.running:
            raise RuntimeError(f"service {self.name!r} is already running")
        state.start()
        self.logger.debug("Service %r started", self.name)

    def stop(self) -> None:
        state = self.app_state
        if not state.running:
            raise RuntimeError(f"service {self.name!r} is not running")
        state.stop()
        self.logger.debug("Service %r stopped", self.name)

    @property
    def app_state(self) -> Any:
        """State for the current application.

        :raise ServiceNotRegistered: the application never called
            :meth:`init_app`.
        """
        try:
            return current_app.extensions[self.name]
        except KeyError:
            raise ServiceNotRegistered(self.name)

    @property
    def running(self) -> bool:
        """`False` outside an application context, too."""
        try:
            return self.app_state.running
        except (RuntimeError, ServiceNotRegistered):
            return False
