"""Logging setup and HTTP error pages for the application class."""
import logging
import logging.config
from functools import partial
from pathlib import Path

import yaml
from flask import Flask, render_template

logger = logging.getLogger(__name__)

DEFAULT_LOGGING_FILE = Path(__file__).parent.parent / "core" / "default_logging.yml"


class ErrorManagerMixin(Flask):
    def setup_logging(self) -> None:
        # Force flask to create application logger before logging
        # configuration; else, flask will overwrite our settings
        self.logger  # noqa

        log_level = self.config.get("LOG_LEVEL")
        if log_level:
            self.logger.setLevel(log_level)

        logging_file = self.config.get("LOGGING_CONFIG_FILE")
        if logging_file:
            logging_file = (Path(self.instance_path) / logging_file).resolve()
        else:
            logging_file = DEFAULT_LOGGING_FILE

        if logging_file.suffix == ".ini":
            # old standard 'ini' file config
            logging.config.fileConfig(str(logging_file), disable_existing_loggers=False)
        elif logging_file.suffix in (".yml", ".yaml"):
            # yaml config file
            with logging_file.open() as fd:
                logging_cfg = yaml.safe_load(fd)
            logging_cfg.setdefault("version", 1)
            logging_cfg.setdefault("disable_existing_loggers", False)
            logging.config.dictConfig(logging_cfg)
        else:
            logger.warning("Unsupported logging config file: %s", logging_file)

    def install_default_handlers(self) -> None:
        for http_error_code in (400, 404, 500):
            self.install_default_handler(http_error_code)

    def install_default_handler(self, http_error_code: int) -> None:
        """Install a default error handler for `http_error_code`.

        The default error handler renders a template named error404.html
        for http_error_code 404.
        """
        logger.debug(
            "Set Default HTTP error handler for status code %d", http_error_code
        )
        handler = partial(self.handle_http_error, http_error_code)
        self.errorhandler(http_error_code)(handler)

    def handle_http_error(self, code, error):
        """Helper that renders `error{code}.html`.

        Convenient way to use it::

           from functools import partial
           handler = partial(app.handle_http_error, code)
           app.errorhandler(code)(handler)
        """
        template = f"error{code:d}.html"
        return render_template(template, error=error), code
