"""Functions that handle parsing pyakismet configuration files.

The configuration file is an INI file with an ``[akismet]`` section
describing the blog and the API endpoint, and a ``[logging]`` section::

    [akismet]
    blog = http://blog.example.com/
    key = AABBCCDDEEFF
    server = rest.akismet.com
    version = 1.1
    port = 80
    timeout = 10

    [logging]
    file = akismet.log
    debug = False
"""

import os
import logging
import configparser

try:
    from raven.handlers.logging import SentryHandler
    _has_raven = True
except ImportError:
    _has_raven = False

import pyakismet
import pyakismet.client
import pyakismet.transport

DEFAULTS = {
    "akismet": {
        "blog": "",
        "key": "",
        "server": pyakismet.api_server,
        "version": pyakismet.api_version,
        "port": str(pyakismet.api_port),
        "timeout": "",
    },
    "logging": {
        "file": "",
        "debug": "False",
        "sentry": "",
        "sentry_level": "WARNING",
    },
}


def load_config(filepath=None):
    """Load the configuration, using the defaults for any option that is
    not present in the file. A missing file is not an error.
    """
    log = logging.getLogger("pyakismet")
    conf = configparser.ConfigParser(interpolation=None)
    for section, values in DEFAULTS.items():
        conf.add_section(section)
        for option, value in values.items():
            conf.set(section, option, value)
    if filepath:
        if os.path.exists(filepath):
            conf.read(filepath)
        else:
            log.info("Configuration file %s does not exist, using the "
                     "defaults.", filepath)
    return conf


def client_options(conf):
    """Return the keyword arguments for `pyakismet.client.Client` from the
    akismet section of the configuration.
    """
    blog_uri = conf.get("akismet", "blog").strip()
    if not blog_uri:
        raise ValueError("No blog URI configured.")
    port = conf.get("akismet", "port")
    try:
        port = int(port)
    except ValueError:
        raise ValueError("Invalid port number: %r" % port)
    return {"blog_uri": blog_uri,
            "api_key": conf.get("akismet", "key").strip(),
            "api_server": conf.get("akismet", "server").strip(),
            "api_version": conf.get("akismet", "version").strip(),
            "api_port": port}


def create_client(conf, transport=None):
    """Create a client for the configured blog. This verifies the API key,
    so it may raise InvalidApiKeyError or HttpError.
    """
    if transport is None:
        timeout = conf.get("akismet", "timeout").strip()
        if timeout:
            timeout = float(timeout)
        else:
            timeout = None
        transport = pyakismet.transport.RequestsTransport(timeout=timeout)
    return pyakismet.client.Client(transport=transport,
                                   **client_options(conf))


def setup_logging(log_name, filepath, debug, sentry_dsn=None,
                  sentry_lvl="WARNING"):
    """Attach handlers to the named logger and return it.

    Only critical messages reach the console unless debugging, in which
    case everything does. The log file, when given, records INFO and up
    (or DEBUG when debugging). Errors can also be sent to Sentry if raven
    is installed.
    """
    fmt = logging.Formatter('%(asctime)s (%(process)d) %(name)s '
                            '%(levelname)s %(message)s')
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(log_name)
    logger.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if debug else logging.CRITICAL)
    console.setFormatter(fmt)
    logger.addHandler(console)

    if filepath:
        file_handler = logging.FileHandler(filepath)
        file_handler.setLevel(level)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    if sentry_dsn and _has_raven:
        sentry_handler = SentryHandler(sentry_dsn)
        sentry_handler.setLevel(getattr(logging, sentry_lvl.upper()))
        logger.addHandler(sentry_handler)

    return logger


def setup_logging_from_config(conf, homedir, log_name="pyakismet"):
    """Setup logging from the logging section of the configuration. A
    relative log file is placed in `homedir`.
    """
    expand_homefiles(("file",), "logging", homedir, conf)
    return setup_logging(log_name,
                         conf.get("logging", "file"),
                         conf.getboolean("logging", "debug"),
                         sentry_dsn=conf.get("logging", "sentry"),
                         sentry_lvl=conf.get("logging", "sentry_level"))


def expand_homefiles(homefiles, category, homedir, config):
    """Make the file options in `homefiles` absolute, relative to
    `homedir`. Empty options are left alone.
    """
    homedir = os.path.expanduser(homedir)
    for option in homefiles:
        filepath = config.get(category, option)
        if filepath:
            filepath = os.path.join(homedir, os.path.expanduser(filepath))
            config.set(category, option, filepath)
