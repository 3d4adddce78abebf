"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and launches the status responder.
"""

import argparse
import logging
import sys

from status_responder.bootstrap import bootstrap_configure_logging, bootstrap_create_server
from status_responder.config import LOG_LEVEL_CHOICES, SettingsLoadError, config_load_settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the status responder with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        int: Process exit code, `1` on configuration or bind failure.
    """

    argument_parser = argparse.ArgumentParser(description="Status responder HTTP service")
    argument_parser.add_argument(
        "--host",
        dest="application_host",
        type=str,
        help="Interface to bind, overrides STATUS_RESPONDER_APPLICATION_HOST",
    )
    argument_parser.add_argument(
        "--port",
        dest="application_port",
        type=int,
        help="TCP port to bind (0 for ephemeral), overrides STATUS_RESPONDER_APPLICATION_PORT",
    )
    argument_parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=LOG_LEVEL_CHOICES,
        help="Logging level, overrides STATUS_RESPONDER_LOG_LEVEL",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    try:
        settings = config_load_settings(
            application_host=parsed_arguments.application_host,
            application_port=parsed_arguments.application_port,
            log_level=parsed_arguments.log_level,
        )
    except SettingsLoadError as error:
        print(error, file=sys.stderr)
        return 1

    bootstrap_configure_logging(settings.log_level)
    logger.info("starting status responder (environment=%s)", settings.environment_name)
    server = bootstrap_create_server(settings)
    if not server.server_run():
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
