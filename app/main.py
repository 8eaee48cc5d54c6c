"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service,
or prints one status snapshot for shell-based checks.
"""

import argparse
import json

import uvicorn

from app.bootstrap import bootstrap_configure_logging, bootstrap_create_application, bootstrap_create_status_reporter
from app.config import config_load_settings
from app.status import InvalidArgumentError


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="InfoLine API runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "status"),
        help="Runtime command: `api` starts server, `status` prints one status snapshot as JSON",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()

    if parsed_arguments.command == "status":
        bootstrap_configure_logging(settings.log_level)
        reporter = bootstrap_create_status_reporter(settings)
        try:
            snapshot = reporter.status_reporter_snapshot()
        except InvalidArgumentError as error:
            print(f"INVALID_RUNTIME_COUNTERS: {error}")
            raise SystemExit(1) from error
        print(json.dumps(snapshot.to_payload(), ensure_ascii=False, indent=2))
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
