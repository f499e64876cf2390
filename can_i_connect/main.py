"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys
from typing import List, Optional

from can_i_connect.config import settings
from can_i_connect.core.logging.config import LoggingOptions, bootstrap_logging, shutdown_logging
from can_i_connect.domain.errors import CanIConnectError
from can_i_connect.presentation.cli import ConnectCommand, Options, build_parser

EXIT_USAGE = 2


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        options = Options.from_args(args)
    except CanIConnectError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    bootstrap_logging(
        LoggingOptions(
            level=options.log_level,
            color=not options.no_color,
            service="can-i-connect",
            log_dir=settings.LOG_DIR,
            log_file_name=settings.LOG_FILE_NAME,
        )
    )
    try:
        if options.server_mode:
            # imported lazily so one-shot runs don't pay for the web stack
            from can_i_connect.presentation.web import serve

            host, port = options.listen
            serve(host, port)
            return 0
        return asyncio.run(ConnectCommand(options).run())
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
