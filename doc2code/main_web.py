import argparse
import sys

import uvicorn
from dotenv import load_dotenv

from doc2code.config import Config
from doc2code.logger import DefaultLogger, Logger
from doc2code.web_server import Doc2CodeWebServer

if __name__ == "__main__":
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="doc2code Web Server - Generate SDKs from API documentation"
    )
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host address to bind to (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.get_web_port(),
        help="Port number to listen on (default: 8000, or DOC2CODE_WEB_PORT env var)",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for date-named log files (default: DOC2CODE_LOG_DIR or ./logs)",
    )
    args = parser.parse_args()

    logger: Logger = DefaultLogger(
        level=Config.get_log_level(),
        log_dir=args.log_dir or Config.get_log_dir(),
    )
    logger.info("Configuration loaded", **Config.get_config_summary())

    server = Doc2CodeWebServer(logger=logger)

    try:
        logger.info(
            "Starting web server",
            host=args.host,
            port=args.port,
            transport="HTTP REST API",
        )
        uvicorn.run(server.app, host=args.host, port=args.port)
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)
