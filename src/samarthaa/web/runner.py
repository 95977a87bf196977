"""Uvicorn server runner with custom configuration."""

from copy import deepcopy

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from samarthaa.app import App
from samarthaa.config import Config
from samarthaa.web.server import create_fastapi_app


def run_server(app: App, config: Config) -> None:
    """Run the Uvicorn server with access logs in the same timestamped format as application logs."""
    fastapi_app = create_fastapi_app(app, config)

    log_config = deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = '%(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s - %(levelname)s - %(message)s"

    uvicorn.run(
        fastapi_app,
        host=config.host,
        port=config.port,
        log_config=log_config,
        access_log=True,
        proxy_headers=True,
    )
