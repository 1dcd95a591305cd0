"""Run the Bazaar service: python -m bazaar"""

import logging

import uvicorn

from bazaar.config import load_config

config = load_config()
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
)
uvicorn.run("bazaar.app:create_app", host=config.host, port=config.port, factory=True)
