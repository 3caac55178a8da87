"""Script to start a new GEE session."""
import logging
import os
from typing import Optional

import ee

from gee_map_tools.config import GEE_PROJECT_ENV

logger = logging.getLogger(__name__)


def start(project: Optional[str] = None, authenticate: bool = True) -> None:
    """
    Start a new session.

    :param project: Earth Engine Cloud project, defaults to the GEE_PROJECT environment variable
    :param authenticate: Run the authentication flow before initialising
    """
    project = project or os.environ.get(GEE_PROJECT_ENV)

    # Authenticate
    if authenticate:
        ee.Authenticate()

    # Initialize the library
    ee.Initialize(project=project)
    logger.info(f"Started Earth Engine session (project={project})")


if __name__ == "__main__":
    start()
