"""Constants used in the project."""

import os
from enum import Enum


class RepositoryLayout(Enum):
    """Repository layouts understood by the remote resolver.

    Args:
        Enum (string): Layout identifiers as written in POM files.
    """

    DEFAULT = "default"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    POM_XML_FILE = "pom.xml"
    POM_EXTENSION = "pom"
    REACTOR_OUTPUT_DIR = os.path.join("target", "classes")
    # Off unless configured; pom-typed artifacts are mapped like any other
    EXCLUDE_POM_ARTIFACTS = False

    LOCAL_REPOSITORY = os.path.join(os.path.expanduser("~"), ".m2", "repository")
    CENTRAL_REPOSITORY_ID = "central"
    CENTRAL_REPOSITORY_URL = "https://repo1.maven.org/maven2"
    SNAPSHOT_SUFFIX = "-SNAPSHOT"
    OFFLINE = False

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL_ENV = "MVNSTAGE_LOG_LEVEL"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3
