"""Global constants for k6ctl"""

import re

APP_NAME = "k6ctl"
LOG_FORMAT = "%(message)s"

# Packaging tool
K6_BINARY = "k6"
ARCHIVE_PREFIX = "archive"
ARCHIVE_EXTENSION = ".tar"
ARCHIVE_FILE_PATTERN = "{prefix}-{name}-{millis}{ext}"

# ConfigMap payload is stored inline and capped by the etcd object size
MAX_CONFIGMAP_PAYLOAD_SIZE = 1024 * 1024  # 1MiB

CONFIGMAP_API_VERSION = "v1"
CONFIGMAP_KIND = "ConfigMap"

# Configuration defaults
DEFAULT_CONFIG_FILE = "k6ctl.config.json"
DEFAULT_ENV_FILE = ".env"
DEFAULT_NAMESPACE = "default"
DEFAULT_PARALLELISM = 1
DEFAULT_RUNNER_IMAGE = "grafana/k6:latest"
DEFAULT_TREND_STATS = ["avg", "p(95)", "p(99)", "min", "max"]

# Environment variables
ENV_CONFIG_PATH = "K6CTL_CONFIG"
ENV_NAMESPACE = "K6CTL_NAMESPACE"
ENV_LOG_LEVEL = "K6CTL_LOG_LEVEL"
ENV_KUBECONFIG = "KUBECONFIG"
ENV_INTEGRATION = "K6CTL_INTEGRATION"

# Validation patterns
RESOURCE_NAME_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9.-]*[a-z0-9])?$")
MAX_RESOURCE_NAME_LENGTH = 253
ENV_KEY_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*$")
ENV_VALUE_PATTERN = re.compile(r"^[\x20-\x7E]*$")


# Error codes
class ErrorCode:
    SCRIPT_NOT_FOUND = "K6C001"
    OUTPUT_DIRECTORY_NOT_FOUND = "K6C002"
    TOOL_NOT_INSTALLED = "K6C003"
    ARCHIVE_CREATION_FAILED = "K6C004"
    ARCHIVE_NOT_FOUND = "K6C005"
    ARCHIVE_TOO_LARGE = "K6C006"
    PUBLISH_FAILED = "K6C007"
    RETRACT_FAILED = "K6C008"
    CONFIG_INVALID = "K6C009"
    ENV_FILE_INVALID = "K6C010"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"

# Message templates
MSG_RETRACT_SUCCESS = f"{EMOJI_SUCCESS} ConfigMap {{name}} deleted from namespace {{namespace}}"
