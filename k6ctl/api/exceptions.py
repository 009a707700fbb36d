"""Exception definitions for k6ctl API"""

from ..constants import ErrorCode, MAX_CONFIGMAP_PAYLOAD_SIZE


class K6CtlError(Exception):
    """Base exception for k6ctl"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ArchiveError(K6CtlError):
    """Archiving operation error"""
    pass


class ScriptNotFoundError(ArchiveError):
    """Source script does not exist"""

    def __init__(self, script_path: str):
        message = f"Script file not found at path: {script_path}"
        super().__init__(message, ErrorCode.SCRIPT_NOT_FOUND)
        self.script_path = script_path


class OutputDirectoryNotFoundError(ArchiveError):
    """Requested output directory does not exist"""

    def __init__(self, output_directory: str):
        message = f"Output directory does not exist at path: {output_directory}"
        super().__init__(message, ErrorCode.OUTPUT_DIRECTORY_NOT_FOUND)
        self.output_directory = output_directory


class ToolNotInstalledError(ArchiveError):
    """Packaging tool is not available"""

    def __init__(self, tool_name: str = "k6"):
        message = f"{tool_name} is not installed. Please install {tool_name} to archive scripts."
        super().__init__(message, ErrorCode.TOOL_NOT_INSTALLED)
        self.tool_name = tool_name


class ArchiveCreationFailedError(ArchiveError):
    """Packaging tool failed or produced no file"""

    def __init__(self, archive_path: str, stderr: str = ""):
        message = f"Failed to create archive at path: {archive_path}"
        if stderr:
            message += f": {stderr}"
        super().__init__(message, ErrorCode.ARCHIVE_CREATION_FAILED)
        self.archive_path = archive_path
        self.stderr = stderr


class PublishError(K6CtlError):
    """Publishing operation error"""
    pass


class ArchiveNotFoundError(PublishError):
    """Archive file vanished before publishing"""

    def __init__(self, archive_path: str):
        message = f"Archive file not found at path: {archive_path}"
        super().__init__(message, ErrorCode.ARCHIVE_NOT_FOUND)
        self.archive_path = archive_path


class ArchiveTooLargeError(PublishError):
    """Archive exceeds the ConfigMap payload ceiling"""

    def __init__(self, archive_path: str, size: int, limit: int = MAX_CONFIGMAP_PAYLOAD_SIZE):
        message = (
            f"Archive file {archive_path} is too large to be stored in a configmap "
            f"(size: {size} bytes, limit: {limit} bytes)"
        )
        super().__init__(message, ErrorCode.ARCHIVE_TOO_LARGE)
        self.archive_path = archive_path
        self.size = size
        self.limit = limit


class PublishFailedError(PublishError):
    """Cluster rejected or failed the create request"""

    def __init__(self, config_map_name: str, namespace: str, reason: str):
        message = (
            f"Failed to create ConfigMap {config_map_name} "
            f"in namespace {namespace}: {reason}"
        )
        super().__init__(message, ErrorCode.PUBLISH_FAILED)
        self.config_map_name = config_map_name
        self.namespace = namespace
        self.reason = reason


class RetractFailedError(PublishError):
    """Cluster rejected or failed the delete request"""

    def __init__(self, config_map_name: str, namespace: str, reason: str):
        message = (
            f"Failed to delete ConfigMap {config_map_name} "
            f"from namespace {namespace}: {reason}"
        )
        super().__init__(message, ErrorCode.RETRACT_FAILED)
        self.config_map_name = config_map_name
        self.namespace = namespace
        self.reason = reason


class ConfigError(K6CtlError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_INVALID)


class EnvFileError(K6CtlError):
    """Environment file error"""

    def __init__(self, message: str, errors: list = None):
        super().__init__(message, ErrorCode.ENV_FILE_INVALID)
        self.errors = errors or []
