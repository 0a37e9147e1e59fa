"""
错误类型与进程退出码
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """每类错误对应的进程退出码"""

    OK = 0
    ERROR = 1
    INVALID_ARGUMENT_COUNT = 2
    PATH_RESOLUTION = 3
    FILE_OPEN = 4
    FILE_READ = 5
    FILE_WRITE = 6
    INVALID_IP = 7
    INVALID_ACTION = 8
    DUPLICATE_ENTRY = 9
    CONFIGURATION = 10


class HostsError(Exception):
    """所有 dns-hosts 错误的基类，携带退出码"""

    exit_code: ExitCode = ExitCode.ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PathResolutionError(HostsError):
    """无法确定 hosts 文件路径（例如 SystemRoot 未设置）"""

    exit_code = ExitCode.PATH_RESOLUTION


class FileOpenError(HostsError):
    """hosts 文件无法打开（权限、不存在、被占用）"""

    exit_code = ExitCode.FILE_OPEN


class FileReadError(HostsError):
    exit_code = ExitCode.FILE_READ


class FileWriteError(HostsError):
    exit_code = ExitCode.FILE_WRITE


class InvalidIPError(HostsError):
    """IP 字面量格式错误"""

    exit_code = ExitCode.INVALID_IP

    def __init__(self, ip: str):
        super().__init__(f"Invalid IP address: {ip!r}")
        self.ip = ip


class InvalidArgumentCountError(HostsError):
    exit_code = ExitCode.INVALID_ARGUMENT_COUNT


class InvalidActionError(HostsError):
    exit_code = ExitCode.INVALID_ACTION

    def __init__(self, action: str):
        super().__init__("Invalid action. Use 'add', 'list', 'edit', or 'del'.")
        self.action = action


class DuplicateEntryError(HostsError):
    """启用 error 策略时，添加已存在的域名"""

    exit_code = ExitCode.DUPLICATE_ENTRY

    def __init__(self, domain: str):
        super().__init__(f"Entry for {domain} already exists.")
        self.domain = domain


class ConfigurationError(HostsError):
    exit_code = ExitCode.CONFIGURATION
