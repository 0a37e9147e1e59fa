"""
配置管理模块，支持环境变量
"""

import os
import platform
from dataclasses import dataclass, field
from pathlib import PureWindowsPath
from typing import Mapping, Optional

from dnshosts.errors import ConfigurationError, PathResolutionError

UNIX_HOSTS_PATH = "/etc/hosts"
DEFAULT_IP = "127.0.0.1"

MATCH_MODES = ("substring", "exact")
DUPLICATE_POLICIES = ("allow", "error", "upsert")


def resolve_hosts_path(
    environ: Optional[Mapping[str, str]] = None,
    system: Optional[str] = None
) -> str:
    """
    计算当前平台的 hosts 文件绝对路径

    Windows 上由 SystemRoot 环境变量推导，其他系统使用固定路径 /etc/hosts。

    参数:
        environ: 环境变量映射 (默认: os.environ)
        system: 平台名称，同 platform.system() 的返回值 (默认: 自动检测)

    返回:
        hosts 文件路径

    异常:
        PathResolutionError: Windows 上 SystemRoot 缺失或为空
    """
    if environ is None:
        environ = os.environ
    if system is None:
        system = platform.system()

    if system != "Windows":
        return UNIX_HOSTS_PATH

    system_root = environ.get("SystemRoot", "").strip()
    if not system_root:
        raise PathResolutionError(
            "Cannot locate hosts file: SystemRoot environment variable is not set."
        )
    return str(PureWindowsPath(system_root, "System32", "drivers", "etc", "hosts"))


@dataclass
class Config:
    """应用配置类，从环境变量加载配置"""

    hosts_file_path: Optional[str] = None
    match_mode: str = "substring"
    duplicate_policy: str = "allow"
    encoding: str = "utf-8"
    default_ip: str = DEFAULT_IP
    log_level: str = "WARNING"
    # 用于推导平台路径的环境变量 (默认: os.environ)
    environ: Optional[Mapping[str, str]] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            HOSTS_FILE: hosts 文件路径 (默认: 按平台自动确定)
            HOSTS_MATCH_MODE: 域名匹配方式 substring/exact (默认: substring)
            HOSTS_ON_DUPLICATE: 添加重复域名时的策略 allow/error/upsert (默认: allow)
            HOSTS_ENCODING: 文件编码 (默认: utf-8)
            HOSTS_DEFAULT_IP: 未指定 ip 参数时使用的地址 (默认: 127.0.0.1)
            LOG_LEVEL: 日志级别 (默认: WARNING)
        """
        if environ is None:
            environ = os.environ
        return cls(
            hosts_file_path=environ.get("HOSTS_FILE") or None,
            match_mode=environ.get("HOSTS_MATCH_MODE", "substring").lower(),
            duplicate_policy=environ.get("HOSTS_ON_DUPLICATE", "allow").lower(),
            encoding=environ.get("HOSTS_ENCODING", "utf-8"),
            default_ip=environ.get("HOSTS_DEFAULT_IP", DEFAULT_IP),
            log_level=environ.get("LOG_LEVEL", "WARNING").upper(),
            environ=environ
        )

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ConfigurationError(
                f"Invalid LOG_LEVEL: {self.log_level}. "
                f"Must be one of: {', '.join(sorted(valid_log_levels))}"
            )
        if self.match_mode not in MATCH_MODES:
            raise ConfigurationError(
                f"Invalid HOSTS_MATCH_MODE: {self.match_mode}. "
                f"Must be one of: {', '.join(MATCH_MODES)}"
            )
        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ConfigurationError(
                f"Invalid HOSTS_ON_DUPLICATE: {self.duplicate_policy}. "
                f"Must be one of: {', '.join(DUPLICATE_POLICIES)}"
            )
        try:
            "".encode(self.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Invalid HOSTS_ENCODING: {e}") from e

    def resolve_hosts_path(self, system: Optional[str] = None) -> str:
        """返回显式配置的路径，未配置时按平台和加载时的环境变量推导"""
        if self.hosts_file_path:
            return self.hosts_file_path
        return resolve_hosts_path(self.environ, system)
