"""
dns-hosts 主应用模块
"""

import logging
import sys
from typing import List, Optional

from dnshosts.config import Config
from dnshosts.errors import InvalidActionError, InvalidArgumentCountError, InvalidIPError
from dnshosts.hosts_manager import HostsFileEditor
from dnshosts.models import is_valid_ip

ACTIONS = ("add", "list", "edit", "del")


class HostsApp:
    """
    主应用控制器，协调配置、日志和 hosts 文件编辑器

    - 验证配置并确定 hosts 文件路径
    - 校验 IP 参数
    - 将动作分派给 HostsFileEditor
    """

    def __init__(self, config: Config):
        """
        初始化应用

        参数:
            config: 应用配置

        异常:
            ConfigurationError: 如果配置无效
            PathResolutionError: 如果无法确定 hosts 文件路径
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()

        self.hosts_path = config.resolve_hosts_path()
        self.logger.debug(f"Hosts 文件: {self.hosts_path}")

        self.editor = HostsFileEditor(
            self.hosts_path,
            self.logger,
            match_mode=config.match_mode,
            duplicate_policy=config.duplicate_policy,
            encoding=config.encoding
        )

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        日志写到 stderr，stdout 只留给 hosts 文件内容和结果消息。

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('dns-hosts')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            return logger

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def list_entries(self) -> List[str]:
        return self.editor.list_entries()

    def run(self, action: str, domain: str, ip: Optional[str] = None) -> Optional[str]:
        """
        执行一个动作

        ip 在分派之前校验，与动作无关。

        参数:
            action: add、list、edit 或 del
            domain: 域名（list 时不使用）
            ip: IP 地址，为 None 时使用配置的默认地址

        返回:
            结果消息；list 动作返回 None

        异常:
            InvalidArgumentCountError: 域名为空
            InvalidIPError: ip 不合法
            InvalidActionError: 未知动作
        """
        if ip is None:
            ip = self.config.default_ip

        if not domain:
            raise InvalidArgumentCountError("Domain must not be empty.")

        if not is_valid_ip(ip):
            self.logger.error(f"无效的 IP 地址: {ip!r}")
            raise InvalidIPError(ip)

        self.logger.info(f"动作: {action} {domain!r} {ip}")

        if action == "add":
            result = self.editor.add_entry(domain, ip)
            if result == "updated":
                return "Entry updated successfully."
            return "Entry added successfully."
        elif action == "list":
            return None
        elif action == "edit":
            self.editor.edit_entry(domain, ip)
            return "Entry edited successfully."
        elif action == "del":
            self.editor.delete_entry(domain)
            return "Entry deleted successfully."

        self.logger.warning(f"未知动作: {action!r}")
        raise InvalidActionError(action)
