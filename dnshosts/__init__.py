"""
dns-hosts - 命令行 hosts 文件编辑工具
"""

__version__ = "1.0.0"
__author__ = "dns-hosts Project"

from dnshosts.app import HostsApp
from dnshosts.config import Config
from dnshosts.hosts_manager import HostsFileEditor
from dnshosts.models import HostEntry, HostsLine, is_valid_ip

__all__ = ["HostsApp", "Config", "HostsFileEditor", "HostEntry", "HostsLine", "is_valid_ip"]
