"""
dns-hosts 数据模型
"""

import ipaddress
from dataclasses import dataclass, field
from typing import Optional, Tuple


def is_valid_ip(ip: str) -> bool:
    """
    检查字符串是否为合法的 IPv4 或 IPv6 字面量

    不做 DNS 解析，不接受主机名，也不接受 IPv6 zone 后缀（如 fe80::1%eth0）。

    参数:
        ip: 待检查的字符串

    返回:
        合法返回 True，否则返回 False
    """
    if not ip or '%' in ip or ip != ip.strip():
        return False
    try:
        ipaddress.ip_address(ip)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class HostEntry:
    """
    代表 hosts 文件中的单个条目

    属性:
        ip_address: IP 地址
        domain: 要映射的域名
    """

    ip_address: str
    domain: str

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: <IP>\t<域名>

        返回:
            格式化的 hosts 文件行（不含换行符）
        """
        return f"{self.ip_address}\t{self.domain}"

    def __str__(self) -> str:
        return f"{self.domain} -> {self.ip_address}"


@dataclass(frozen=True)
class HostsLine:
    """
    hosts 文件中的一行

    原始文本总是原样保留；只有形如 "IP 空白 主机名..." 的行才会解析出
    ip 和 hostnames，注释行、空行和无法识别的行 ip 为 None。
    """

    raw: str
    ip: Optional[str] = None
    hostnames: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, raw: str) -> "HostsLine":
        content = raw.split('#', 1)[0]
        fields = content.split()
        if len(fields) < 2 or not is_valid_ip(fields[0]):
            return cls(raw=raw)
        return cls(raw=raw, ip=fields[0], hostnames=tuple(fields[1:]))

    @property
    def is_record(self) -> bool:
        return self.ip is not None
