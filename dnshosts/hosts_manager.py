"""
Hosts 文件编辑模块，支持原子性更新
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List

from dnshosts.errors import (
    DuplicateEntryError,
    FileOpenError,
    FileReadError,
    FileWriteError,
    InvalidIPError,
)
from dnshosts.models import HostEntry, HostsLine, is_valid_ip


class HostsFileEditor:
    """
    读取、追加、替换和删除 hosts 文件中的单行条目

    每次操作都从磁盘重新读取文件。改写类操作（edit/del/upsert）
    使用临时文件 + 重命名完成，不会留下被截断的 hosts 文件。
    """

    def __init__(
        self,
        hosts_path: str,
        logger: logging.Logger,
        match_mode: str = "substring",
        duplicate_policy: str = "allow",
        encoding: str = "utf-8"
    ):
        """
        初始化 hosts 文件编辑器

        参数:
            hosts_path: hosts 文件路径
            logger: 日志记录器实例
            match_mode: 域名匹配方式，substring 或 exact
            duplicate_policy: 添加已存在域名时的策略，allow、error 或 upsert
            encoding: 文件编码
        """
        self.hosts_path = Path(hosts_path)
        self.logger = logger
        self.match_mode = match_mode
        self.duplicate_policy = duplicate_policy
        self.encoding = encoding
        # 由最近一次 read_lines 检测，改写时沿用
        self.line_ending = '\n'

    def matches(self, line: str, domain: str) -> bool:
        """
        判断一行是否匹配给定域名

        substring 模式下只要行文本包含域名即匹配（sub.example.com 也会
        匹配 example.com）；exact 模式下必须是记录行，且有一个主机名字段
        与域名相等。
        """
        if self.match_mode == "exact":
            parsed = HostsLine.parse(line)
            return parsed.is_record and domain in parsed.hostnames
        return domain in line

    def read_lines(self) -> List[str]:
        """
        按原始顺序读取 hosts 文件的所有行（不含换行符）

        只按 \\n 分行，行内单独的 \\r 原样保留。第一行以 \\r\\n 结尾时，
        各行的 \\r\\n 都被去掉，之后的改写也使用 \\r\\n。

        异常:
            FileOpenError: 文件无法打开
            FileReadError: 读取过程中出错，整个读取作废
        """
        try:
            f = open(self.hosts_path, 'r', encoding=self.encoding, newline='\n')
        except OSError as e:
            self.logger.error(f"打开 hosts 文件失败: {self.hosts_path}: {e}")
            raise FileOpenError(f"Cannot open {self.hosts_path}: {e.strerror or e}") from e

        lines = []
        line_ending = None
        with f:
            try:
                for line in f:
                    if line.endswith('\n'):
                        line = line[:-1]
                        if line_ending is None:
                            line_ending = '\r\n' if line.endswith('\r') else '\n'
                        if line_ending == '\r\n' and line.endswith('\r'):
                            line = line[:-1]
                    lines.append(line)
            except (OSError, UnicodeError) as e:
                self.logger.error(f"读取 hosts 文件时出错: {e}")
                raise FileReadError(f"Error reading {self.hosts_path}: {e}") from e

        self.line_ending = line_ending or '\n'
        self.logger.debug(f"从 {self.hosts_path} 读取了 {len(lines)} 行")
        return lines

    def list_entries(self) -> List[str]:
        """返回 hosts 文件内容，逐行原样保留"""
        return self.read_lines()

    def add_entry(self, domain: str, ip: str) -> str:
        """
        在 hosts 文件末尾追加一条 "<ip>\t<域名>" 记录

        参数:
            domain: 域名
            ip: IP 地址

        返回:
            "added"，或在 upsert 策略下替换已有条目时返回 "updated"

        异常:
            InvalidIPError: ip 不是合法的 IP 字面量
            DuplicateEntryError: error 策略下域名已存在
            FileWriteError: 写入失败，包括域名无法用配置的编码表示
        """
        self._check_ip(ip)

        if self.duplicate_policy != "allow":
            existing = [line for line in self.read_lines() if self.matches(line, domain)]
            if existing:
                if self.duplicate_policy == "error":
                    self.logger.warning(f"域名已存在: {domain!r}")
                    raise DuplicateEntryError(domain)
                self.edit_entry(domain, ip)
                return "updated"

        entry = HostEntry(ip_address=ip, domain=domain)
        tail = self._read_tail()
        line_ending = '\r\n' if tail.endswith(b'\r\n') else '\n'
        prefix = '' if not tail or tail.endswith(b'\n') else line_ending

        try:
            f = open(self.hosts_path, 'a', encoding=self.encoding, newline='')
        except OSError as e:
            self.logger.error(f"打开 hosts 文件失败: {self.hosts_path}: {e}")
            raise FileOpenError(f"Cannot open {self.hosts_path}: {e.strerror or e}") from e

        with f:
            try:
                f.write(prefix + entry.to_hosts_line() + line_ending)
            except (OSError, UnicodeError) as e:
                self.logger.error(f"写入 hosts 文件失败: {e}")
                raise FileWriteError(f"Error writing {self.hosts_path}: {e}") from e

        self.logger.info(f"已添加条目: {entry!r}")
        return "added"

    def edit_entry(self, domain: str, ip: str) -> int:
        """
        将所有匹配域名的行替换为 "<ip>\t<域名>"

        没有匹配行时文件按原样重写，不视为错误。

        返回:
            被替换的行数
        """
        self._check_ip(ip)

        replacement = HostEntry(ip_address=ip, domain=domain).to_hosts_line()
        new_lines = []
        replaced = 0
        for line in self.read_lines():
            if self.matches(line, domain):
                new_lines.append(replacement)
                replaced += 1
            else:
                new_lines.append(line)

        self._write_lines(new_lines)
        self.logger.info(f"已替换 {replaced} 行: {domain!r} -> {ip}")
        return replaced

    def delete_entry(self, domain: str) -> int:
        """
        删除所有匹配域名的行

        返回:
            被删除的行数
        """
        lines = self.read_lines()
        kept = [line for line in lines if not self.matches(line, domain)]

        self._write_lines(kept)
        removed = len(lines) - len(kept)
        self.logger.info(f"已删除 {removed} 行: {domain!r}")
        return removed

    def _check_ip(self, ip: str) -> None:
        if not is_valid_ip(ip):
            self.logger.error(f"无效的 IP 地址: {ip!r}")
            raise InvalidIPError(ip)

    def _read_tail(self) -> bytes:
        """返回文件最后两个字节，空文件返回 b''"""
        try:
            with open(self.hosts_path, 'rb') as f:
                f.seek(0, os.SEEK_END)
                f.seek(max(f.tell() - 2, 0))
                return f.read()
        except OSError as e:
            self.logger.error(f"打开 hosts 文件失败: {self.hosts_path}: {e}")
            raise FileOpenError(f"Cannot open {self.hosts_path}: {e.strerror or e}") from e

    def _write_lines(self, lines: List[str]) -> None:
        """
        原子性重写 hosts 文件

        先写入同一目录下的临时文件，再用 os.replace 覆盖目标文件；
        每行后跟一个换行符（沿用读取时检测到的 \\n 或 \\r\\n）。

        异常:
            FileOpenError: 无法在目标目录创建临时文件
            FileWriteError: 写入或替换失败，包括内容无法用配置的编码表示
        """
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.hosts_path.parent,
                prefix='.hosts.tmp.',
                text=True
            )
        except OSError as e:
            self.logger.error(
                f"无法在 {self.hosts_path.parent} 创建临时文件: {e}. "
                "请确认具有写入权限。"
            )
            raise FileOpenError(f"Cannot write to {self.hosts_path.parent}: {e.strerror or e}") from e

        try:
            with os.fdopen(temp_fd, 'w', encoding=self.encoding, newline='') as f:
                for line in lines:
                    f.write(line + self.line_ending)

            # mkstemp 创建的文件权限为 0600，需沿用原文件权限
            shutil.copymode(self.hosts_path, temp_path)
            os.replace(temp_path, self.hosts_path)

        except (OSError, UnicodeError) as e:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            self.logger.error(f"更新 hosts 文件失败: {e}")
            raise FileWriteError(f"Error writing {self.hosts_path}: {e}") from e

        self.logger.debug(f"已写入 {len(lines)} 行到 {self.hosts_path}")
