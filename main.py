#!/usr/bin/env python3
"""
dns-hosts - 主入口点

通过命令行添加、列出、编辑和删除 hosts 文件条目。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 dnshosts 模块
sys.path.insert(0, str(Path(__file__).parent))

from dnshosts.cli import main


if __name__ == '__main__':
    main(prog_name="dns-hosts")
