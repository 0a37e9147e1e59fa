import logging

import pytest

from dnshosts.hosts_manager import HostsFileEditor


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to streams from a previous test."""
    logger = logging.getLogger('dns-hosts')
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger('dns-hosts.test')


@pytest.fixture
def hosts_file(tmp_path):
    path = tmp_path / "hosts"
    path.write_text(
        "# local names\n"
        "127.0.0.1\tlocalhost\n"
        "::1 localhost ip6-localhost\n"
        "\n"
        "10.1.1.1 sub.example.com\n"
        "10.2.2.2 other.org\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def editor(hosts_file, logger) -> HostsFileEditor:
    return HostsFileEditor(str(hosts_file), logger)
