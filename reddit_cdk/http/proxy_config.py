#
# Copyright (c) 2023 Airbyte, Inc., all rights reserved.
#

import logging
import tempfile
from pathlib import Path

import requests

from reddit_cdk.config import ProxySettings

logger = logging.getLogger("reddit_cdk.http")


def _install_ca_certificate(ca_cert_file_text: str) -> Path:
    """Saves the PEM certificate of the proxy to a file so requests can verify against it."""
    with tempfile.NamedTemporaryFile(
        mode="w",
        delete=False,
        prefix="reddit-cdk-proxy-ca-cert-",
        suffix=".pem",
        encoding="utf-8",
    ) as temp_file:
        temp_file.write(ca_cert_file_text)
        temp_file.flush()

    return Path(temp_file.name).absolute()


def configure_session(session: requests.Session, proxy: ProxySettings) -> requests.Session:
    """
    Routes the session's http and https calls through the proxy.

    Unlike a process wide HTTP(S)_PROXY setting, only calls made with this session go through
    the proxy.
    """
    logger.info("Using proxy %s for reddit API calls", proxy.proxy_url)
    session.proxies.update({"http": proxy.proxy_url, "https": proxy.proxy_url})

    if not proxy.verify_ssl:
        session.verify = False
    elif proxy.proxy_ca_certificate:
        cert_file_path = _install_ca_certificate(proxy.proxy_ca_certificate)
        logger.info("Using proxy CA certificate %s", cert_file_path)
        session.verify = str(cert_file_path)

    return session
