from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from .magic import MacAddress, MacAddressError, parse_mac


@dataclass(frozen=True)
class Host:
    name: str
    mac: MacAddress


@dataclass(frozen=True)
class Settings:
    log_file: Path
    log_level: int
    hosts: List[Host]

    def find_host(self, name: str) -> Optional[Host]:
        return next((h for h in self.hosts if h.name == name), None)


class ConfigError(Exception):
    pass


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown LOG_LEVEL: {raw}")
    return level


def _load_hosts(hosts_path: Path) -> List[Host]:
    try:
        with hosts_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read {hosts_path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("hosts", []), list):
        raise ConfigError(f"{hosts_path} must contain a 'hosts' list")

    hosts: List[Host] = []
    seen = set()
    for item in data.get("hosts", []):
        if not isinstance(item, dict):
            raise ConfigError(f"Invalid host entry: {item!r}")
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"Host entry without a name: {item!r}")
        name = name.strip()
        if name in seen:
            raise ConfigError(f"Duplicate host name: {name}")
        if "mac" not in item:
            raise ConfigError(f"Host {name} has no 'mac'")
        # unquoted values like 10:20:30:40:50:59 load as YAML 1.1 sexagesimal ints
        if not isinstance(item["mac"], str):
            raise ConfigError(f"Host {name}: 'mac' must be a quoted string")
        try:
            mac = parse_mac(item["mac"].strip())
        except MacAddressError as e:
            raise ConfigError(f"Invalid host configuration for {name}: {e}") from e
        seen.add(name)
        hosts.append(Host(name=name, mac=mac))
    return hosts


def load_settings(env_path: Optional[Path] = None, hosts_path: Optional[Path] = None) -> Settings:
    """Load settings from .env and hosts.yml.

    Env vars:
      - LOG_FILE: path to log file (optional; default ./wolpacket.log)
      - LOG_LEVEL: logging level name (optional; default INFO)
      - HOSTS_FILE: host inventory (optional; default ./hosts.yml)

    A missing default inventory means no hosts; a missing inventory that
    was asked for explicitly is an error.
    """
    if env_path is None:
        env_path = Path(".env")

    if env_path.exists():
        load_dotenv(dotenv_path=env_path)

    log_file = Path(os.getenv("LOG_FILE", "./wolpacket.log"))
    log_level = _parse_level(os.getenv("LOG_LEVEL", "INFO"))

    explicit = hosts_path is not None or bool(os.getenv("HOSTS_FILE"))
    if hosts_path is None:
        hosts_path = Path(os.getenv("HOSTS_FILE") or "hosts.yml")

    if hosts_path.exists():
        hosts = _load_hosts(hosts_path)
    elif explicit:
        raise ConfigError(f"Hosts file not found: {hosts_path}")
    else:
        hosts = []

    return Settings(log_file=log_file, log_level=log_level, hosts=hosts)
