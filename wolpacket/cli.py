from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import ConfigError, Settings, load_settings
from .magic import MacAddress, MacAddressError, create_magic_packet, parse_mac

logger = logging.getLogger("wolpacket")

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(log_file: Path, level: int = logging.INFO) -> None:
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    fmt = logging.Formatter(FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)
    try:
        handler = logging.handlers.RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=3)
    except OSError as e:
        logger.warning("Cannot open log file %s, logging to console only: %s", log_file, e)
        return
    handler.setFormatter(fmt)
    logger.addHandler(handler)


def resolve_target(settings: Settings, arg: str) -> Tuple[str, MacAddress]:
    """Map a CLI argument to (label, mac): host names win over raw addresses."""
    host = settings.find_host(arg)
    if host:
        return host.name, host.mac
    return arg, parse_mac(arg)


def format_line(label: str, mac: MacAddress, packet: bytes) -> str:
    return f"{label} {mac} {packet.hex()}"


def run(settings: Settings, args: List[str]) -> int:
    if not args:
        if not settings.hosts:
            raise ConfigError("No hosts configured and no MAC address given")
        args = [h.name for h in settings.hosts]

    rc = 0
    for arg in args:
        try:
            label, mac = resolve_target(settings, arg)
        except MacAddressError as e:
            logger.error("%s", e)
            rc = 1
            continue
        packet = create_magic_packet(mac)
        logger.info("Built magic packet for %s (%s)", label, mac)
        print(format_line(label, mac, packet))
    return rc


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = load_settings()
        setup_logging(settings.log_file, settings.log_level)
        logger.debug("Loaded %d hosts", len(settings.hosts))
        return run(settings, args)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
