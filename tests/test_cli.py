from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from wolpacket.cli import logger, main, setup_logging

PACKET_HEX = "ff" * 6 + "0102030a0b0f" * 16


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "wolpacket.log"))
    (tmp_path / "hosts.yml").write_text(
        yaml.safe_dump(
            {
                "hosts": [
                    {"name": "pc1", "mac": "01:02:03:0A:0B:0F"},
                    {"name": "nas", "mac": "aa-bb-cc-dd-ee-ff"},
                ]
            }
        ),
        encoding="utf-8",
    )
    yield tmp_path
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def test_host_name(workdir, capsys):
    assert main(["pc1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [f"pc1 01:02:03:0a:0b:0f {PACKET_HEX}"]
    assert len(out[0].split()[2]) == 204


def test_raw_mac(workdir, capsys):
    assert main(["01-02-03-0a-0b-0f"]) == 0
    assert capsys.readouterr().out.strip() == f"01-02-03-0a-0b-0f 01:02:03:0a:0b:0f {PACKET_HEX}"


def test_all_hosts(workdir, capsys):
    assert main([]) == 0
    labels = [line.split()[0] for line in capsys.readouterr().out.splitlines()]
    assert labels == ["pc1", "nas"]


def test_bad_mac_continues(workdir, capsys, caplog):
    with caplog.at_level(logging.ERROR, logger="wolpacket"):
        assert main(["01:02:03", "nas"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1 and out[0].startswith("nas ")
    assert "Malformed MAC address" in caplog.text


def test_writes_log_file(workdir, capsys):
    assert main(["pc1"]) == 0
    assert "Built magic packet for pc1" in (workdir / "wolpacket.log").read_text(encoding="utf-8")


def test_no_hosts_no_args(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "wolpacket.log"))
    try:
        assert main([]) == 2
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
    assert capsys.readouterr().out == ""


def test_config_error(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOSTS_FILE", str(tmp_path / "missing.yml"))
    assert main(["pc1"]) == 2


def test_unreadable_inventory(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "hosts.yml").write_bytes(b"\xff\xfe\x00hosts")
    assert main(["pc1"]) == 2

    inventory_dir = tmp_path / "inventory"
    inventory_dir.mkdir()
    monkeypatch.setenv("HOSTS_FILE", str(inventory_dir))
    assert main(["pc1"]) == 2


def test_setup_logging_replaces_handlers(tmp_path: Path):
    try:
        setup_logging(tmp_path / "a.log")
        setup_logging(tmp_path / "b.log", logging.DEBUG)
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()


def test_setup_logging_unwritable_file(tmp_path: Path):
    try:
        setup_logging(tmp_path / "no-such-dir" / "w.log")
        assert len(logger.handlers) == 1
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
