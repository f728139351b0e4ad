"""Tests for the command-line interface."""

import json

import yaml
from click.testing import CliRunner

from keagen.cli import EXIT_INCOMPLETE, build_demo_config, cli

SITE_YAML = """
lifetime: 7200
interfaces: [enp0s1]
subnets:
  - subnet: 192.168.50.0/24
    pools:
      - {low: 192.168.50.10, high: 192.168.50.20}
options:
  - {name: routers, data: 192.168.50.1}
"""


def test_demo_config():
    """Test the example configuration."""
    document = build_demo_config().render().unwrap()

    assert document["Dhcp4"]["valid-lifetime"] == 4000
    assert document["Dhcp4"]["interfaces-config"] == {"interfaces": ["aaa", "bbb"]}
    assert document["Dhcp4"]["subnet4"] == [
        {"id": 1, "subnet": "192.168.10.0/24", "pools": [{"pool": "192.168.10.10 - 192.168.10.20"}]}
    ]


def test_demo_command():
    """Test printing the example configuration."""
    runner = CliRunner()
    result = runner.invoke(cli, ["demo"])

    assert result.exit_code == 0
    assert json.loads(result.output)["Dhcp4"]["option-data"][0]["always-send"] is True


def test_demo_command_yaml():
    """Test printing the example configuration as YAML."""
    runner = CliRunner()
    result = runner.invoke(cli, ["demo", "--format", "yaml"])

    assert result.exit_code == 0
    assert yaml.safe_load(result.output)["Dhcp4"]["valid-lifetime"] == 4000


def test_generate_to_file(tmp_path):
    """Test generating a configuration file from a site file."""
    site = tmp_path / "site.yaml"
    site.write_text(SITE_YAML)
    output = tmp_path / "kea-dhcp4.conf"

    runner = CliRunner()
    result = runner.invoke(cli, ["generate", str(site), "-o", str(output)])

    assert result.exit_code == 0
    document = json.loads(output.read_text())
    assert document["Dhcp4"]["subnet4"][0]["id"] == 1


def test_generate_incomplete(tmp_path):
    """Test that an incomplete document exits with a distinct code."""
    site = tmp_path / "site.yaml"
    site.write_text("lifetime: 60\n")

    runner = CliRunner()
    result = runner.invoke(cli, ["generate", str(site)])

    assert result.exit_code == EXIT_INCOMPLETE
    assert '"valid-lifetime": 60' in result.output
    assert "missing-interfaces" in result.output


def test_generate_invalid_site(tmp_path):
    """Test reporting a malformed site file."""
    site = tmp_path / "site.yaml"
    site.write_text("lifetime: soon\n")

    runner = CliRunner()
    result = runner.invoke(cli, ["generate", str(site)])

    assert result.exit_code == 1
    assert "Invalid site file" in result.output


def test_validate(tmp_path):
    """Test validating a site file."""
    site = tmp_path / "site.yaml"
    site.write_text(SITE_YAML)

    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(site)])

    assert result.exit_code == 0
    assert "Configuration is valid!" in result.output
    assert "Subnets: 1" in result.output
    assert "Pools: 1" in result.output
    assert "Options: 1" in result.output


def test_validate_incomplete(tmp_path):
    """Test validating a site file without subnets."""
    site = tmp_path / "site.yaml"
    site.write_text("lifetime: 60\ninterfaces: [eth0]\n")

    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(site)])

    assert result.exit_code == EXIT_INCOMPLETE
    assert "missing-subnets" in result.output


def test_schema():
    """Test printing the site file schema."""
    runner = CliRunner()
    result = runner.invoke(cli, ["schema", "--format", "json"])

    assert result.exit_code == 0
    schema = json.loads(result.output)
    assert schema["title"] == "Kea DHCPv4 Site Schema"
    assert "lifetime" in schema["properties"]
