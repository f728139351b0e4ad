"""Command-line interface for generating Kea DHCPv4 configuration."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from .config import KeaConfig, dump_document
from .dhcp4 import Dhcp4
from .result import RenderResult
from .site import SiteConfig, build_config, load_site

EXIT_INCOMPLETE = 2


def _load_env_files() -> None:
    """Load environment variables from .env files.

    Site files can then reference them with ${oc.env:VAR_NAME}.
    """
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(cwd_env)
    else:
        # Try default load_dotenv behavior (searches up directory tree)
        load_dotenv()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s [%(levelname)s] - %(message)s",
        stream=sys.stderr,
    )


def build_demo_config() -> KeaConfig:
    """Build the example configuration printed by ``keagen demo``."""
    dhcp4 = Dhcp4(4000, ["aaa", "bbb"])
    subnet_id = dhcp4.add_subnet("192.168.10.0/24")
    dhcp4.add_pool(subnet_id, "192.168.10.10", "192.168.10.20")
    dhcp4.add_option_always("domain-name-servers", "192.0.2.1, 192.0.2.2")
    return KeaConfig(dhcp4)


def emit(result: RenderResult, output_format: str, output: Optional[str]) -> None:
    """Write a rendered document to a file or stdout and report its status.

    Exits with EXIT_INCOMPLETE when rendering stopped early; the partial
    document is still written so it can be inspected.
    """
    text = dump_document(result.document, output_format)
    if output:
        with open(output, "w") as f:
            f.write(text)
        click.echo(f"Configuration written to {output}", err=True)
    else:
        click.echo(text, nl=False)

    if result.diagnostic is not None:
        click.echo(f"Error: incomplete configuration ({result.diagnostic})", err=True)
        sys.exit(EXIT_INCOMPLETE)


format_option = click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["json", "yaml"]), default="json", show_default=True,
    help="Output format",
)
output_option = click.option(
    "-o", "--output", type=click.Path(dir_okay=False), envvar="KEAGEN_OUTPUT",
    help="Write the document to this file instead of stdout",
)


@click.group()
@click.version_option(version="0.1.0", prog_name="keagen")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """keagen - Kea DHCPv4 configuration generator.

    Builds a Kea DHCPv4 configuration document from a site description
    and checks that it has everything the server needs.

    Examples:

        \b
        # Print the example configuration
        keagen demo

        \b
        # Generate from a site file
        keagen generate site.yaml -o /etc/kea/kea-dhcp4.conf

        \b
        # Check a site file
        keagen validate site.yaml
    """
    _setup_logging(verbose)


@cli.command()
@format_option
@output_option
def demo(output_format: str, output: Optional[str]) -> None:
    """Print an example configuration.

    Examples:

        \b
        keagen demo
        keagen demo --format yaml
    """
    emit(build_demo_config().render(), output_format, output)


@cli.command()
@click.argument("site_file", type=click.Path(exists=True, dir_okay=False))
@format_option
@output_option
def generate(site_file: str, output_format: str, output: Optional[str]) -> None:
    """Generate a Kea configuration from a site file.

    SITE_FILE is the path to a YAML or JSON site description.

    Examples:

        \b
        keagen generate site.yaml
        keagen generate site.yaml -o kea-dhcp4.conf
    """
    try:
        config = build_config(load_site(site_file))
    except FileNotFoundError:
        click.echo(f"Error: Site file not found: {site_file}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: Invalid site file: {e}", err=True)
        sys.exit(1)

    emit(config.render(), output_format, output)


@cli.command()
@click.argument("site_file", type=click.Path(exists=True, dir_okay=False))
def validate(site_file: str) -> None:
    """Validate a site file without writing a configuration.

    SITE_FILE is the path to a YAML or JSON site description.

    Examples:

        \b
        keagen validate site.yaml
    """
    try:
        config = build_config(load_site(site_file))
    except FileNotFoundError:
        click.echo(f"Error: Site file not found: {site_file}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: Invalid site file: {e}", err=True)
        sys.exit(1)

    result = config.render()
    if result.diagnostic is not None:
        click.echo(f"Error: incomplete configuration ({result.diagnostic})", err=True)
        sys.exit(EXIT_INCOMPLETE)

    dhcp4 = config.dhcp4
    pool_count = sum(len(cfg.pools) for cfg in dhcp4.subnets.configs.values())
    click.echo("Configuration is valid!")
    click.echo(f"  - Interfaces: {len(dhcp4.interfaces.interfaces)}")
    click.echo(f"  - Subnets: {len(dhcp4.subnets)}")
    click.echo(f"  - Pools: {pool_count}")
    click.echo(f"  - Options: {len(dhcp4.options)}")


@cli.command()
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["json", "yaml"]), default="yaml", show_default=True,
    help="Output format",
)
def schema(output_format: str) -> None:
    """Print the JSON Schema of site files.

    Examples:

        \b
        keagen schema
        keagen schema --format json > site.schema.json
    """
    site_schema = SiteConfig.model_json_schema()
    site_schema["title"] = "Kea DHCPv4 Site Schema"
    click.echo(dump_document(site_schema, output_format), nl=False)


def main() -> None:
    """Main entry point for the CLI."""
    _load_env_files()
    cli()


if __name__ == "__main__":
    main()
