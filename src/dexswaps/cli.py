import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from dexswaps.adapters.receipts import load_receipt_logs
from dexswaps.core.config import DecodeConfig
from dexswaps.decoding.dispatcher import parse_swap_events
from dexswaps.decoding.registries import REGISTRY_BUILDERS, make_default_registry
from dexswaps.decoding.specs import RegistryConfigError, get_registry_protocols

console = Console()

_PROTOCOL_CHOICE = click.Choice(sorted(REGISTRY_BUILDERS))


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
def cli() -> None:
    """dexswaps — decode DEX swap events from a transaction's logs."""


@cli.command("decode")
@click.argument("receipt", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--protocol",
    "protocols",
    multiple=True,
    type=_PROTOCOL_CHOICE,
    help="Protocol family to decode; repeat to OR (default: all)",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit one JSON object per swap")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def decode_cmd(receipt: Path, protocols: tuple[str, ...], as_json: bool, log_level: str) -> None:
    """Decode swaps from a saved eth_getTransactionReceipt JSON document."""
    config = DecodeConfig(
        protocols=protocols or None,
        log_level=log_level,
        as_json=as_json,
    )
    _setup_logging(config.log_level)

    try:
        registry = make_default_registry(config.protocols)
    except RegistryConfigError as e:
        raise click.ClickException(str(e)) from e

    try:
        logs = load_receipt_logs(receipt)
    except ValueError as e:
        raise click.ClickException(f"cannot read receipt {receipt}: {e}") from e

    swaps = parse_swap_events(logs, registry)

    if config.as_json:
        for s in swaps:
            click.echo(json.dumps(s.as_dict(), separators=(",", ":")))
        return

    table = Table(title=f"{len(swaps)} swap(s) in {len(logs)} log(s)")
    table.add_column("#", justify="right")
    table.add_column("protocol")
    table.add_column("pair")
    table.add_column("direction")
    table.add_column("amount in", justify="right")
    table.add_column("amount out", justify="right")
    for i, s in enumerate(swaps):
        table.add_row(
            str(i),
            s.protocol,
            s.pair_id,
            "0→1" if s.token0_to_1 else "1→0",
            f"{s.amount_in:,}",
            f"{s.amount_out:,}",
        )
    console.print(table)


@cli.command("signatures")
@click.option("--protocol", "protocols", multiple=True, type=_PROTOCOL_CHOICE)
def signatures_cmd(protocols: tuple[str, ...]) -> None:
    """List the registered swap event signatures."""
    registry = make_default_registry(protocols or None)
    table = Table(title=f"{len(registry)} signature(s), {len(get_registry_protocols(registry))} protocol(s)")
    table.add_column("topic0")
    table.add_column("protocol")
    table.add_column("event")
    for topic0, s in registry.items():
        table.add_row(topic0, s.protocol, f"{s.event} (fork alias)" if s.alias else s.event)
    console.print(table)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
