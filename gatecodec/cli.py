"""
Gate codec CLI - parse, check and convert canonical gate strings
"""
import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gatecodec import json_mapping
from gatecodec.codec import GateCodec
from gatecodec.errors import GateCodecError
from gatecodec.integrity import DocumentIntegrity
from gatecodec.layout import GATE_LAYOUT
from gatecodec.settings import get_settings, reload_settings
from gatecodec.utils import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def _fail(ctx: click.Context, exc: GateCodecError) -> None:
    console.print(
        f"[red]✗ {type(exc).__name__}: {escape(str(exc))}[/red]", soft_wrap=True
    )
    ctx.exit(1)


def _codec(ctx: click.Context) -> GateCodec:
    return ctx.obj["codec"]


# ═══════════════════════════════════════════════════════════════════
# MAIN CLI GROUP
# ═══════════════════════════════════════════════════════════════════

@click.group()
@click.version_option(version='0.1.0')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), help='YAML settings file')
@click.option('--log-level', help='Override the configured log level')
@click.pass_context
def main(ctx, config_path, log_level):
    """
    Gate codec - canonical ten-gate registry identifier strings
    """
    settings = reload_settings(config_path) if config_path else get_settings()
    setup_logging(log_level or settings.log_level, settings.log_file)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["codec"] = GateCodec.from_settings(settings)
    logger.debug("Codec ready (max_input_length=%d)", settings.max_input_length)


# ═══════════════════════════════════════════════════════════════════
# DOCUMENT COMMANDS
# ═══════════════════════════════════════════════════════════════════

@main.command()
@click.argument('text')
@click.pass_context
def parse(ctx, text):
    """Parse a canonical string and show its gates"""
    try:
        document = _codec(ctx).parse(text)
    except GateCodecError as exc:
        _fail(ctx, exc)
        return

    table = Table(title="Gates")
    table.add_column("#", style="cyan")
    table.add_column("Gate")
    table.add_column("Active")
    table.add_column("Type", style="magenta")
    table.add_column("Value", overflow="fold")

    for gate in document:
        table.add_row(
            str(gate.position),
            gate.name,
            "yes" if gate.active else "no",
            escape(gate.registry_type or ""),
            escape(gate.value or ""),
        )
    console.print(table)


@main.command()
@click.argument('text')
@click.pass_context
def check(ctx, text):
    """Validate a canonical string (exit status 1 when invalid)"""
    result = _codec(ctx).try_parse(text)
    if not result.ok:
        _fail(ctx, result.error)
        return
    active = len(result.document.active_gates())
    console.print(f"[green]✓ valid ({active} active gates)[/green]", soft_wrap=True)


@main.command('to-json')
@click.argument('text')
@click.pass_context
def to_json(ctx, text):
    """Convert a canonical string to its JSON form"""
    try:
        document = _codec(ctx).parse(text)
    except GateCodecError as exc:
        _fail(ctx, exc)
        return
    click.echo(json_mapping.dumps(document, indent=ctx.obj["settings"].json_indent))


@main.command('from-json')
@click.argument('source', type=click.File('r'))
@click.pass_context
def from_json(ctx, source):
    """Convert a JSON document (file or '-') to its canonical string"""
    codec = _codec(ctx)
    try:
        document = json_mapping.loads(source.read(), codec)
    except GateCodecError as exc:
        _fail(ctx, exc)
        return
    click.echo(codec.serialize(document))


@main.command()
@click.argument('text')
@click.pass_context
def fingerprint(ctx, text):
    """Print the SHA-256 fingerprint of a validated canonical string"""
    codec = _codec(ctx)
    try:
        document = codec.parse(text)
    except GateCodecError as exc:
        _fail(ctx, exc)
        return
    click.echo(DocumentIntegrity.compute_checksum(codec.serialize(document)))


# ═══════════════════════════════════════════════════════════════════
# REGISTRY COMMANDS
# ═══════════════════════════════════════════════════════════════════

@main.command()
@click.argument('registry_type')
@click.argument('value')
@click.option('--json', 'as_json', is_flag=True, help='Print the outcome as JSON')
@click.pass_context
def value(ctx, registry_type, value, as_json):
    """Validate a single registry value"""
    try:
        outcome = _codec(ctx).validate_value(registry_type, value)
    except GateCodecError as exc:
        _fail(ctx, exc)
        return

    if as_json:
        click.echo(json.dumps(outcome.to_dict()))
    elif outcome.ok:
        console.print(f"[green]✓ valid {escape(registry_type)}[/green]", soft_wrap=True)
    else:
        console.print(
            f"[red]✗ invalid {escape(registry_type)}: {escape(outcome.reason)}[/red]",
            soft_wrap=True,
        )
    if not outcome.ok:
        ctx.exit(1)


@main.command()
@click.pass_context
def registries(ctx):
    """List registry tags and the gates they may occupy"""
    table = Table(title="Registries")
    table.add_column("Tag", style="cyan")
    table.add_column("Gates")
    table.add_column("Description")

    for entry in _codec(ctx).registry:
        positions = ", ".join(str(p) for p in sorted(entry.positions))
        table.add_row(entry.tag, positions, entry.description)
    console.print(table)


@main.command()
def layout():
    """Show the fixed gate layout"""
    table = Table(title="Gate Layout")
    table.add_column("#", style="cyan")
    table.add_column("Name")
    table.add_column("Label")
    table.add_column("Reserved")

    for slot in GATE_LAYOUT:
        table.add_row(str(slot.position), slot.name, slot.label, "yes" if slot.reserved else "")
    console.print(table)


if __name__ == '__main__':
    main()
