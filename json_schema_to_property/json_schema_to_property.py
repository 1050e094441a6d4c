import json

import click
from jsonpointer import JsonPointerException, resolve_pointer

from .pipeline import DiagnosticCollector, MapperConfig, PropertyMapper, SchemaShapeError, property_to_dict


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--pointer",
    "-p",
    default="",
    type=str,
    help="JSON pointer to the schema inside the document, e.g. /definitions/Pet",
)
@click.option(
    "--definitions",
    "-d",
    is_flag=True,
    default=False,
    help="Map every entry of the document's definitions object",
)
@click.option(
    "--array-quirk",
    is_flag=True,
    default=False,
    help="Read legacy objects with a 'type': 'array' property as arrays",
)
@click.option("--fail-on-warning", is_flag=True, default=False, help="Exit with an error if any warning was reported")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def json_schema_to_property(config, pointer, definitions, array_quirk, fail_on_warning, path, output):
    with open(path) as f:
        document = json.load(f)

    if config is not None:
        with open(config) as f:
            config = MapperConfig.from_dict(json.load(f))
    else:
        config = MapperConfig()

    # CLI flag overrides config file if set
    if array_quirk:
        config.enable_array_quirk = True

    try:
        schema = resolve_pointer(document, pointer)
    except JsonPointerException as e:
        raise click.ClickException(f"Invalid pointer {pointer!r}: {e}") from e

    if definitions and not isinstance(schema, dict):
        raise click.ClickException("--definitions needs a JSON object document")

    collector = DiagnosticCollector(log=None)
    mapper = PropertyMapper(config, collector)

    try:
        if definitions:
            props = mapper.map_definitions(schema)
            out = {name: property_to_dict(prop) for name, prop in props.items()}
        else:
            prop = mapper.map(schema, "#" + pointer)
            out = property_to_dict(prop) if prop is not None else None
    except SchemaShapeError as e:
        _echo_diagnostics(collector)
        raise click.ClickException(f"Malformed schema: {e}") from e

    _echo_diagnostics(collector)

    text = json.dumps(out, indent=2)
    if output is None:
        click.echo(text)
    else:
        with open(output, "w") as f:
            f.write(text + "\n")

    if fail_on_warning and collector.diagnostics:
        raise click.ClickException(f"{len(collector)} warning(s) reported")


def _echo_diagnostics(collector):
    for diagnostic in collector.diagnostics:
        click.echo(f"warning: {diagnostic}", err=True)
