"""JVMChaos CLI - validate JVM chaos experiments before they run."""

import json
import sys
from typing import Dict, List, Optional, Tuple

import click

from jvmchaos.config.loader import document_name, load_chaos_documents
from jvmchaos.config.validator import ValidationError, validate_chaos
from jvmchaos.rules.catalog import get_catalog
from jvmchaos.rules.types import JVMChaosTarget, ParameterRule
from jvmchaos.validation.validator import validate_parameters


def _parse_pairs(ctx, param, values: Tuple[str, ...]) -> Dict[str, str]:
    """Turn repeated ``key=value`` options into a dictionary."""
    result: Dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got '{item}'")
        result[key] = value
    return result


def _describe_rules(rules: Tuple[ParameterRule, ...]) -> str:
    if not rules:
        return "-"
    parts = []
    for rule in rules:
        attrs = [rule.type.value]
        if rule.required:
            attrs.append("required")
        parts.append(f"{rule.name} ({', '.join(attrs)})")
    return ", ".join(parts)


@click.group()
@click.version_option(package_name="jvmchaos")
def main():
    """JVMChaos - parameter validation for JVM chaos experiments.

    Checks that the flags and matchers of a JVMChaos experiment are
    well-formed for its target and action.
    """
    pass


@main.command()
@click.argument("chaos_path", type=click.Path(exists=True))
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
def validate(chaos_path: str, json_output: bool):
    """Validate JVMChaos documents.

    CHAOS_PATH is a YAML file or a directory of YAML files. Documents of
    other kinds are skipped.
    """
    try:
        loaded = load_chaos_documents(chaos_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error loading {chaos_path}: {e}", err=True)
        sys.exit(1)

    results: List[Dict] = []
    for entry in loaded["experiments"]:
        document = entry["spec"]
        result = {
            "file": entry["file"],
            "name": document_name(document),
            "valid": True,
            "errors": [],
        }
        try:
            validate_chaos(document)
        except ValidationError as e:
            result["valid"] = False
            result["errors"] = e.errors or [str(e)]
        results.append(result)

    all_valid = all(r["valid"] for r in results)

    if json_output:
        click.echo(json.dumps({"valid": all_valid, "results": results}, indent=2))
    else:
        if loaded["skipped"]:
            click.echo(f"Skipped {len(loaded['skipped'])} document(s) of other kinds")
        for result in results:
            if result["valid"]:
                click.echo(f"{result['name']}: OK")
                continue
            click.echo(f"{result['name']}: INVALID ({result['file']})")
            for error in result["errors"]:
                click.echo(f"  - {error}")

    if not all_valid:
        sys.exit(1)


@main.command()
@click.option("--target", "-t", required=True, help="JVM chaos target, e.g. http")
@click.option("--action", "-a", required=True, help="JVM chaos action, e.g. delay")
@click.option(
    "--flag",
    "-f",
    "flags",
    multiple=True,
    callback=_parse_pairs,
    help="Flag parameter as key=value (repeatable)",
)
@click.option(
    "--matcher",
    "-m",
    "matchers",
    multiple=True,
    callback=_parse_pairs,
    help="Matcher parameter as key=value (repeatable)",
)
@click.option("--json", "json_output", is_flag=True, help="Output violations as JSON")
def check(
    target: str,
    action: str,
    flags: Dict[str, str],
    matchers: Dict[str, str],
    json_output: bool,
):
    """Check ad-hoc flags and matchers for a target and action."""
    violations = validate_parameters(target, action, flags, matchers)

    if json_output:
        click.echo(json.dumps([v.to_dict() for v in violations], indent=2))
    elif not violations:
        click.echo("OK")
    else:
        for violation in violations:
            click.echo(f"  - {violation}")

    if violations:
        sys.exit(1)


@main.command()
@click.option(
    "--target",
    "-t",
    type=click.Choice([t.value for t in JVMChaosTarget]),
    default=None,
    help="Only show this target",
)
@click.option("--json", "json_output", is_flag=True, help="Output catalog as JSON")
def catalog(target: Optional[str], json_output: bool):
    """List supported targets, actions and their parameter rules."""
    rule_catalog = get_catalog()
    data = rule_catalog.to_dict()
    if target:
        data = {target: data[target]}

    if json_output:
        click.echo(json.dumps(data, indent=2))
        return

    for target_name in data:
        click.echo(target_name)
        actions, _ = rule_catalog.lookup_target(target_name)
        for action, rules in actions.items():
            click.echo(f"  {action.value}")
            click.echo(f"    flags:    {_describe_rules(rules.flags)}")
            click.echo(f"    matchers: {_describe_rules(rules.matchers)}")


if __name__ == "__main__":
    main()
