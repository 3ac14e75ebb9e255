"""documinty CLI — tag files in a codebase with lightweight documentation.

Commands:
    documinty init [-c NAME]                  create .documinty/ + config.yml
    documinty feat NAME                       create a feature
    documinty features                        list features
    documinty doc FILE -f FEATURE -n NODE     tag FILE under FEATURE
    documinty show FILE [-f FEATURE]          show every tag on FILE
    documinty untag FILE -f FEATURE           remove FILE's tags from FEATURE
    documinty show-feature FEATURE            list files under FEATURE
    documinty involved-f FEATURE              files under FEATURE grouped by directory
    documinty search-f QUERY                  features whose name contains QUERY
    documinty methods FILE -f F -a add|remove edit a tag's method list
    documinty describe FILE [-f FEATURE]      show only descriptions
    documinty update-description FILE -f F    replace a tag's description
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import click

from documinty.config import load_config, start_dir
from documinty.display import basename, group_by_directory, parse_methods, truncate
from documinty.errors import DocumintyError, FeatureExistsError
from documinty.models import Entry
from documinty.store import Store

LABEL_COLOR = "cyan"
VALUE_COLOR = "magenta"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_store() -> Store:
    """One Store per invocation, rooted at the nearest initialized project."""
    try:
        cfg = load_config()
    except DocumintyError as exc:
        raise click.ClickException(str(exc)) from exc
    return Store(cfg.root)


def _now() -> str:
    return datetime.now(UTC).isoformat(timespec="seconds")


def _label(label: str, value: str) -> str:
    return click.style(label, fg=LABEL_COLOR) + ": " + click.style(value, fg=VALUE_COLOR)


def _filter_by_feature(entries: list[Entry], feature: str | None) -> list[Entry]:
    if not feature:
        return entries
    return [e for e in entries if e.feature == feature]


def _echo_entry(e: Entry) -> None:
    click.echo(_label("File📄", e.path))
    click.echo(_label("Node type⚙️", e.node))
    click.echo(_label("Feature🏷️", e.feature))
    if e.description:
        click.echo(_label("Description📝", truncate(e.description)))
    if e.methods:
        click.echo(_label("Methods🛠️", ", ".join(e.methods)))
    click.echo(_label("Tagged at⏰", e.timestamp))
    click.echo("-" * 40)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="documinty")
@click.option("--verbose", "-v", is_flag=True, help="Log store activity to stderr")
def cli(verbose: bool) -> None:
    """documinty — document a codebase one file at a time."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(message)s",
    )


# ---------------------------------------------------------------------------
# documinty init
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--codebase", "-c", default=None, help="Custom codebase name (default: directory name)")
@click.option("--dir", "root", default=None, help="Project root (default: $DOCUMINTY_ROOT or cwd)")
def init(codebase: str | None, root: str | None) -> None:
    """Initialize documinty in your project."""
    store = Store(start_dir(root).resolve())
    try:
        cfg = store.init(codebase_name=codebase)
    except OSError as exc:
        raise click.ClickException(f"Could not initialize: {exc}") from exc
    click.secho(f"✅ Initialized documinty at {cfg.base_dir}", fg="green")


# ---------------------------------------------------------------------------
# Features
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("name")
def feat(name: str) -> None:
    """Create a new feature for tagging."""
    store = _load_store()
    try:
        store.add_feature(name)
    except FeatureExistsError as exc:
        click.secho(f"⚠️ {exc}", fg="red")
        return
    click.secho(f"✅ Created feature '{name}'", fg="green")


@cli.command()
def features() -> None:
    """List all defined features."""
    names = _load_store().list_features()
    if not names:
        click.secho("No features defined.", fg="yellow")
        return
    click.secho("Defined features:", fg="cyan")
    for name in names:
        click.secho(f"• {name}", fg="green")


@cli.command("search-f")
@click.argument("query")
def search_f(query: str) -> None:
    """List all features whose name contains QUERY."""
    matches = _load_store().search_features(query)
    if not matches:
        raise click.ClickException(f"No features match '{query}'")
    click.secho("Matching features:", fg="cyan")
    for name in matches:
        click.secho(f"• {name}", fg="green")


# ---------------------------------------------------------------------------
# Tagging
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("path")
@click.option("--feature", "-f", required=True, help="Feature name to group under")
@click.option("--node", "-n", required=True, help="Node/type label (model, controller, …)")
@click.option("--description", "-d", default=None, help="Description (prompted if omitted)")
@click.option("--methods", "-m", "methods_input", default=None, help="Comma-separated methods (prompted if omitted)")
def doc(path: str, feature: str, node: str, description: str | None, methods_input: str | None) -> None:
    """Tag FILE under an existing feature."""
    store = _load_store()
    if not store.repo.exists(feature):
        raise click.ClickException(f"Feature '{feature}' does not exist")

    if description is None:
        description = click.prompt("Enter a brief description for this node⚙️", default="", show_default=False)
    if methods_input is None:
        methods_input = click.prompt(
            "Enter comma-separated methods for this node (or leave blank if none)🛠️",
            default="",
            show_default=False,
        )

    try:
        entry = store.add_entry(
            path=path,
            node=node,
            feature=feature,
            methods=parse_methods(methods_input),
            timestamp=_now(),
            description=description,
        )
    except DocumintyError as exc:
        raise click.ClickException(str(exc)) from exc
    click.secho(f"✅ Documented {entry.path} as {entry.node} under '{entry.feature}'", fg="green")


@cli.command()
@click.argument("path")
@click.option("--feature", "-f", required=True, help="Feature name")
def untag(path: str, feature: str) -> None:
    """Remove FILE's tag from an existing feature."""
    try:
        removed = _load_store().remove_entry(path=path, feature=feature)
    except DocumintyError as exc:
        raise click.ClickException(str(exc)) from exc
    for e in removed:
        click.secho(f"🗑️  Removed {e.path} ({e.node}) from '{feature}'", fg="green")


@cli.command()
@click.argument("path")
@click.option("--feature", "-f", required=True, help="Feature name")
@click.option("--action", "-a", required=True, type=click.Choice(["add", "remove"]), help="Add or remove methods")
@click.option("--methods", "-m", "methods_input", default=None, help="Comma-separated methods (prompted if omitted)")
def methods(path: str, feature: str, action: str, methods_input: str | None) -> None:
    """Add or remove methods on a tagged file."""
    store = _load_store()
    if methods_input is None:
        methods_input = click.prompt(f"Enter comma-separated methods to {action}🛠️", default="", show_default=False)

    try:
        entry = store.edit_methods(
            path=path,
            feature=feature,
            new_methods=parse_methods(methods_input),
            action=action,
        )
    except DocumintyError as exc:
        raise click.ClickException(str(exc)) from exc
    click.secho(
        f"✅ Updated methods for {entry.path} under '{entry.feature}': {', '.join(entry.methods)}",
        fg="green",
    )


@cli.command("update-description")
@click.argument("path")
@click.option("--feature", "-f", required=True, help="Feature name")
@click.option("--description", "-d", default=None, help="New description (prompted if omitted)")
def update_description(path: str, feature: str, description: str | None) -> None:
    """Replace the description for FILE under a feature."""
    store = _load_store()
    if description is None:
        description = click.prompt(
            f"Enter a new description for '{path}' under '{feature}'",
            default="",
            show_default=False,
        )

    try:
        entry = store.update_description(path=path, feature=feature, new_description=description)
    except DocumintyError as exc:
        raise click.ClickException(str(exc)) from exc
    click.secho(f"✅ Description updated for {entry.path} under '{entry.feature}':", fg="green")
    click.secho(f"   {entry.description}", fg="green")


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("path")
@click.option("--feature", "-f", default=None, help="Only show documentation under this feature")
def show(path: str, feature: str | None) -> None:
    """Display documentation for FILE (node, feature, methods)."""
    entries = _filter_by_feature(_load_store().entries_for(path), feature)
    if not entries:
        suffix = f" under feature '{feature}'" if feature else ""
        raise click.ClickException(f"No documentation found for '{path}'{suffix}")
    for e in entries:
        _echo_entry(e)


@cli.command()
@click.argument("path")
@click.option("--feature", "-f", default=None, help="Only show the description under this feature")
def describe(path: str, feature: str | None) -> None:
    """Display only the description for FILE."""
    entries = _filter_by_feature(_load_store().entries_for(path), feature)
    if not entries:
        suffix = f" under feature '{feature}'" if feature else ""
        raise click.ClickException(f"No description found for '{path}'{suffix}")

    for e in entries:
        text = e.description.strip()
        if not text:
            click.secho(f"ℹ️  No description provided for '{path}' under '{e.feature}'", fg="yellow")
            continue
        if feature:
            click.secho(f"📋 {path}", fg="cyan")
        else:
            click.echo(click.style(f"📋 {path}", fg="cyan") + ": " + click.style(f"(FEATURE: {e.feature})", fg="magenta"))
        click.secho(f"--→ {text}", fg="green")


@cli.command("show-feature")
@click.argument("feature")
def show_feature(feature: str) -> None:
    """List all files documented under FEATURE."""
    try:
        entries = _load_store().entries_for_feature(feature)
    except DocumintyError as exc:
        raise click.ClickException(str(exc)) from exc

    if not entries:
        click.secho(f"No entries under '{feature}'.", fg="red")
        return
    click.echo(f"Entries for '{feature}':")
    for e in entries:
        click.echo(
            click.style(f"📄{e.path} | ", fg=LABEL_COLOR)
            + click.style(f"({e.node}) – {e.description}", fg=VALUE_COLOR)
        )


@cli.command("involved-f")
@click.argument("feature")
def involved_f(feature: str) -> None:
    """Display files under FEATURE grouped by directory."""
    try:
        entries = _load_store().entries_for_feature(feature)
    except DocumintyError as exc:
        raise click.ClickException(str(exc)) from exc

    if not entries:
        click.secho(f"No entries under '{feature}'.", fg="yellow")
        return

    click.secho(f"🔖 {feature}", fg="cyan")
    for directory, group in group_by_directory(entries).items():
        click.secho(f"📁 {directory}", fg="green")
        for e in group:
            click.secho(f"    📄 {basename(e.path)}", fg="green")


def main() -> None:
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
