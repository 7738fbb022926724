"""Click entry point: all commands."""

import sys

import click

from npmctl import __version__, log, packages
from npmctl.config import load_settings
from npmctl.errors import NpmError


@click.group()
@click.version_option(version=__version__, prog_name="npmctl")
@click.option("--config", "config_path", default=None, help="Path to npmctl.yml")
@click.option("--root", default=None, help="Project root (npm working directory)")
@click.option("--node", default=None, help="Path to the node executable")
@click.option("--npm", default=None, help="Path to npm-cli.js")
@click.option("--registry", default=None, help="npm registry URL")
@click.pass_context
def main(ctx, config_path, root, node, npm, registry):
    """Run npm in an isolated project environment."""
    ctx.ensure_object(dict)
    ctx.obj["load"] = lambda: load_settings(
        config_path, {"root": root, "node": node, "npm": npm, "registry": registry}
    )


def _run(ctx, operation, *args):
    """Load settings, run *operation*, and exit 1 on any npm or filesystem error."""
    try:
        settings = ctx.obj["load"]()
        return operation(settings, *args)
    except (NpmError, OSError) as e:
        log.error(str(e).strip() or e.__class__.__name__)
        sys.exit(1)


@main.command(name="list")
@click.pass_context
def list_cmd(ctx):
    """List installed top-level packages."""
    for pkg in sorted(_run(ctx, packages.packages), key=lambda p: p.name):
        click.echo(f"{pkg.name}@{pkg.version}")


@main.command()
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def install(ctx, names):
    """Install packages."""
    _run(ctx, packages.install_packages, *names)
    log.success(f"installed {', '.join(names)}")


@main.command()
@click.pass_context
def rebuild(ctx):
    """Rebuild installed packages."""
    _run(ctx, packages.rebuild_packages)
    log.success("rebuilt packages")


@main.command()
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def remove(ctx, names):
    """Remove packages."""
    _run(ctx, packages.remove_packages, *names)
    log.success(f"removed {', '.join(names)}")


@main.command()
@click.argument("names", nargs=-1)
@click.pass_context
def outdated(ctx, names):
    """Show packages with a newer version available."""
    latest = _run(ctx, packages.outdated_packages, *names)
    for name in sorted(latest):
        click.echo(f"{name}  {latest[name]}")


@main.command(name="cache-clean")
@click.pass_context
def cache_clean(ctx):
    """Clear the project's private npm cache."""
    _run(ctx, packages.clear_cache)
    log.success("cache cleared")


@main.command(name="remove-lock")
@click.pass_context
def remove_lock(ctx):
    """Delete package-lock.json."""
    _run(ctx, packages.remove_package_lock)
    log.success("removed package-lock.json")


if __name__ == "__main__":
    main()
