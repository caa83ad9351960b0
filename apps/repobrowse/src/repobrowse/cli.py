"""CLI for browsing GitHub repositories."""

import logging
import sys

import click
from dotenv import load_dotenv

from repofs import FilesystemError, RepositoryReference, create_adapter

logger = logging.getLogger(__name__)


def setup_logging(verbose: int) -> None:
    """Setup logging."""
    level = logging.DEBUG if verbose >= 2 else logging.INFO if verbose == 1 else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def parse_repository(ctx: click.Context, param: click.Parameter, value: str) -> RepositoryReference:
    try:
        return RepositoryReference.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


def fail(error: FilesystemError) -> None:
    logger.debug("Command failed", exc_info=error)
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(1)


# ============ CLI Group ============

@click.group()
@click.argument("repository", callback=parse_repository)
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub token")
@click.option("--use-gh-cli", is_flag=True, help="Use gh cli credentials")
@click.option("--retries", "-r", type=int, default=3, help="Retry attempts")
@click.option("-v", "--verbose", count=True, help="Verbosity (-v, -vv)")
@click.pass_context
def cli(
    ctx: click.Context,
    repository: RepositoryReference,
    token: str | None,
    use_gh_cli: bool,
    retries: int,
    verbose: int,
) -> None:
    """Browse REPOSITORY (owner/repo[@ref]) as a read-only filesystem."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["fs"] = create_adapter(
        repository.owner,
        repository.repository,
        repository.reference,
        token=token,
        use_gh_cli=use_gh_cli,
        max_retries=retries,
    )


# ============ Commands ============

@cli.command()
@click.argument("path", default="")
@click.option("-R", "--recursive", is_flag=True, help="List the whole subtree")
@click.pass_context
def ls(ctx, path, recursive):
    """List directory contents."""
    fs = ctx.obj["fs"]
    try:
        for entry in fs.list_contents(path, deep=recursive):
            click.echo(entry.path + ("/" if entry.is_dir else ""))
    except FilesystemError as e:
        fail(e)


@cli.command()
@click.argument("path")
@click.pass_context
def cat(ctx, path):
    """Print file contents."""
    fs = ctx.obj["fs"]
    try:
        data = fs.read(path)
    except FilesystemError as e:
        fail(e)
    click.get_binary_stream("stdout").write(data)


@cli.command()
@click.argument("path")
@click.pass_context
def stat(ctx, path):
    """Show file metadata as JSON."""
    fs = ctx.obj["fs"]
    try:
        entry = fs.file_size(path)
    except FilesystemError as e:
        fail(e)
    click.echo(entry.model_dump_json(indent=2))


@cli.command()
@click.argument("path")
@click.pass_context
def exists(ctx, path):
    """Print whether PATH is a file, a directory or missing."""
    fs = ctx.obj["fs"]
    try:
        if fs.file_exists(path):
            click.echo("file")
        elif fs.directory_exists(path):
            click.echo("directory")
        else:
            click.echo("missing")
            raise SystemExit(1)
    except FilesystemError as e:
        fail(e)


def main() -> None:
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
