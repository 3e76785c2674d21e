"""Command-line interface for fs-resources.

This module is a thin layer over the library: each command calls one
operation and maps its errors to a message on stderr and exit code 1.

Commands:
    - list: List entries below a directory
    - size: Report the content size of a file or directory tree
    - content-type: Detect the MIME type of a file
    - hash: Calculate the content hash of a file
    - create: Create a file from standard input
    - remove: Remove a file or directory tree
    - copy / move: Copy or move a resource to a path or into a directory
    - rename: Rename a resource within its directory
"""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .core.exceptions import FSResourcesError
from .filesystem import (
    UNLIMITED_DEPTH,
    content_hash,
    content_type,
    copy_as,
    copy_to,
    create,
    format_size,
    list_entries,
    move_as,
    move_to,
    remove,
    rename_to,
    size,
    size_in_bytes,
)
from .schemas import CapacityUnit, DigestAlgorithm, ListingOptions

app = typer.Typer(
    name="fs-resources",
    help="Inspect and manipulate files and directory trees.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"fs-resources {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    FS-Resources: recursive listing, sizing, hashing, copy, move and removal.
    """
    pass


PathArgument = Annotated[Path, typer.Argument(help="Path of the resource")]

ReplaceOption = Annotated[
    bool, typer.Option("--replace", help="Replace the target if it exists")
]

IntoOption = Annotated[
    bool,
    typer.Option(
        "--into", help="Treat TARGET as a directory to place the resource in"
    ),
]


def _fail(e: FSResourcesError) -> None:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(1)


@app.command("list")
def list_cmd(
    path: PathArgument,
    depth: Annotated[
        Optional[int],
        typer.Option("--depth", help="Levels to descend (default: whole tree)"),
    ] = None,
    no_hidden: Annotated[
        bool, typer.Option("--no-hidden", help="Skip entries starting with a dot")
    ] = False,
    links: Annotated[
        bool, typer.Option("--links", help="Include symbolic links")
    ] = False,
    sort: Annotated[bool, typer.Option("--sort", help="Sort entries by path")] = False,
) -> None:
    """
    List entries below a directory, parents before children.

    Examples:
        fs-resources list /data/path --depth 2 --sort
    """
    options = ListingOptions(include_hidden=not no_hidden, include_symbolic_links=links)
    try:
        entries = list_entries(
            path, UNLIMITED_DEPTH if depth is None else depth, options
        )
    except FSResourcesError as e:
        _fail(e)
        return

    if sort:
        entries = sorted(entries)
    for entry in entries:
        typer.echo(str(entry))


@app.command("size")
def size_cmd(
    path: PathArgument,
    unit: Annotated[
        Optional[str],
        typer.Option(
            "--unit",
            help="Report in a unit: BYTE, KILOBYTE, MEGABYTE, GIGABYTE, "
            "TERABYTE or PETABYTE",
        ),
    ] = None,
    scale: Annotated[
        int, typer.Option("--scale", help="Decimal digits when --unit is given")
    ] = 2,
) -> None:
    """
    Report the content size of a file or directory tree.

    Examples:
        fs-resources size /data/path
        fs-resources size /data/path --unit MEGABYTE --scale 1
    """
    try:
        if unit is None:
            total_bytes = size_in_bytes(path)
            typer.echo(f"Total size: {total_bytes:,} bytes")
            typer.echo(f"Human readable: {format_size(total_bytes)}")
            return

        try:
            capacity_unit = CapacityUnit[unit.upper()]
        except KeyError:
            typer.echo(f"Error: unknown unit '{unit}'", err=True)
            raise typer.Exit(2)

        typer.echo(f"{size(path, capacity_unit, scale)} {capacity_unit.name}")
    except FSResourcesError as e:
        _fail(e)


@app.command("content-type")
def content_type_cmd(path: PathArgument) -> None:
    """Detect the MIME type of a file."""
    try:
        mime_type = content_type(path)
    except FSResourcesError as e:
        _fail(e)
        return

    typer.echo(mime_type or "unknown")


@app.command("hash")
def hash_cmd(
    path: PathArgument,
    algorithm: Annotated[
        DigestAlgorithm,
        typer.Option("--algorithm", "-a", help="Digest algorithm"),
    ] = DigestAlgorithm.SHA_256,
) -> None:
    """Calculate the content hash of a file."""
    try:
        digest = content_hash(path, algorithm)
    except FSResourcesError as e:
        _fail(e)
        return

    if digest is None:
        typer.echo(f"Error: '{path}' is a directory", err=True)
        raise typer.Exit(1)
    typer.echo(f"{digest}  {path}")


@app.command("create")
def create_cmd(path: PathArgument) -> None:
    """
    Create a file from standard input.

    Examples:
        echo hello | fs-resources create /data/hello.txt
    """
    try:
        create(path, sys.stdin.buffer)
    except FSResourcesError as e:
        _fail(e)
        return

    typer.echo(f"Created {path}")


@app.command("remove")
def remove_cmd(path: PathArgument) -> None:
    """Remove a file, or a directory with everything below it."""
    try:
        remove(path)
    except FSResourcesError as e:
        _fail(e)
        return

    typer.echo(f"Removed {path}")


@app.command("copy")
def copy_cmd(
    source: PathArgument,
    target: Annotated[Path, typer.Argument(help="Target path or directory")],
    replace: ReplaceOption = False,
    into: IntoOption = False,
) -> None:
    """
    Copy a resource; directories are copied recursively.

    Examples:
        fs-resources copy /data/a /data/b
        fs-resources copy /data/a /backup --into --replace
    """
    try:
        if into:
            copied = copy_to(source, target, replace)
        else:
            copied = copy_as(source, target, replace)
    except FSResourcesError as e:
        _fail(e)
        return

    typer.echo(f"Copied {source} -> {copied}")


@app.command("move")
def move_cmd(
    source: PathArgument,
    target: Annotated[Path, typer.Argument(help="Target path or directory")],
    replace: ReplaceOption = False,
    into: IntoOption = False,
) -> None:
    """
    Move a resource; directories are copied and then removed at the source.

    Examples:
        fs-resources move /data/a /archive --into
    """
    try:
        if into:
            moved = move_to(source, target, replace)
        else:
            moved = move_as(source, target, replace)
    except FSResourcesError as e:
        _fail(e)
        return

    typer.echo(f"Moved {source} -> {moved}")


@app.command("rename")
def rename_cmd(
    path: PathArgument,
    new_name: Annotated[str, typer.Argument(help="New name within the same directory")],
) -> None:
    """Rename a resource within its directory."""
    try:
        renamed = rename_to(path, new_name)
    except FSResourcesError as e:
        _fail(e)
        return

    typer.echo(f"Renamed {path} -> {renamed}")


if __name__ == "__main__":
    app()
