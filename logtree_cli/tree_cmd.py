"""Tree commands: build, verify, path."""
import functools
import logging
import sys
import time

import click

from logtree.anchor import anchor_root
from logtree.core.constants import DIGEST_ALGORITHM, SUPPORTED_ALGORITHMS
from logtree.core.digest import parse_root, to_hex
from logtree.core.errors import InputUnavailable, LogTreeError
from logtree.core.receipt import emit_receipt
from logtree.tree import LogTree

from .output import error_box, print_json, success_box

logger = logging.getLogger("logtree.cli")

algorithm_option = click.option(
    '--algorithm', default=DIGEST_ALGORITHM, show_default=True,
    type=click.Choice(SUPPORTED_ALGORITHMS), help='Digest algorithm')
trace_option = click.option(
    '--trace', is_flag=True, help='Emit JSON receipts for each level and the hash path')
anchor_option = click.option(
    '--anchor', is_flag=True, help='Emit an anchor receipt for the root')


def _load_tree(file: str, algorithm: str, trace: bool, anchor: bool,
               trusted_root: bytes | None = None) -> LogTree:
    logger.info("Building tree from %s with %s", file, algorithm)
    return LogTree.from_file(
        file,
        trusted_root=trusted_root,
        algorithm=algorithm,
        trace=emit_receipt if trace else None,
        sign=functools.partial(anchor_root, algorithm=algorithm) if anchor else None,
    )


def _fail(title: str, e: LogTreeError) -> None:
    logger.debug("%s", title, exc_info=True)
    fix = "Check the file path" if isinstance(e, InputUnavailable) else None
    error_box(title, str(e), fix)
    sys.exit(2)


@click.command()
@click.argument('file')
@algorithm_option
@trace_option
@anchor_option
def build(file: str, algorithm: str, trace: bool, anchor: bool):
    """Build the tree over FILE and print its root."""
    t0 = time.perf_counter()
    try:
        tree = _load_tree(file, algorithm, trace, anchor)
    except LogTreeError as e:
        _fail("Build: ERROR", e)

    elapsed_ms = int((time.perf_counter() - t0) * 1000)
    success_box("Log Tree", [
        ("Leaves", str(tree.leaf_count)),
        ("Depth", str(tree.depth)),
        ("Algorithm", algorithm),
        ("Root", to_hex(tree.root_digest)),
        ("Duration", f"{elapsed_ms}ms"),
    ], f"logtree verify {file} ENTRY --root {to_hex(tree.root_digest)}")


@click.command()
@click.argument('file')
@click.argument('entry')
@click.option('--root', 'root_hex', help='Trusted root digest (hex); defaults to the computed root')
@algorithm_option
@trace_option
@anchor_option
def verify(file: str, entry: str, root_hex: str | None, algorithm: str, trace: bool, anchor: bool):
    """Verify that ENTRY is a line of FILE under the trusted root."""
    t0 = time.perf_counter()
    try:
        trusted_root = parse_root(root_hex) if root_hex is not None else None
        tree = _load_tree(file, algorithm, trace, anchor, trusted_root)
    except LogTreeError as e:
        _fail("Verify: ERROR", e)

    valid = tree.is_valid_log_entry(entry)
    elapsed_ms = int((time.perf_counter() - t0) * 1000)

    if valid:
        success_box("Verify: VALID", [
            ("Entry", entry),
            ("Root", to_hex(tree.trusted_root)),
            ("Path length", str(tree.depth + 1)),
            ("Duration", f"{elapsed_ms}ms"),
        ])
        sys.exit(0)

    error_box("Verify: INVALID", "Log entry or logfile is not valid")
    sys.exit(1)


@click.command()
@click.argument('file')
@click.argument('entry')
@algorithm_option
def path(file: str, entry: str, algorithm: str):
    """Print the hash chain from ENTRY's leaf up to the root."""
    try:
        tree = _load_tree(file, algorithm, trace=False, anchor=False)
    except LogTreeError as e:
        _fail("Path: ERROR", e)

    chain = tree.hash_path(entry)
    if not chain:
        error_box("Path: NOT FOUND", "Such log entry does not exist in the file")
        sys.exit(1)

    print_json({
        "entry": entry,
        "algorithm": algorithm,
        "hash_path": [to_hex(h) for h in chain],
        "root": to_hex(tree.root_digest),
    })
