"""
Entry point for running LogTree as a module.

Usage:
    python -m logtree [command] [options]

Example:
    python -m logtree build app.log
    python -m logtree verify app.log "2024-01-01 service started"
"""

from logtree_cli.main import cli

if __name__ == "__main__":
    cli()
