"""Evidence fingerprint commands."""

from pathlib import Path

import click
from classfund.domain.fingerprints import EvidenceFingerprintStore, fingerprint_evidence


@click.group("evidence")
def evidence_group():
    """Fingerprint payment evidence and check it for reuse."""
    pass


@evidence_group.command("hash")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
def hash_evidence(file_path: str):
    """Print the SHA-256 fingerprint of an evidence file."""
    click.echo(fingerprint_evidence(Path(file_path).read_bytes()))


@evidence_group.command("check")
@click.argument("file_path", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--fingerprint", help="Check a precomputed fingerprint instead of a file")
@click.pass_context
def check_evidence(ctx, file_path: str | None, fingerprint: str | None):
    """Check whether evidence has already been used.

    Exits with status 1 when the evidence is taken, so it can be used as a
    pre-upload check in scripts.
    """
    if bool(file_path) == bool(fingerprint):
        click.echo("Error: Provide either an evidence file or --fingerprint.", err=True)
        ctx.exit(1)

    if file_path:
        fingerprint = fingerprint_evidence(Path(file_path).read_bytes())

    store = EvidenceFingerprintStore(ctx.obj["db"])
    claimed_by = store.is_claimed(fingerprint)
    if claimed_by is None:
        click.echo(f"Evidence {fingerprint} has not been used.")
        return

    click.echo(f"Evidence already used by {claimed_by}.")
    ctx.exit(1)


def register_commands(cli):
    """Register evidence commands with main CLI."""
    cli.add_command(evidence_group)
