# SPDX-License-Identifier: Apache-2.0
"""Click CLI entry point. Install with: pip install . then ceremony --help."""
import base64
import json
import secrets
from pathlib import Path

import click

from ceremony.backends import BACKENDS, get_backend

from .client import CeremonyClient
from .exceptions import APIError
from .participant import Participant


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, sort_keys=True))


def _client(ctx) -> CeremonyClient:
    return CeremonyClient(ctx.obj["api_url"])


@click.group()
@click.option("--api-url", default="http://localhost:8000", envvar="CEREMONY_API_URL", help="API base URL")
@click.pass_context
def cli(ctx, api_url):
    """Ceremony coordinator: serve a session or act as participant/operator."""
    ctx.ensure_object(dict)
    ctx.obj["api_url"] = api_url


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.option("--participants", "participant_count", type=int, default=None, help="Override CEREMONY_PARTICIPANT_COUNT")
@click.option("--log-level", default=None, help="Override CEREMONY_LOG_LEVEL")
def serve(host, port, participant_count, log_level):
    """Start the coordinator with a fresh in-memory session."""
    import uvicorn

    from ceremony.config import Settings, configure_logging
    from ceremony.main import create_app

    overrides = {}
    if participant_count is not None:
        overrides["participant_count"] = participant_count
    if log_level is not None:
        overrides["log_level"] = log_level
    settings = Settings(**overrides)
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.log_level.lower())


@cli.command()
@click.pass_context
def parameters(ctx):
    """Print the session seed (base64)."""
    seed = _client(ctx).parameters()
    click.echo(base64.b64encode(seed).decode("ascii"))


@cli.command()
@click.argument("name")
@click.pass_context
def register(ctx, name):
    """Register NAME and print the assigned participant id."""
    click.echo(_client(ctx).register(name))


@cli.command()
@click.option("--participant-id", required=True, type=int)
@click.option("--key-share-file", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--cipher-file", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def submit(ctx, participant_id, key_share_file, cipher_file):
    """Submit a key share and ciphertext read from binary files."""
    _echo_json(_client(ctx).submit(participant_id, key_share_file.read_bytes(), cipher_file.read_bytes()))


@cli.command()
@click.pass_context
def run(ctx):
    """Trigger aggregation and evaluation (operator)."""
    _echo_json(_client(ctx).run())


@cli.command()
@click.pass_context
def status(ctx):
    """Show session state and submission progress."""
    _echo_json(_client(ctx).status())


@cli.command()
@click.pass_context
def result(ctx):
    """Print the evaluation result (base64)."""
    click.echo(base64.b64encode(_client(ctx).result()).decode("ascii"))


@cli.command()
@click.argument("names", nargs=-1)
@click.pass_context
def demo(ctx, names):
    """Run a whole session against the server with random scores per participant."""
    client = _client(ctx)
    info = client.status()
    if info["backend"] not in BACKENDS:
        raise click.ClickException(f"server uses backend {info['backend']}, not available locally")
    backend = get_backend(info["backend"])
    names = list(names) or ["Barry", "Justin", "Brian"]
    if len(names) != info["required"]:
        raise click.ClickException(f"server expects {info['required']} participants, got {len(names)} names")

    users = [Participant(name, backend) for name in names]
    for user in users:
        user.fetch_seed(client).generate_client_key()
    for user in users:
        user.register(client)
    expected = [0] * backend.lanes
    for user in users:
        scores = [secrets.randbelow(256) for _ in range(backend.lanes)]
        expected = [e + s for e, s in zip(expected, scores)]
        user.assign_values(scores).generate_key_share(len(users)).encrypt().submit(client)
        click.echo(f"{user.name} (id {user.participant_id}) submitted scores {scores}")
    try:
        client.run()
    except APIError as exc:
        raise click.ClickException(str(exc)) from exc
    computed = backend.decode_result(client.result())
    click.echo(f"expected {expected}")
    click.echo(f"computed {computed}")


def main():
    """Entry point for console_scripts."""
    cli(obj={})


if __name__ == "__main__":
    main()
