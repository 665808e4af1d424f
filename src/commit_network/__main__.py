"""CLI entry point for commit-network."""

import asyncio
import logging
import sys

import click

from commit_network import render_network
from commit_network.config import DEFAULT_FETCH, RenderConfig
from commit_network.github import NetworkFetchError, get_network_graph
from commit_network.parsers import parse
from commit_network.types import OutputFormat

logger = logging.getLogger("commit_network.cli")


def _setup_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _split_repo(value: str) -> tuple[str, str]:
    owner, sep, repo = value.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise click.BadParameter(f"expected OWNER/REPO, got '{value}'", param_hint="--repo")
    return owner, repo


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--repo", "-r", "repo", type=str, default=None, help="Fetch OWNER/REPO from GitHub instead of reading JSON")
@click.option("--max-commits", "-n", "max_commits", type=int, default=DEFAULT_FETCH.max_commits, help="Commit window size")
@click.option("--token", "token", type=str, default=None, envvar="GITHUB_TOKEN", help="GitHub access token")
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.default().value,
    help="Output format (text or svg)",
)
@click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII instead of Unicode")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--log-level", "log_level", type=str, default="WARNING", help="Logging level (DEBUG, INFO, WARNING)")
def main(
    input: str | None,
    repo: str | None,
    max_commits: int,
    token: str | None,
    fmt: str,
    use_ascii: bool,
    output: str | None,
    log_level: str,
) -> None:
    """Lay out a GitHub commit network and draw it as text or SVG."""
    _setup_logging(log_level)

    owner_repo = _split_repo(repo) if repo else None

    try:
        if owner_repo:
            network = asyncio.run(get_network_graph(*owner_repo, max_commits, token))
        else:
            if input:
                with open(input) as f:
                    text = f.read()
            else:
                text = sys.stdin.read()
            network = parse(text)
    except OSError as e:
        click.echo(f"error: cannot read '{input}': {e}", err=True)
        sys.exit(1)
    except NetworkFetchError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    logger.info("Laying out %d commits across %d branches", len(network.commits), len(network.branches))
    rendered = render_network(network, OutputFormat(fmt), render_config=RenderConfig(unicode=not use_ascii))

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
