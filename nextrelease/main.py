"""nextrelease entry point.

Resolves the next release of configured projects and prints a summary.
Usage: nextrelease [--config PATH] [--check] [project ...].
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from nextrelease.config import AppConfig, load_config
from nextrelease.errors import NextReleaseError
from nextrelease.github import GitHubAdapter
from nextrelease.logging import setup_logging
from nextrelease.render import render_next_release
from nextrelease.resolver import NextReleaseResolver


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="nextrelease",
        description="Show what goes into the next release of configured projects",
    )
    parser.add_argument(
        "projects",
        nargs="*",
        help="Project names from config (default: all configured projects)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def build_resolver(config: AppConfig) -> NextReleaseResolver:
    """Wire the GitHub adapter into a resolver."""
    adapter = GitHubAdapter(
        token=config.github_token_resolved,
        api_url=config.github.api_url,
        timeout=config.github.timeout,
    )
    return NextReleaseResolver(
        releases=adapter,
        branches=adapter,
        statuses=adapter,
        pull_requests=adapter,
        bot_username=config.release.bot_username,
    )


def run(config: AppConfig, names: list[str], resolver: NextReleaseResolver | None = None) -> int:
    """Resolve and print each project; return 1 if any project failed."""
    log = logging.getLogger("nextrelease.main")
    resolver = resolver or build_resolver(config)
    exit_code = 0
    for name in names:
        try:
            next_release = resolver.resolve(config.project(name))
        except NextReleaseError as e:
            print(f"{name}: {e}")
            exit_code = 1
            continue
        except Exception as e:
            log.exception("Failed to resolve next release of %s: %s", name, e)
            exit_code = 1
            continue
        print(render_next_release(next_release))
        print()
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Entry point for nextrelease."""
    args = parse_args(argv)
    config_path = args.config
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")
            logging.basicConfig(level=logging.INFO)
            logging.getLogger("nextrelease.main").warning("config.yaml not found, using config.example.yaml")

    try:
        config = load_config(config_path)
    except ValidationError as e:
        print(f"Invalid config {config_path}: {e}", file=sys.stderr)
        return 1

    if args.check:
        print("Config OK:", ", ".join(sorted(config.projects)) or "no projects")
        return 0

    setup_logging(config.logging)

    names = args.projects or list(config.projects)
    unknown = [n for n in names if n not in config.projects]
    if unknown:
        print(f"Unknown project(s): {', '.join(unknown)}", file=sys.stderr)
        return 2

    try:
        return run(config, names)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
