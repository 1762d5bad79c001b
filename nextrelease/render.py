"""Plain-text summary of a next release."""

from nextrelease.models import NextRelease, PullRequest


def _pull_request_line(pr: PullRequest) -> str:
    line = f"  #{pr.number} {pr.title} (@{pr.user.login})"
    if pr.labels:
        line += " [" + ", ".join(pr.labels) + "]"
    return line


def render_next_release(next_release: NextRelease) -> str:
    """Render project header, previous tag, branch status and pull requests."""
    project = next_release.project
    status = next_release.combined_status
    labels = next_release.labels()
    lines: list[str] = [
        f"{project.name} ({project.repository.full_name})",
        f"Previous release: {next_release.current_tag}",
        f"Branch status: {status.state} ({status.sha})",
        f"Labels: {', '.join(labels) if labels else '-'}",
        f"Pull requests ({len(next_release.pull_requests)}):",
    ]
    lines.extend(_pull_request_line(pr) for pr in next_release.pull_requests)
    if not next_release.is_green():
        lines.append(f"WARNING: stable branch status is {status.state}, do not release yet")
    return "\n".join(lines)
