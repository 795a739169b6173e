"""Fetching repository listings from a remote Git repository."""

from __future__ import annotations

import subprocess
import tempfile
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from ..errors import FetchError
from ..logging import get_logger
from ..models import REF_PREFIX, RepoSnapshot, short_branch


class GitFetcher:
    """Resolves branches and lists files of a remote repository via the git CLI."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("git.fetch")

    def fetch(self, repo_url: str, branch: str | None = None) -> RepoSnapshot:
        """Return the file listing at the HEAD of ``branch`` (or the remote default)."""
        use_default_branch = not branch
        default_branch = self.default_branch(repo_url)
        self.logger.debug("Remote default branch for %s: %s", repo_url, default_branch)

        requested = short_branch(branch) if branch else None
        with tempfile.TemporaryDirectory(prefix="metaimport-") as tmp:
            checkout = Path(tmp) / "repo"
            clone_cmd = ["git", "clone", "--quiet", "--depth", "1", "--no-checkout"]
            if requested:
                clone_cmd.extend(["--branch", requested])
            clone_cmd.extend([repo_url, str(checkout)])
            self._run(clone_cmd, cwd=Path(tmp), action="pulling branch")
            files = tuple(self._list_files(checkout))

        self.logger.info("Fetched %d files from %s", len(files), repo_url)
        return RepoSnapshot(
            repo_url=repo_url,
            files=files,
            branch=requested or default_branch,
            default_branch=default_branch,
            used_default_branch=use_default_branch,
        )

    def default_branch(self, repo_url: str) -> Optional[str]:
        """Return the short name of the branch the remote HEAD points at."""
        output = self._run(
            ["git", "ls-remote", "--symref", repo_url, "HEAD"],
            cwd=Path.cwd(),
            capture_output=True,
            action="resolving default branch",
        )
        return parse_symref(output.splitlines())

    # ------------------------------------------------------------------
    # Helpers

    def _list_files(self, checkout: Path) -> Iterator[str]:
        output = self._run(
            ["git", "ls-tree", "-r", "-z", "--name-only", "--full-tree", "HEAD"],
            cwd=checkout,
            capture_output=True,
            action="listing files",
        )
        # -z keeps git from C-quoting paths with non-ASCII or special characters.
        for name in output.split("\0"):
            if name:
                yield name

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
        action: str,
    ) -> str:
        args = list(args)
        self.logger.debug("Running %s", " ".join(args))
        try:
            return self._runner(args, cwd=cwd, env=None, capture_output=capture_output)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise FetchError(f"{action}: {detail}") from exc
        except OSError as exc:
            raise FetchError(f"{action}: {exc}") from exc

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        env: dict[str, str] | None = None,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            env=env,
            check=True,
            text=True,
            encoding="utf-8",
            stdout=subprocess.PIPE if capture_output else None,
            stderr=subprocess.PIPE,
        )
        if capture_output:
            return completed.stdout
        return ""


def parse_symref(lines: Iterable[str]) -> Optional[str]:
    """Extract the default branch from ``git ls-remote --symref`` output."""
    for line in lines:
        if not line.startswith("ref:"):
            continue
        target, _, name = line[len("ref:"):].strip().partition("\t")
        if name.strip() == "HEAD" and target.startswith(REF_PREFIX):
            return short_branch(target)
    return None


__all__ = ["GitFetcher", "parse_symref"]
