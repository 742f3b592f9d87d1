# topmark:header:start
#
#   project      : ModDoc
#   file         : runner.py
#   file_relpath : src/moddoc/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sequential driver: turn mapping entries into merge jobs and run them.

Jobs run strictly in mapping-file order (entry order, then target order).
The first failure stops the run and propagates to the caller; targets written
by earlier jobs stay written.

When a target appears under several Markdown documents, every job still runs
and the last one wins, since each merge strips the block the previous one
inserted.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from moddoc.config.logging import get_logger
from moddoc.constants import DEFAULT_MARKER
from moddoc.merger import MergeResult, merge

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from moddoc.config.logging import ModdocLogger
    from moddoc.config.model import ConfigEntry

logger: ModdocLogger = get_logger(__name__)


@dataclass(frozen=True)
class MergeJob:
    """A single (Markdown, target) pair to merge.

    Attributes:
        markdown_path (Path): Markdown document to render.
        target_path (Path): Source file to overwrite.
        line_number (int): Mapping-file line the pair comes from.
    """

    markdown_path: Path
    target_path: Path
    line_number: int = 0


def plan_jobs(entries: Iterable[ConfigEntry], base_dir: Path | None = None) -> list[MergeJob]:
    """Flatten mapping entries into merge jobs.

    Args:
        entries (Iterable[ConfigEntry]): Parsed mapping entries, in file order.
        base_dir (Path | None): Directory that relative paths are resolved against
            (the mapping file's directory). Paths are used as written when None.

    Returns:
        list[MergeJob]: One job per target, in processing order.
    """

    def _resolve(p: str) -> Path:
        path = Path(p)
        if base_dir is None or path.is_absolute():
            return path
        return base_dir / path

    jobs: list[MergeJob] = []
    owners: dict[Path, str] = {}
    for entry in entries:
        for target in entry.target_paths:
            job = MergeJob(
                markdown_path=_resolve(entry.markdown_path),
                target_path=_resolve(target),
                line_number=entry.line_number,
            )
            previous: str | None = owners.get(job.target_path)
            if previous is not None and previous != entry.markdown_path:
                logger.warning(
                    "line %d: '%s' is also documented by '%s'; '%s' wins",
                    entry.line_number,
                    target,
                    previous,
                    entry.markdown_path,
                )
            owners[job.target_path] = entry.markdown_path
            jobs.append(job)
    logger.debug("planned %d merge job(s)", len(jobs))
    return jobs


class MergeRunner:
    """Run merge jobs one after another.

    Args:
        marker (str): Documentation line prefix.
        apply (bool): Write results to disk. In dry-run mode (False) results are
            kept in an in-memory overlay so later jobs on the same target see the
            content an applied run would have produced.
        on_job (Callable[[MergeJob], None] | None): Called before each job runs.
    """

    def __init__(
        self,
        *,
        marker: str = DEFAULT_MARKER,
        apply: bool = True,
        on_job: Callable[[MergeJob], None] | None = None,
    ) -> None:
        self.marker = marker
        self.apply = apply
        self.on_job = on_job
        self._overlay: dict[Path, str] = {}

    def run_job(self, job: MergeJob) -> MergeResult:
        """Merge a single job.

        Raises:
            OSError: If a file cannot be read or written.
            UnicodeDecodeError: If a file is not valid UTF-8.
        """
        if self.on_job is not None:
            self.on_job(job)
        logger.info("reading %s, writing %s", job.markdown_path, job.target_path)
        result: MergeResult = merge(
            job.markdown_path,
            job.target_path,
            marker=self.marker,
            write=self.apply,
            original=self._overlay.get(job.target_path),
        )
        if not self.apply:
            self._overlay[job.target_path] = result.updated
        return result

    def run(self, jobs: Iterable[MergeJob]) -> list[MergeResult]:
        """Run ``jobs`` in order and stop at the first failure.

        Returns:
            list[MergeResult]: One result per job.
        """
        results: list[MergeResult] = [self.run_job(job) for job in jobs]
        logger.info(
            "%d job(s), %d changed%s",
            len(results),
            sum(1 for r in results if r.changed),
            "" if self.apply else " (dry-run)",
        )
        return results
