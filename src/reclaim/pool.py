"""Worker pool that walks a directory tree with a self-feeding job queue.

Every worker both consumes and produces work units: partitioning a
directory enqueues its subdirectories on the same queue the worker reads
from. The queue's unfinished-task counter tells when the whole tree has
been exhausted, since a unit's children are always enqueued before the
unit itself is marked done.
"""

import logging
import os
import queue
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable

from reclaim.errors import PoolStartupError
from reclaim.models import AnalysisResult, ProjectType, WorkUnit
from reclaim.partitioner import find_projects_in_path
from reclaim.project_types import config_for

logger = logging.getLogger(__name__)

_STOP = object()
_CLOSED = object()


def available_cpus() -> int:
    """Number of CPUs this process may run on (affinity-aware where supported)."""
    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0)) or 1
    return os.cpu_count() or 1


def effective_threads(requested: int) -> int:
    """Clamp a requested worker count to the available CPUs (minimum 1)."""
    return max(1, min(requested, available_cpus()))


def _worker(jobs: queue.Queue, results: queue.SimpleQueue) -> None:
    while True:
        unit = jobs.get()
        if unit is _STOP:
            jobs.task_done()
            return

        try:
            find_projects_in_path(
                unit.directory_path,
                unit.project_type_config,
                jobs.put,
                results.put,
            )
        except Exception:
            logger.exception("Unexpected error while scanning %s", unit.directory_path)
        finally:
            jobs.task_done()


def _close_when_drained(jobs: queue.Queue, results: queue.SimpleQueue, workers: int) -> None:
    jobs.join()
    for _ in range(workers):
        jobs.put(_STOP)
    results.put(_CLOSED)


def collect_results(
    results: queue.SimpleQueue,
    progress_callback: Callable[[AnalysisResult], None] | None = None,
) -> list[AnalysisResult]:
    """
    Drain the results channel until it is closed.

    Args:
        results: Queue fed by the workers and terminated by the close marker
        progress_callback: Optional callback(result) for each arriving result

    Returns:
        Results in arrival order (not deterministic across runs)
    """
    collected: list[AnalysisResult] = []
    while True:
        item = results.get()
        if item is _CLOSED:
            return collected
        collected.append(item)
        if progress_callback:
            progress_callback(item)


def analyze_all_projects(
    root: Path,
    threads: int,
    project_type: ProjectType,
    progress_callback: Callable[[AnalysisResult], None] | None = None,
) -> list[AnalysisResult]:
    """
    Traverse ``root`` and analyze every project of ``project_type``.

    Args:
        root: Directory to start from
        threads: Requested number of workers, clamped to the available CPUs
        project_type: Which ecosystem's projects to look for
        progress_callback: Optional callback(result), called on the calling
            thread as each result arrives

    Returns:
        Unordered list of AnalysisResults

    Raises:
        PoolStartupError: If the worker threads cannot be started
    """
    config = config_for(project_type)
    num_threads = effective_threads(threads)
    logger.debug("Scanning %s with %d worker(s)", root, num_threads)

    jobs: queue.Queue = queue.Queue()
    results: queue.SimpleQueue = queue.SimpleQueue()
    jobs.put(WorkUnit(directory_path=Path(root), project_type_config=config))

    # One extra slot for the closer, which only waits for the queue to drain
    with ThreadPoolExecutor(
        max_workers=num_threads + 1, thread_name_prefix="reclaim"
    ) as executor:
        started = 0
        try:
            for _ in range(num_threads):
                executor.submit(_worker, jobs, results)
                started += 1
            executor.submit(_close_when_drained, jobs, results, num_threads)
        except RuntimeError as e:
            for _ in range(started):
                jobs.put(_STOP)
            raise PoolStartupError(f"Could not start worker threads: {e}") from e

        return collect_results(results, progress_callback)
