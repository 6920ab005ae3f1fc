"""Application commands (use cases) for cut-list optimization."""

from __future__ import annotations

import logging

from cutlist.domain import OptimizationResult, optimize

from .dtos import CutListJob

logger = logging.getLogger(__name__)


class OptimizeCutListCommand:
    """Command to optimize a resolved cut-list job."""

    def execute(self, job: CutListJob) -> OptimizationResult:
        """Run the optimizer for the job's mode.

        Args:
            job: Resolved job with cuts, stock and kerf.

        Returns:
            The optimizer's result. Failures are reported in the result,
            not raised.
        """
        logger.debug(
            "Optimizing %s job: %d cut entries, %d stock entries, kerf %s",
            job.mode.value,
            len(job.cuts),
            len(job.stock),
            job.kerf,
        )

        result = optimize(job.mode, job.cuts, job.stock, job.kerf)

        if not result.success:
            logger.warning("Optimization failed: %s", result.error)
        elif result.summary.unplaced_cuts:
            logger.warning(
                "%d cut(s) could not be placed: %s",
                len(result.summary.unplaced_cuts),
                ", ".join(result.summary.unplaced_cuts),
            )
        return result
