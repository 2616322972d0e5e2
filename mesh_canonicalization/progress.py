# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 dairin0d https://github.com/dairin0d

import logging
from dataclasses import dataclass
from enum import Enum

from .params import SILENT

logger = logging.getLogger(__name__)

class Status(Enum):
    CONVERGED = 'converged' # max vertex movement dropped below epsilon
    DIVERGED = 'diverged' # the model started crumpling
    EXHAUSTED = 'exhausted' # ran out of iterations

@dataclass
class RelaxationResult:
    status: Status
    iterations: int
    max_diff: float

    @property
    def converged(self):
        return self.status is Status.CONVERGED

    def __bool__(self):
        return self.converged

class ProgressReporter:
    """
    Plain-text progress lines of a relaxation loop.

    report_interval: write "<count> max_diff=<value>" every this many
        iterations; 0 or negative disables these lines, and any negative
        value (such as SILENT) also disables the final summary
    write: callable that receives each line; by default the lines
        go to this module's logger at the INFO level

    The current state can also be polled through the task_name,
    progress and progress_info attributes.
    """

    def __init__(self, report_interval=SILENT, write=None):
        self.report_interval = report_interval
        self.write = (write or logger.info)
        self.task_name = ""
        self.progress = 0
        self.progress_info = ""

    def begin(self, task_name):
        self.task_name = task_name
        self.progress = 0
        self.progress_info = ""

    def iteration(self, count, max_diff):
        self.progress = count
        self.progress_info = f"max_diff={max_diff:.17g}"
        interval = self.report_interval
        if (interval > 0) and (count % interval == 0):
            self.write(f"{count:<15d} max_diff={max_diff:.17g}")

    def diverged(self):
        # Always reported, since it explains why the result is not converged
        self.write("breaking out: radius range detected. try increasing the divergence threshold")

    def finish(self, count, max_diff):
        self.progress = count
        if self.report_interval < 0: return
        self.write(f"{count:<15d} final max_diff={max_diff:.17g}")

def make_reporter(reporter, report_interval):
    "Uses the given reporter, or creates a default one"
    if reporter is not None: return reporter
    return ProgressReporter(report_interval)
