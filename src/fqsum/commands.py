"""
Unified command orchestrator for checksum runs.
This is the SINGLE source of truth for the run workflow, used by the CLI and by library callers.
"""
from typing import Optional, Callable, TextIO
from fqsum.core.models import ChecksumParams, ChecksumResult
from fqsum.core.runner import ChecksumRunner


class ChecksumCommand:
    """
    Orchestrates a checksum run:
    1. Select the digest algorithm from the params
    2. Process every input group in order
    3. Write the report (or the debug trace) to the given stream

    Usage:
        params = ChecksumParams(input_files=["r_1.fq.gz", "r_2.fq.gz"])
        result = ChecksumCommand().execute(params, stream=sys.stdout)
        print(result.state.sum_hex, result.records)
    """

    def __init__(self, runner: Optional[ChecksumRunner] = None):
        self._runner = runner or ChecksumRunner()
        self._last_result: Optional[ChecksumResult] = None

    def execute(
            self,
            params: ChecksumParams,
            stream: Optional[TextIO] = None,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> ChecksumResult:
        """
        Execute a checksum run with given parameters.

        Args:
            params: Validated checksum parameters
            stream: Where the report or trace is written (stdout when None)
            progress_callback: (group: str, current: int, total: Optional[int]) -> None

        Returns:
            ChecksumResult

        Raises:
            ChecksumError: configuration, open, read or mate pairing failure
        """
        self._last_result = self._runner.run(params, stream=stream, progress_callback=progress_callback)
        return self._last_result

    def get_last_result(self) -> Optional[ChecksumResult]:
        """Result of the most recent successful execute() call."""
        return self._last_result
