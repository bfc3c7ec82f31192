"""Interactive console prompts for reportflow.

The lifecycle controller asks its questions through a ConfirmationProvider;
ConsolePrompter answers them from the terminal. Both prompts block until a
line is entered.
"""

from typing import Callable

from utils import get_logger

logger = get_logger(__name__)


class ConsolePrompter:
    """ConfirmationProvider reading answers from standard input.

    Args:
        input_func: Function used to read a line (``input`` by default)
    """

    def __init__(self, input_func: Callable[[str], str] = input):
        self.input_func = input_func

    def ask(self, message: str) -> str:
        """Show ``message`` and return the operator's answer.

        End of input counts as an empty answer, which every prompt treats as
        "no".
        """
        try:
            answer = self.input_func(f"\n{message}")
        except EOFError:
            logger.debug("No input available; treating as empty answer")
            return ""
        return answer.rstrip("\r\n")


def display_job_summary(job) -> None:
    """Display a summary of the report job about to run.

    Args:
        job: Validated ReportJob
    """
    print("\n" + "=" * 60)
    print("Report Job Summary")
    print("=" * 60)
    print(f"Report name: {job.naming.build()}")
    print(f"Template: {job.folders.templates / job.template_file}")
    print(f"Source folder: {job.folders.source}")
    print(f"Reports folder: {job.folders.reports}")
    print(f"Output format: {job.output_format.value}")
    print(f"Overwrite source: {job.overwrite_source.value}")
    print(f"Compile now: {job.compile_report}")
    print(f"Wait to recompile: {job.wait_to_recompile}")
    print("=" * 60)
