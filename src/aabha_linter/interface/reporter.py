"""Custom Pylint reporter for the Aabha summary table."""

from collections import defaultdict
from pathlib import PurePath
from typing import Any, Optional, Union

from pylint.message import Message
from pylint.reporters import BaseReporter


class AabhaSummaryReporter(BaseReporter):
    """
    Summary of Aabha findings grouped by message id and marker directory
    (the folder a model lives in, e.g. actions or behaviors).
    """

    name: str = "aabha-summary"

    RED: str = "\033[31m"
    BLUE: str = "\033[34m"
    GOLD: str = "\033[33m"
    RESET: str = "\033[0m"
    BOLD: str = "\033[1m"

    # JUSTIFICATION: BaseReporter __init__ uses Any for output
    def __init__(self, output: Optional[Any] = None) -> None:
        super().__init__(output)
        self.messages: list[Message] = []

    def handle_message(self, msg: Message) -> None:
        """Collect messages for summarization."""
        self.messages.append(msg)

    def render_summary(self) -> None:
        """Render the summary table."""
        if not self.messages:
            print(f"{self.BOLD}{self.GOLD}No Aabha model inconsistencies detected.{self.RESET}", file=self.out)
            return

        errors, directories = self._collect_stats()
        sorted_dirs = sorted(directories)
        headers = ["Code", "Symbol", "Total", *sorted_dirs]
        widths = self._calculate_widths(headers, errors, sorted_dirs)
        self._print_table(headers, widths, errors, sorted_dirs)

    # JUSTIFICATION: Pylint API requires generic layout
    def _display(self, layout: Any) -> None:
        """Pylint report sections are not rendered; the summary replaces them."""

    # JUSTIFICATION: Pylint API passes LinterStats objects
    def on_close(self, stats: Any, previous_stats: Any) -> None:
        """Print the table once linting ends, with or without --reports."""
        self.render_summary()

    @staticmethod
    def marker_directory(path: str) -> str:
        """Name of the directory holding the linted file."""
        parent = PurePath(path).parent.name
        return parent or "."

    def _collect_stats(self) -> tuple[dict[str, dict[str, Union[str, int]]], set[str]]:
        """Aggregate counts: {msg_id: {'name': symbol, 'total': n, <directory>: n}}."""
        errors: dict[str, dict[str, Union[str, int]]] = defaultdict(lambda: defaultdict(int))
        directories: set[str] = set()

        for msg in self.messages:
            directory = self.marker_directory(msg.path)
            directories.add(directory)
            row = errors[msg.msg_id]
            row["name"] = msg.symbol
            row[directory] = int(row.get(directory, 0)) + 1
            row["total"] = int(row.get("total", 0)) + 1

        return dict(errors), directories

    def _calculate_widths(
        self,
        headers: list[str],
        errors: dict[str, dict[str, Union[str, int]]],
        sorted_dirs: list[str],
    ) -> list[int]:
        """Calculate dynamic column widths."""
        widths = [len(h) for h in headers]
        for msg_id, details in errors.items():
            widths[0] = max(widths[0], len(msg_id))
            widths[1] = max(widths[1], len(str(details.get("name", ""))))
            widths[2] = max(widths[2], len(str(details.get("total", 0))))
            for i, directory in enumerate(sorted_dirs):
                widths[3 + i] = max(widths[3 + i], len(str(details.get(directory, 0))))
        return widths

    def _print_table(
        self,
        headers: list[str],
        widths: list[int],
        errors: dict[str, dict[str, Union[str, int]]],
        sorted_dirs: list[str],
    ) -> None:
        fmt: str = " | ".join([f"{{:<{w}}}" for w in widths])
        print(file=self.out)
        print(f"{self.BOLD}{self.BLUE}{fmt.format(*headers)}{self.RESET}", file=self.out)
        print(f"{self.BLUE}{'-|-'.join('-' * w for w in widths)}{self.RESET}", file=self.out)

        total: int = 0
        dir_totals: dict[str, int] = defaultdict(int)
        # Most frequent first
        sorted_errors = sorted(errors.items(), key=lambda x: (-int(x[1].get("total", 0)), x[0]))
        for msg_id, details in sorted_errors:
            row = [
                f"{self.RED}{msg_id:<{widths[0]}}{self.RESET}",
                f"{str(details.get('name', '')):<{widths[1]}}",
                f"{self.BOLD}{str(details.get('total', 0)):<{widths[2]}}{self.RESET}",
            ]
            for i, directory in enumerate(sorted_dirs):
                count = int(details.get(directory, 0))
                row.append(f"{count:<{widths[3 + i]}}")
                dir_totals[directory] += count
            print(" | ".join(row), file=self.out)
            total += int(details.get("total", 0))

        divider_len = sum(widths) + 3 * (len(widths) - 1)
        print(f"{self.BLUE}{'-' * divider_len}{self.RESET}", file=self.out)
        totals_row = [
            f"{self.BOLD}{self.GOLD}{'Total':<{widths[0]}}{self.RESET}",
            f"{' ':<{widths[1]}}",
            f"{self.BOLD}{self.GOLD}{str(total):<{widths[2]}}{self.RESET}",
        ]
        for i, directory in enumerate(sorted_dirs):
            totals_row.append(f"{self.BOLD}{self.GOLD}{dir_totals[directory]:<{widths[3 + i]}}{self.RESET}")
        print(" | ".join(totals_row), file=self.out)
        print(file=self.out)
        print(f"{self.BOLD}{self.RED}{total} Aabha model inconsistencies detected.{self.RESET}", file=self.out)
