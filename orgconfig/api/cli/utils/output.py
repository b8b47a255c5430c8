"""Output formatting utilities for orgconfig CLI commands."""

import json
from typing import Any, Dict, List, Optional, Union


class OutputFormatter:
    """Handles consistent output formatting across CLI commands."""

    def __init__(self, verbose: bool = False):
        """Initialize output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Print an info message.

        Args:
            message: Message to print
        """
        print(f"ℹ️  {message}")

    def json_output(self, data: Union[Dict[str, Any], List[Any]]) -> None:
        """Print data as formatted JSON.

        Args:
            data: Data to output as JSON
        """
        print(json.dumps(data, indent=2, default=str))

    def table_header(self, headers: List[str], widths: Optional[List[int]] = None) -> None:
        """Print a table header.

        Args:
            headers: Column headers
            widths: Optional column widths
        """
        if widths:
            row = " | ".join(header.ljust(width) for header, width in zip(headers, widths))
        else:
            row = " | ".join(headers)

        print(row)
        print("-" * len(row))

    def table_row(self, values: List[str], widths: Optional[List[int]] = None) -> None:
        """Print a table row.

        Args:
            values: Column values
            widths: Optional column widths
        """
        if widths:
            row = " | ".join(str(value).ljust(width) for value, width in zip(values, widths))
        else:
            row = " | ".join(str(value) for value in values)

        print(row)


def print_section(title: str) -> None:
    """Print a section header.

    Args:
        title: Section title
    """
    print(f"\n{title}")
    print("-" * len(title))
