# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from zenote.color import ERROR_COLOR
from zenote.model.import_report import ImportReport
from zenote.view.views.header import header


def import_report_view(report: ImportReport, source: Optional[str] = None) -> None:
    """One row per note of the document, with the reason for each rejection."""
    header("validation", source)

    results_table = Table(box=box.SIMPLE)
    results_table.add_column("index")
    results_table.add_column("status")
    results_table.add_column("detail")

    for result in report["results"]:
        if result["status"] == "accepted":
            results_table.add_row(
                str(result["index"]), "accepted", escape(result["note"]["title"])
            )
        else:
            results_table.add_row(
                str(result["index"]),
                f"[{ERROR_COLOR}]rejected[/{ERROR_COLOR}]",
                escape(result["reason"]),
            )

    console = Console()
    console.print(results_table)
    if report["tag_error"] is not None:
        console.print(f"[{ERROR_COLOR}]tags: {escape(report['tag_error'])}[/{ERROR_COLOR}]")
