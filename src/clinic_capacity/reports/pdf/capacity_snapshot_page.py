# src/clinic_capacity/reports/pdf/capacity_snapshot_page.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pandas as pd
from reportlab.platypus import Paragraph, Spacer, Table, TableStyle
from reportlab.lib import colors
from reportlab.lib.units import inch

from clinic_capacity.capacity_reporting.capacity_models import (
    CapacityResult,
    CapacityState,
)
from clinic_capacity.pdf.builder import build_pdf
from clinic_capacity.pdf.styles import (
    BODY,
    CLINIC_BLUE,
    CLINIC_LIGHT,
    HEADLINE_LABEL,
    HEADLINE_VALUE,
    SECTION_HEADER,
)
from clinic_capacity.presentation.console import format_decimal_clock
from clinic_capacity.reports.models.status_theme import theme_for
from clinic_capacity.utils.logger import get_logger

logger = get_logger(__name__)

BREAKDOWN_COLUMNS = ["Provider", "Shift", "Hours Remaining", "Patients"]


def breakdown_frame(result: CapacityResult) -> pd.DataFrame:
    """Breakdown entries as a table-ready DataFrame (display values)."""
    rows = [
        {
            "Provider": e.provider_name,
            "Shift": e.shift_label,
            "Hours Remaining": f"{e.remaining_hours:.2f}",
            "Patients": e.remaining_patients,
        }
        for e in result.breakdown
    ]
    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def _breakdown_table(df: pd.DataFrame) -> Table:
    data = [list(df.columns)] + df.astype(str).values.tolist()

    table = Table(data, colWidths=[2.6 * inch, 1.6 * inch, 1.6 * inch, 1.2 * inch])

    style = [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(CLINIC_BLUE)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
    ]
    # Zebra rows
    for row_idx in range(2, len(data), 2):
        style.append(("BACKGROUND", (0, row_idx), (-1, row_idx), colors.HexColor(CLINIC_LIGHT)))

    table.setStyle(TableStyle(style))
    return table


def build_capacity_snapshot_elements(result: CapacityResult) -> list:
    theme = theme_for(result)
    elements = []

    headline = "CLOSED" if result.state is CapacityState.CLOSED else str(result.value)

    banner = Table(
        [[Paragraph(headline, HEADLINE_VALUE)], [Paragraph(theme.label, HEADLINE_LABEL)]],
        colWidths=[7.0 * inch],
    )
    banner.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), theme.fill_color),
                ("TOPPADDING", (0, 0), (-1, -1), 10),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 10),
            ]
        )
    )
    elements.append(banner)
    elements.append(Spacer(1, 12))

    elements.append(
        Paragraph(
            f"<b>Current time:</b> {format_decimal_clock(result.current_time)} &nbsp; "
            f"<b>Shift type:</b> {result.shift_type.value} &nbsp; "
            f"<b>Closes:</b> {format_decimal_clock(result.latest_close)}",
            BODY,
        )
    )

    if result.state is CapacityState.CLOSED:
        elements.append(Spacer(1, 12))
        elements.append(
            Paragraph("No remaining patient capacity after closing time.", BODY)
        )
        return elements

    if result.state is CapacityState.NO_PROVIDERS_ASSIGNED:
        elements.append(Spacer(1, 12))
        elements.append(
            Paragraph("Assign a provider to a shift to calculate remaining capacity.", BODY)
        )
        return elements

    elements.append(Paragraph("Breakdown", SECTION_HEADER))

    df = breakdown_frame(result)
    if df.empty:
        elements.append(
            Paragraph("All assigned providers have completed their shifts.", BODY)
        )
    else:
        elements.append(_breakdown_table(df))

    return elements


def write_capacity_snapshot(
    result: CapacityResult,
    output_path: Path | str,
    report_date: date | None = None,
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    report_date = report_date or date.today()

    build_pdf(
        output_path=str(output_path),
        elements=build_capacity_snapshot_elements(result),
        report_title="Remaining Patient Capacity",
        report_date=report_date.strftime("%b %d, %Y"),
    )

    logger.info("Capacity snapshot written to %s", output_path)
    return output_path
