# src/clinic_capacity/pdf/builder.py

from functools import partial

from reportlab.platypus import SimpleDocTemplate
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import inch
from reportlab.lib import colors

from clinic_capacity.pdf.styles import CLINIC_BLUE, CLINIC_GRAY


# ============================================================
# HEADER / FOOTER
# ============================================================

def draw_header_footer(canvas, doc, report_title, report_date):
    canvas.saveState()
    width, height = doc.pagesize

    # Header bar
    canvas.setFillColor(colors.HexColor(CLINIC_BLUE))
    canvas.rect(0, height - 0.9 * inch, width, 0.9 * inch, fill=1, stroke=0)

    # Title
    canvas.setFont("Helvetica-Bold", 15)
    canvas.setFillColor(colors.white)
    canvas.drawString(0.5 * inch, height - 0.52 * inch, report_title)

    # Date
    canvas.setFont("Helvetica", 10)
    canvas.drawRightString(width - 0.5 * inch, height - 0.52 * inch, report_date)

    # Footer rule
    canvas.setStrokeColor(colors.HexColor(CLINIC_GRAY))
    canvas.line(0.5 * inch, 0.75 * inch, width - 0.5 * inch, 0.75 * inch)

    # Footer text
    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(colors.HexColor(CLINIC_GRAY))
    canvas.drawString(0.5 * inch, 0.5 * inch, "Front Desk Use Only")
    canvas.drawRightString(width - 0.5 * inch, 0.5 * inch, f"Page {doc.page}")

    canvas.restoreState()


# ============================================================
# PDF BUILDER
# ============================================================

def build_pdf(
    output_path: str,
    elements: list,
    report_title: str,
    report_date: str,
    pagesize=LETTER
):
    """
    Builds a branded clinic PDF with the shared header and footer.
    """

    doc = SimpleDocTemplate(
        output_path,
        pagesize=pagesize,
        leftMargin=0.5 * inch,
        rightMargin=0.5 * inch,
        topMargin=1.15 * inch,
        bottomMargin=1.0 * inch,
    )

    header = partial(
        draw_header_footer,
        report_title=report_title,
        report_date=report_date
    )
    doc.build(elements, onFirstPage=header, onLaterPages=header)
