# src/clinic_capacity/pdf/styles.py
"""
Shared styling for capacity snapshot PDFs
"""
from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.enums import TA_CENTER, TA_LEFT

CLINIC_BLUE = "#0071BC"     # Header bar
CLINIC_GRAY = "#A7A9AC"     # Footer rule / text
CLINIC_DARK = "#2F3A4A"     # Body text
CLINIC_LIGHT = "#F5F7FA"    # Table zebra

HEADLINE_VALUE = ParagraphStyle(
    "HeadlineValue",
    fontName="Helvetica-Bold",
    fontSize=48,
    leading=56,
    alignment=TA_CENTER,
    textColor=colors.HexColor(CLINIC_DARK),
)
HEADLINE_LABEL = ParagraphStyle(
    "HeadlineLabel",
    fontName="Helvetica",
    fontSize=14,
    leading=18,
    alignment=TA_CENTER,
    textColor=colors.HexColor(CLINIC_DARK),
)
SECTION_HEADER = ParagraphStyle(
    "SectionHeader",
    fontName="Helvetica-Bold",
    fontSize=12,
    leading=16,
    alignment=TA_LEFT,
    spaceBefore=18,
    spaceAfter=8,
)
BODY = ParagraphStyle("Body", fontName="Helvetica", fontSize=10, leading=13)
