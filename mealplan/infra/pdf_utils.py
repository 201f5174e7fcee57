import io
from datetime import date
from typing import Dict, List

from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealplan.domain.Plan import MealPlanEntry
from mealplan.domain.Recipe import Recipe
from mealplan.utilities.constants import DAY_NAMES, PDF_DATE_FORMAT


def generate_pdf_for_week(week_start: date, entries: List[MealPlanEntry], recipes: Dict[int, Recipe]) -> bytes:
    """Generate a simple PDF table: Day / Date / Recipe / Prep time for one generated week."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Meal Plan – week of {week_start.strftime(PDF_DATE_FORMAT)}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day", "Date", "Recipe", "Prep time"]]
    for entry in entries:
        recipe = recipes.get(entry.recipe_id)
        prep = f"{recipe.preparation_time} min" if recipe and recipe.preparation_time else "-"
        data.append([
            DAY_NAMES[entry.date.weekday()],
            entry.date.strftime(PDF_DATE_FORMAT),
            recipe.name if recipe else f"Recipe #{entry.recipe_id}",
            prep,
        ])
    if len(data) == 1:
        data.append(["-", "-", "No meals planned", "-"])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
