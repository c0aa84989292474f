import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

HEADER_STYLE = TableStyle([
    ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
    ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
    ("ALIGN", (1,0), (-1,-1), "CENTER"),
    ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
    ("FONTSIZE", (0,0), (-1,0), 11),
    ("BOTTOMPADDING", (0,0), (-1,0), 8),
    ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
])


def generate_pdf_for_day(result):
    """Generate a PDF of a DayPlanResult: one table per meal, then totals and the food-group checklist."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=30, leftMargin=30, topMargin=30, bottomMargin=30
    )

    styles = getSampleStyleSheet()
    goals = result.goals
    elements = [
        Paragraph(f"Meal Plan – {result.date.isoformat()}", styles["Title"]),
        Paragraph(f"Daily goals: {goals.calories} calories, {goals.protein}g protein", styles["Normal"]),
        Spacer(1, 16),
    ]

    for slot, entries in result.plan.meals.items():
        elements.append(Paragraph(slot.label, styles["Heading2"]))
        data = [["Item", "Category", "Qty", "Calories", "Protein (g)"]]
        for e in entries:
            data.append([e.item.name, str(e.item.category), e.quantity, e.calories, e.protein])
        table = Table(data, repeatRows=1, colWidths=[210, 70, 40, 70, 80])
        table.setStyle(HEADER_STYLE)
        elements.extend([table, Spacer(1, 12)])

    if not result.plan:
        elements.append(Paragraph("No menu items available for this date.", styles["Normal"]))

    totals = result.totals
    pct = result.percentages()
    elements.append(Paragraph("Nutrition Totals", styles["Heading2"]))
    totals_table = Table([
        ["", "Actual", "Goal", "%"],
        ["Calories", totals.calories, goals.calories, f"{pct['calories']}%"],
        ["Protein (g)", totals.protein, goals.protein, f"{pct['protein']}%"],
    ])
    totals_table.setStyle(HEADER_STYLE)
    elements.extend([totals_table, Spacer(1, 12)])

    elements.append(Paragraph("Food Group Checklist", styles["Heading2"]))
    check_table = Table([["Food group", "Covered"]] + [
        [str(cat), "yes" if done else "no"] for cat, done in result.checklist().items()
    ])
    check_table.setStyle(HEADER_STYLE)
    elements.append(check_table)

    doc.build(elements)
    return buf.getvalue()
