import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet


def generate_pdf_for_week(chores, week_number):
    """Generate a printable PDF table: Chore / Assigned To / Category / Priority / Due / Done for one weekly batch."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Weekly Chores – Week {week_number}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Chore", "Assigned To", "Category", "Priority", "Due", "Done"]]
    for chore in sorted(chores, key=lambda c: (c.assigned_to.lower(), c.title.lower())):
        data.append([
            chore.title,
            chore.assigned_to,
            chore.category_label,
            chore.priority.capitalize(),
            chore.due_date.strftime("%a %d.%m.%Y"),
            "x" if chore.is_completed else "",
        ])
    if len(data) == 1:
        data.append(["No weekly chores distributed yet", "-", "-", "-", "-", ""])

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
