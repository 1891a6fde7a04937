# roster_core/export_pdf.py
from __future__ import annotations
import io
from typing import List
from reportlab.lib.pagesizes import letter
from reportlab.lib import colors
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from .constants import UNASSIGNED_NAME
from .models import RosterState, Team

TEAMS_PER_PAGE = 6


def _team_table(teams: List[Team]) -> Table:
    data = [["Team", "Roll Number", "Name"]]
    team_rows = []
    for team in teams:
        team_rows.append(len(data))
        for m in team.members:
            data.append([f"Team {team.id}", str(m.identifier), m.name or UNASSIGNED_NAME])

    style = [
        ("BACKGROUND", (0,0), (-1,0), colors.lightgrey),
        ("TEXTCOLOR", (0,0), (-1,0), colors.black),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,-1), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
    ]
    for row in team_rows[1:]:
        style.append(("LINEABOVE", (0,row), (-1,row), 1.2, colors.black))

    t = Table(data, repeatRows=1, colWidths=[70, 90, 300])
    t.setStyle(TableStyle(style))
    return t


def render_roster_pdf(state: RosterState, title: str = "Team Roster") -> bytes:
    buf = io.BytesIO()
    page_size = letter
    c = canvas.Canvas(buf, pagesize=page_size)

    teams = list(state.teams)
    pages = [teams[i:i + TEAMS_PER_PAGE] for i in range(0, len(teams), TEAMS_PER_PAGE)] or [[]]
    for n, chunk in enumerate(pages, start=1):
        heading = title if n == 1 else f"{title} (page {n})"
        c.setFont("Helvetica-Bold", 16)
        c.drawString(40, page_size[1] - 40, heading)

        t = _team_table(chunk)
        table_w, table_h = t.wrapOn(c, page_size[0] - 80, page_size[1] - 100)
        t.drawOn(c, 40, page_size[1] - 70 - table_h)
        c.showPage()

    c.save()
    return buf.getvalue()
