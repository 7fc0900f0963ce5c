from conference_data.models import Day


def timeline_overview(days: list[Day], title: str = "Conference") -> str:
    """Compact text rendering of the visible sessions of a timeline."""
    lines = [f"# {title}", ""]
    for day in days:
        lines.append(f"## {day.date or ''} ({day.shown_sessions} sessions)\n")
        for group in day.groups:
            if group.hide:
                continue
            for session in group.sessions:
                if session.hide:
                    continue
                lines.append(f"- {group.time or ''} | {session.name} | {', '.join(session.tracks)}")
                if session.speakers:
                    lines.append(f"  {', '.join(s.name for s in session.speakers)}")
        lines.append("")
    return "\n".join(lines)
