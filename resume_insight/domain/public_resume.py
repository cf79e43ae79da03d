"""Privacy-filtered public resume rendering.

Contact details never reach the public page and every user-supplied value
is HTML-escaped before interpolation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)

_PUBLIC_CSS = """
        body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 800px; margin: 0 auto; padding: 20px; }
        .header { text-align: center; margin-bottom: 30px; border-bottom: 2px solid #333; padding-bottom: 20px; }
        .name { font-size: 28px; font-weight: bold; margin-bottom: 10px; }
        .contact { font-size: 14px; color: #666; }
        .section { margin-bottom: 25px; }
        .section-title { font-size: 18px; font-weight: bold; border-bottom: 2px solid #333; margin-bottom: 15px; }
        .job-title, .degree { font-weight: bold; }
        .company, .institution, .duration { color: #666; }
        .description { margin-top: 8px; white-space: pre-line; }
        .skill { background: #f0f0f0; padding: 5px 12px; border-radius: 15px; font-size: 14px; }
"""


def escape_html(value: Optional[str]) -> str:
    """Escape ``& < > " '`` so *value* is safe inside HTML text or attributes."""
    if not value:
        return ""
    return str(value).translate(_HTML_ESCAPES)


def filter_public_info(personal_info: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Keep only the fields allowed on a public page (no email or phone)."""
    info = personal_info or {}
    return {
        "name": info.get("name") or "Name Hidden",
        "location": info.get("location") or "",
        "linkedin": info.get("linkedin") or "",
    }


def render_public_resume(resume: Mapping[str, Any]) -> str:
    """Render *resume* as a standalone, ``noindex`` HTML page."""
    info = filter_public_info(resume.get("personal_info"))
    name = escape_html(info["name"])
    title = escape_html(resume.get("title") or f"{info['name']} - Resume")

    contact = " | ".join(escape_html(v) for v in (info["location"], info["linkedin"]) if v)

    body: List[str] = [
        '    <div class="header">',
        f'      <div class="name">{name}</div>',
        f'      <div class="contact">{contact}</div>',
        "    </div>",
    ]
    body.extend(_summary_section(resume.get("summary")))
    body.extend(_experience_section(resume.get("experience") or []))
    body.extend(_education_section(resume.get("education") or []))
    body.extend(_skills_section(resume.get("skills") or []))

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '    <meta charset="UTF-8">\n'
        f"    <title>{title}</title>\n"
        '    <meta name="robots" content="noindex, nofollow">\n'
        "    <style>\n"
        f"{_PUBLIC_CSS}\n"
        "    </style>\n"
        "</head>\n"
        "<body>\n"
        + "\n".join(body)
        + "\n</body>\n"
        "</html>"
    )


def _summary_section(summary: Optional[str]) -> List[str]:
    if not summary:
        return []
    return [
        '    <div class="section">',
        '      <div class="section-title">Professional Summary</div>',
        f"      <p>{escape_html(summary)}</p>",
        "    </div>",
    ]


def _experience_section(items: List[Mapping[str, Any]]) -> List[str]:
    if not items:
        return []
    lines = ['    <div class="section">', '      <div class="section-title">Work Experience</div>']
    for exp in items:
        lines.append('      <div class="experience-item">')
        lines.append(f'        <div class="job-title">{escape_html(exp.get("position") or "Position not specified")}</div>')
        lines.append(f'        <div class="company">{escape_html(exp.get("company") or "Company not specified")}</div>')
        lines.append(
            f'        <div class="duration">{escape_html(exp.get("startDate") or "")} - '
            f'{escape_html(exp.get("endDate") or "Present")}</div>'
        )
        if exp.get("description"):
            lines.append(f'        <div class="description">{escape_html(exp["description"])}</div>')
        lines.append("      </div>")
    lines.append("    </div>")
    return lines


def _education_section(items: List[Mapping[str, Any]]) -> List[str]:
    if not items:
        return []
    lines = ['    <div class="section">', '      <div class="section-title">Education</div>']
    for edu in items:
        degree = escape_html(edu.get("degree") or "Degree not specified")
        institution = escape_html(edu.get("institution") or "Institution not specified")
        year = escape_html(edu.get("year") or "Year not specified")
        lines.append('      <div class="education-item">')
        lines.append(f'        <div class="degree">{degree}</div>')
        lines.append(f'        <div class="institution">{institution} - {year}</div>')
        lines.append("      </div>")
    lines.append("    </div>")
    return lines


def _skills_section(skills: List[str]) -> List[str]:
    if not skills:
        return []
    chips = "".join(f'<span class="skill">{escape_html(skill)}</span>' for skill in skills)
    return [
        '    <div class="section">',
        '      <div class="section-title">Skills</div>',
        f'      <div class="skills-list">{chips}</div>',
        "    </div>",
    ]
