from __future__ import annotations

from datetime import date

from powerbot.core.constants import GROUP_POWER, GROUP_WATER, SECTION_HEADER
from powerbot.core.models import DayRecord, GroupRecord


def build_section(
    date_title: str,
    *,
    power: str | None = None,
    water: str | None = None,
    bold: bool = True,
) -> str:
    header = f"{SECTION_HEADER} {date_title}"
    if bold:
        header = f"<b>{header}</b>"

    lines = [header, f"<p>Інформація станом на 20:15 {date_title}</p>"]
    lines.append("<p>Група 1.1. Електроенергії немає з 06:00 до 09:00.</p>")
    if water is not None:
        lines.append(f"<p>{GROUP_WATER}. {water}</p>")
    if power is not None:
        lines.append(f"<p>{GROUP_POWER}. {power}</p>")
    return "\n".join(lines)


def build_page(*sections: str) -> str:
    return "<div>\n" + "\n".join(sections) + "\n</div>"


def sample_page() -> str:
    return build_page(
        build_section(
            "01.03.2025",
            power="Електроенергії немає з 08:00 до 10:00.",
            water="Електроенергії немає з 14:00 до 16:30.",
        ),
        build_section(
            "02.03.2025",
            power="Електроенергії немає з 18:00 до 21:00.",
            water="Електроенергія є.",
        ),
    )


def day_record(day: date, *, power: str | None = None, water: str | None = None) -> DayRecord:
    groups: dict[str, GroupRecord] = {}
    if power is not None:
        groups[GROUP_POWER] = GroupRecord.from_text(power)
    if water is not None:
        groups[GROUP_WATER] = GroupRecord.from_text(water)
    return DayRecord(date=day, groups=groups)


def menus_envelope(raw_html: str) -> dict:
    return {
        "hydra:member": [
            {"menuItems": [{"name": "Графік", "rawHtml": ""}]},
            {
                "menuItems": [
                    {"name": "Фото", "imageUrl": "/media/grafic.png"},
                    {"name": "Today", "rawHtml": raw_html},
                    {"name": "Tomorrow", "rawHtml": "<p>ignored</p>"},
                ]
            },
        ]
    }
