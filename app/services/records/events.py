"""WCA event names and result formatting."""

EVENT_NAMES = {
    "333": "3x3x3 Cube",
    "222": "2x2x2 Cube",
    "444": "4x4x4 Cube",
    "555": "5x5x5 Cube",
    "666": "6x6x6 Cube",
    "777": "7x7x7 Cube",
    "333bf": "3x3x3 Blindfolded",
    "333fm": "3x3x3 Fewest Moves",
    "333oh": "3x3x3 One-Handed",
    "clock": "Clock",
    "minx": "Megaminx",
    "pyram": "Pyraminx",
    "skewb": "Skewb",
    "sq1": "Square-1",
    "444bf": "4x4x4 Blindfolded",
    "555bf": "5x5x5 Blindfolded",
    "333mbf": "3x3x3 Multi-Blind",
    # Retired
    "333ft": "3x3x3 With Feet",
    "magic": "Magic",
    "mmagic": "Master Magic",
    "333mbo": "3x3x3 Multi-Blind Old Style",
}

DNF = -1
DNS = -2


def event_name(event_id: str | None) -> str | None:
    return EVENT_NAMES.get(event_id) if event_id else None


def format_clock(centiseconds: int) -> str:
    """1234 -> "12.34", 6543 -> "1:05.43", 360000 -> "1:00:00.00"."""
    seconds, cs = divmod(centiseconds, 100)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}.{cs:02d}"
    if minutes:
        return f"{minutes}:{seconds:02d}.{cs:02d}"
    return f"{seconds}.{cs:02d}"


def format_multiblind(value: int) -> str:
    """Decode 0DDTTTTTMM (or old style 1SSAATTTTT) into "solved/attempted m:ss"."""
    if value >= 1000000000:
        solved = 99 - value // 10000000 % 100
        attempted = value // 100000 % 100
        seconds = value % 100000
    else:
        missed = value % 100
        seconds = value // 100 % 100000
        solved = 99 - value // 10000000 % 100 + missed
        attempted = solved + missed

    if seconds == 99999:
        return f"{solved}/{attempted}"
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    clock = f"{hours}:{minutes:02d}:{secs:02d}" if hours else f"{minutes}:{secs:02d}"
    return f"{solved}/{attempted} {clock}"


def format_result(value: int, event_id: str | None, average: bool = False) -> str | None:
    """Human-readable WCA result; None for "no result" (0)."""
    if value == 0:
        return None
    if value == DNF:
        return "DNF"
    if value == DNS:
        return "DNS"
    if event_id == "333fm":
        return f"{value / 100:.2f}" if average else str(value)
    if event_id in ("333mbf", "333mbo") and not average:
        return format_multiblind(value)
    return format_clock(value)
