"""Text rendering for remaining time and daily totals."""

# Block glyphs on a 5-row grid; "#" is a filled cell.
GLYPHS = {
    "0": ("###", "#.#", "#.#", "#.#", "###"),
    "1": (".#.", "##.", ".#.", ".#.", "###"),
    "2": ("###", "..#", "###", "#..", "###"),
    "3": ("###", "..#", ".##", "..#", "###"),
    "4": ("#.#", "#.#", "###", "..#", "..#"),
    "5": ("###", "#..", "###", "..#", "###"),
    "6": ("###", "#..", "###", "#.#", "###"),
    "7": ("###", "..#", ".#.", ".#.", ".#."),
    "8": ("###", "#.#", "###", "#.#", "###"),
    "9": ("###", "#.#", "###", "..#", "###"),
    ":": (".", "#", ".", "#", "."),
}
GLYPH_ROWS = 5


def format_clock(seconds: int) -> str:
    """Format seconds as MM:SS, or HH:MM:SS once there are hours."""
    seconds = max(0, int(seconds))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def render_big_time(seconds: int) -> str:
    """Render the clock string in block glyphs."""
    time_str = format_clock(seconds)

    lines = []
    for row in range(GLYPH_ROWS):
        cells = []
        for char in time_str:
            pattern = GLYPHS[char][row]
            cells.append("".join("██" if c == "#" else "  " for c in pattern))
        lines.append(" ".join(cells))

    return "\n".join(lines)


def format_daily_total(seconds: int) -> str:
    """Summary line for today's completed work."""
    hours, rest = divmod(max(0, int(seconds)), 3600)
    return f"Today: {hours}h {rest // 60}m focused"
