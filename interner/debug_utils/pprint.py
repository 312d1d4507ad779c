import json

from interner import Options
from interner.protocol import InternerProtocol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_VALUE = "\033[92m"
COLOR_HEADER = "\033[90m"
COLOR_ELLIPSIS = "\033[93m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_rows": 20,
    "max_value_length": 60,
    "display_legend": False,
    "color_header": True,
    "color_symbols": True,
    "color_values": True,
}


# ----------------- Colorize utility -----------------
def colorize(text: str, color: str, enabled: bool) -> str:
    if enabled:
        return f"{color}{text}{RESET}"
    return text


def _clip(text: str, limit: int) -> str:
    if limit and len(text) > limit:
        return text[: max(limit - 1, 0)] + "…"
    return text


def _header(interner: InternerProtocol) -> str:
    parts = [type(interner).__name__]
    mode = getattr(interner, "mode", None)
    if mode is not None:
        parts.append(f"mode={mode.value}")
    width = getattr(interner, "width", None)
    if width is not None:
        parts.append(f"width={width.name}")
    parts.append(f"count={interner.count}")
    return " ".join(parts)


# ----------------- Pretty printer -----------------
def pprint_interner(interner: InternerProtocol, options: Options = DEFAULT_OPTIONS) -> str:
    """Render an interner as a table of `raw_id  value` rows in raw-id order."""
    legend_str = ""
    if options.get("display_legend", False):
        legend_items = [
            f"{COLOR_SYMBOL}Symbol{RESET}",
            f"{COLOR_VALUE}Value{RESET}",
            f"{COLOR_ELLIPSIS}Truncated{RESET}",
        ]
        legend_str = "Color Key: " + " | ".join(legend_items) + "\n"

    pairs = sorted(interner, key=lambda pair: pair[1])
    lines = [colorize(_header(interner), COLOR_HEADER, options.get("color_header", True))]
    if not pairs:
        return legend_str + lines[0]

    max_rows = options.get("max_rows", 20)
    shown = pairs if max_rows is None else pairs[:max_rows]
    id_width = len(str(shown[-1][1])) if shown else 0
    for value, symbol in shown:
        sym_str = colorize(str(symbol).rjust(id_width), COLOR_SYMBOL, options.get("color_symbols", True))
        val_str = colorize(
            _clip(repr(value), options.get("max_value_length", 60)),
            COLOR_VALUE,
            options.get("color_values", True),
        )
        lines.append(f"  {sym_str}  {val_str}")
    hidden = len(pairs) - len(shown)
    if hidden > 0:
        lines.append("  " + colorize(f"… {hidden} more", COLOR_ELLIPSIS, options.get("color_symbols", True)))
    return legend_str + "\n".join(lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> Options:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return dict(DEFAULT_OPTIONS)
    if not isinstance(user_opts, dict):
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}


# ----------------- Example usage -----------------
if __name__ == "__main__":
    from interner.interner import Interner

    interner = Interner("time", "uint16")
    for word in "the quick brown fox jumps over the lazy dog".split():
        interner.intern(word)

    options = load_options_from_json('{"max_rows": 5, "display_legend": true}')
    print(pprint_interner(interner, options=options))
