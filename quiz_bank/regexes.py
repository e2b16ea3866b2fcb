import re


# ---------- REGEXES ----------
# building blocks

ID_CHARS_STR = r"[A-Za-z0-9_\-]+"     # letters, digits, underscore, hyphen

# Page and question ids: non-empty, no whitespace, e.g. "pg1", "all_same"
IDENTIFIER_RE = re.compile(
    rf"""^
        {ID_CHARS_STR}
    \Z""",
    re.VERBOSE,
)

__all__ = [
    # building blocks
    "ID_CHARS_STR",

    # compiled regexes
    "IDENTIFIER_RE",
]
