# neobind/utils.py
from typing import Dict, NamedTuple, Optional


class Binding(NamedTuple):
    neo_address: str
    eth_address: str
    sign_text: str


def format_line(neo_address: str, eth_address: str, sign_text: str) -> str:
    """
    Render one binding as a data file line: 'neo,eth,sign' plus a newline.
    Fields are written as-is, no quoting or escaping.
    """
    return f"{neo_address},{eth_address},{sign_text}\n"


def parse_lines(content: str) -> Dict[str, Optional[str]]:
    """
    Parse data file content into a neo -> eth mapping.
    Comment lines ('#' after trimming) and blank lines are skipped.
    A later line for the same neo address overwrites an earlier one.
    A line without a second field maps its key to None.
    """
    result: Dict[str, Optional[str]] = {}
    for line in content.split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        fields = line.split(",")
        result[fields[0]] = fields[1] if len(fields) > 1 else None
    return result
