"""Canonical spelling rules for technology names.

Each rule maps every accepted spelling of a name to a single canonical token.
Rules are applied to lower-cased text in the order listed. A replacement is
never longer than the text it replaces, which keeps repeated application
finite.
"""

import re
from typing import Pattern, Tuple

# Whitespace between words of a multi-word alias
_WS = r"\s+"

ALIAS_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"\bnode\.?js\b"), "nodejs"),
    (re.compile(r"\breact\.?js\b"), "react"),
    (re.compile(r"\bvue\.?js\b"), "vue"),
    (re.compile(r"\bangular\.?js\b"), "angular"),
    (re.compile(rf"\brestful{_WS}apis?\b"), "restful"),
    (re.compile(rf"\bci(?:/|-|{_WS})cd\b"), "cicd"),
    (re.compile(rf"\bgoogle{_WS}cloud{_WS}platform\b"), "gcp"),
    (re.compile(rf"\bamazon{_WS}web{_WS}services\b|\baws{_WS}cloud\b"), "aws"),
    (re.compile(rf"\btailwind{_WS}css\b"), "tailwind"),
    (re.compile(r"\bhtml5\b"), "html"),
    (re.compile(r"\bcss3\b"), "css"),
)

WHITESPACE_RUN = re.compile(r"\s+")
