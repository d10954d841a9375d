# Program: Copyright Banner Templates
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Built-in banner templates and placeholder substitution.

Author and email are baked into the template text when the templates are
built; the remaining placeholders are filled per file:

  * ``{{createdDate}}`` and ``{{lastModifiedDate}}`` from git history
  * ``{{filename}}`` from the file's base name
  * ``{{year}}`` from the creation date
"""

from __future__ import annotations

import re
from typing import Mapping, Sequence

from .errors import UnresolvedPlaceholderError

PLACEHOLDERS = ("createdDate", "filename", "lastModifiedDate", "year")
_PLACEHOLDER_RE = re.compile(r"\{\{\w+\}\}")


def build_templates(author: str, email: str) -> tuple[str, ...]:
    minimal = "\n".join(
        [
            "/**",
            f" * Created by {author}<{email}> at {{{{createdDate}}}}.",
            " * Last modified at {{lastModifiedDate}}",
            " */",
            "",
            "",
        ]
    )
    structured = "\n".join(
        [
            "/**",
            " * @file {{filename}}",
            " * @description",
            " * @created {{createdDate}}",
            " * @lastModified {{lastModifiedDate}}",
            f" * @author {author}",
            f" * @email {email}",
            " * @copyright Copyright (c) {{year}}",
            " */",
            "",
            "",
        ]
    )
    return (minimal, structured)


def select_template(templates: Sequence[str], index: int) -> str:
    """Return the template at ``index``, falling back to the first one."""
    if 0 <= index < len(templates):
        return templates[index]
    return templates[0]


def render_template(template: str, values: Mapping[str, str]) -> str:
    """Replace the first occurrence of each known placeholder.

    Raises:
        UnresolvedPlaceholderError: a ``{{...}}`` token is left in the output.
    """

    rendered = template
    for name in PLACEHOLDERS:
        if name in values:
            rendered = rendered.replace("{{" + name + "}}", values[name], 1)
    leftover = _PLACEHOLDER_RE.search(rendered)
    if leftover is not None:
        raise UnresolvedPlaceholderError(f"Unresolved placeholder {leftover.group(0)} in banner")
    return rendered


# Created by Dr. Z. Bakhtiyorov
