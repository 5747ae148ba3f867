"""Assemble compiled artifacts into stylesheet text."""

from __future__ import annotations

from typing import Iterable

from atomicss.model.style import Artifact

LTR_ANCESTOR = 'html:not([dir="rtl"])'
RTL_ANCESTOR = 'html[dir="rtl"]'


def add_ancestor_selector(rule: str, ancestor: str) -> str:
    """Prefix the selector of *rule* with *ancestor*, inside any at-rule wrappers.

    ``@media (x){.a{color:red}}`` -> ``@media (x){html .a{color:red}}``
    """
    if not rule.startswith("@"):
        return f"{ancestor} {rule}"
    head, _, rest = rule.partition("{")
    return f"{head}{{{add_ancestor_selector(rest[:-1], ancestor)}}}"


def process_stylesheet(
    artifacts: Iterable[Artifact],
    *,
    ltr_ancestor: str = LTR_ANCESTOR,
    rtl_ancestor: str = RTL_ANCESTOR,
) -> str:
    """Render *artifacts* as CSS text, one rule per line, sorted by priority.

    Rules without a mirrored form are emitted as-is. A rule with an ``rtl``
    form is emitted twice, each scoped to its document direction.
    """
    lines: list[str] = []
    for artifact in sorted(artifacts, key=lambda a: a.priority):
        css = artifact.css
        if css.rtl is None:
            lines.append(css.ltr)
            continue
        lines.append(add_ancestor_selector(css.ltr, ltr_ancestor))
        lines.append(add_ancestor_selector(css.rtl, rtl_ancestor))
    return "\n".join(lines)
