"""CSS rule text generation for atomic declarations."""

from __future__ import annotations

from atomicss.model.style import ContextPath, RuleText, canonical_order
from atomicss.normalize.properties import mirror_property, mirror_value

_VAR_PREFIX = "var("


def _is_var(value: str) -> bool:
    return value.startswith(_VAR_PREFIX) and value.endswith(")")


def _with_fallback(var: str, fallback: str | None) -> str:
    if fallback is None:
        return var
    return f"{var[:-1]},{fallback})"


def fallback_values(values: tuple[str, ...]) -> list[str]:
    """Resolve a fallback chain into the values to declare, in order.

    Plain values are declared one after another so the last supported one
    wins. ``var()`` entries become wrappers around every plain value that
    precedes the last ``var()``:

        500px, var(--x), var(--y), 100dvh
        -> var(--y,var(--x,500px)), 100dvh
    """
    last_var = max((i for i, v in enumerate(values) if _is_var(v)), default=-1)
    if last_var == -1:
        return list(values)
    head, tail = values[: last_var + 1], values[last_var + 1 :]
    variables = [v for v in head if _is_var(v)]
    plain = [v for v in head if not _is_var(v)]

    def wrap(fallback: str | None) -> str:
        for var in variables:
            fallback = _with_fallback(var, fallback)
        return fallback  # type: ignore[return-value]

    wrapped = [wrap(v) for v in plain] if plain else [wrap(None)]
    return wrapped + list(tail)


def declaration_block(css_property: str, values: tuple[str, ...]) -> str:
    return ";".join(f"{css_property}:{v}" for v in fallback_values(values))


def build_selector(class_name: str, context_path: ContextPath) -> str:
    """``.c`` repeated once more per at-rule, then the pseudo tokens in canonical order."""
    context_path = canonical_order(context_path)
    at_rule_count = sum(1 for s in context_path if s.is_at_rule)
    pseudos = "".join(s.token for s in context_path if s.is_pseudo)
    return f".{class_name}" * (at_rule_count + 1) + pseudos


def wrap_rule(selector: str, block: str, context_path: ContextPath) -> str:
    """Wrap ``selector{block}`` in the path's at-rules, sorted outermost first."""
    rule = f"{selector}{{{block}}}"
    for segment in reversed(canonical_order(context_path)):
        if segment.is_at_rule:
            rule = f"{segment.token}{{{rule}}}"
    return rule


def generate_rule(
    class_name: str,
    css_property: str,
    context_path: ContextPath,
    values: tuple[str, ...],
    direction_sensitive: bool = False,
) -> RuleText:
    """Generate the ltr rule and, for direction-sensitive declarations, the rtl one."""
    selector = build_selector(class_name, context_path)
    ltr = wrap_rule(selector, declaration_block(css_property, values), context_path)
    if not direction_sensitive:
        return RuleText(ltr=ltr, rtl=None)
    mirrored_property = mirror_property(css_property)
    mirrored_values = tuple(mirror_value(css_property, v) for v in values)
    rtl = wrap_rule(
        selector, declaration_block(mirrored_property, mirrored_values), context_path
    )
    return RuleText(ltr=ltr, rtl=rtl)
