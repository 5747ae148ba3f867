"""Property tables: naming, units, logical mapping, priority tiers and mirroring."""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------

_DASHIFY_RE = re.compile(r"(^|[a-z])([A-Z])")


def dashify(name: str) -> str:
    """Convert a camelCase property name to its CSS spelling.

    ``WebkitAppearance`` becomes ``-webkit-appearance``; custom properties
    (``--x``) are returned unchanged.
    """
    if name.startswith("--"):
        return name
    return _DASHIFY_RE.sub(r"\1-\2", name).lower()


def is_custom_property(name: str) -> bool:
    return name.startswith("--")


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

UNITLESS_NUMBER_PROPERTIES = frozenset({
    "animationIterationCount",
    "aspectRatio",
    "borderImageOutset",
    "borderImageSlice",
    "borderImageWidth",
    "columnCount",
    "fillOpacity",
    "flex",
    "flexGrow",
    "flexPositive",
    "flexShrink",
    "flexNegative",
    "flexOrder",
    "floodOpacity",
    "fontSizeAdjust",
    "fontWeight",
    "gridColumn",
    "gridColumnEnd",
    "gridColumnStart",
    "gridRow",
    "gridRowEnd",
    "gridRowStart",
    "initialLetter",
    "lineClamp",
    "lineHeight",
    "mathDepth",
    "opacity",
    "order",
    "orphans",
    "scale",
    "shapeImageThreshold",
    "stopOpacity",
    "strokeDasharray",
    "strokeDashoffset",
    "strokeMiterlimit",
    "strokeOpacity",
    "strokeWidth",
    "tabSize",
    "widows",
    "zIndex",
    "zoom",
})

TIME_PROPERTIES = frozenset({
    "animationDelay",
    "animationDuration",
    "transitionDelay",
    "transitionDuration",
})


def number_suffix(prop: str) -> str:
    """Unit appended to a bare number for *prop* (camelCase)."""
    if is_custom_property(prop) or prop in UNITLESS_NUMBER_PROPERTIES:
        return ""
    if prop in TIME_PROPERTIES:
        return "ms"
    return "px"


# ---------------------------------------------------------------------------
# Logical mapping
# ---------------------------------------------------------------------------

# Author spellings (physical horizontal or legacy logical) to the logical
# longhand that is emitted. Block-axis logical names map to the physical
# top/bottom longhands so that every spelling of the same side collapses.
LOGICAL_ALIASES: dict[str, str] = {
    "start": "insetInlineStart",
    "end": "insetInlineEnd",
    "left": "insetInlineStart",
    "right": "insetInlineEnd",
    "insetBlockStart": "top",
    "insetBlockEnd": "bottom",
    "marginLeft": "marginInlineStart",
    "marginRight": "marginInlineEnd",
    "marginStart": "marginInlineStart",
    "marginEnd": "marginInlineEnd",
    "marginBlockStart": "marginTop",
    "marginBlockEnd": "marginBottom",
    "paddingLeft": "paddingInlineStart",
    "paddingRight": "paddingInlineEnd",
    "paddingStart": "paddingInlineStart",
    "paddingEnd": "paddingInlineEnd",
    "paddingBlockStart": "paddingTop",
    "paddingBlockEnd": "paddingBottom",
    "borderLeft": "borderInlineStart",
    "borderRight": "borderInlineEnd",
    "borderStart": "borderInlineStart",
    "borderEnd": "borderInlineEnd",
    "borderLeftWidth": "borderInlineStartWidth",
    "borderRightWidth": "borderInlineEndWidth",
    "borderStartWidth": "borderInlineStartWidth",
    "borderEndWidth": "borderInlineEndWidth",
    "borderLeftStyle": "borderInlineStartStyle",
    "borderRightStyle": "borderInlineEndStyle",
    "borderStartStyle": "borderInlineStartStyle",
    "borderEndStyle": "borderInlineEndStyle",
    "borderLeftColor": "borderInlineStartColor",
    "borderRightColor": "borderInlineEndColor",
    "borderStartColor": "borderInlineStartColor",
    "borderEndColor": "borderInlineEndColor",
    "borderTopLeftRadius": "borderStartStartRadius",
    "borderTopRightRadius": "borderStartEndRadius",
    "borderBottomLeftRadius": "borderEndStartRadius",
    "borderBottomRightRadius": "borderEndEndRadius",
    "borderTopStartRadius": "borderStartStartRadius",
    "borderTopEndRadius": "borderStartEndRadius",
    "borderBottomStartRadius": "borderEndStartRadius",
    "borderBottomEndRadius": "borderEndEndRadius",
    "scrollMarginLeft": "scrollMarginInlineStart",
    "scrollMarginRight": "scrollMarginInlineEnd",
    "scrollPaddingLeft": "scrollPaddingInlineStart",
    "scrollPaddingRight": "scrollPaddingInlineEnd",
}


def resolve_alias(prop: str) -> tuple[str, bool]:
    """Return ``(logical_prop, was_mapped)`` for an author property name."""
    mapped = LOGICAL_ALIASES.get(prop)
    if mapped is None:
        return prop, False
    return mapped, True


# ---------------------------------------------------------------------------
# Direction mirroring
# ---------------------------------------------------------------------------

_LOGICAL_CORNER_RE = re.compile(r"^border-(start|end)-(start|end)-radius$")
_DIRECTION_TOKEN_RE = re.compile(r"(?<![\w-])(inline-)?(start|end)(?![\w-])")
_SWAP = {"start": "end", "end": "start"}

# Properties whose *values* carry a start/end keyword.
VALUE_MIRRORED_PROPERTIES = frozenset({"float", "clear", "text-align", "text-align-last"})


def mirror_property(css_property: str) -> str:
    """Swap the inline-axis start/end of a dashed logical property name."""
    if "inline-start" in css_property:
        return css_property.replace("inline-start", "inline-end")
    if "inline-end" in css_property:
        return css_property.replace("inline-end", "inline-start")
    match = _LOGICAL_CORNER_RE.match(css_property)
    if match:
        return f"border-{match.group(1)}-{_SWAP[match.group(2)]}-radius"
    return css_property


def mirror_value(css_property: str, value: str) -> str:
    if css_property not in VALUE_MIRRORED_PROPERTIES:
        return value
    return _DIRECTION_TOKEN_RE.sub(
        lambda m: (m.group(1) or "") + _SWAP[m.group(2)], value
    )


def is_direction_sensitive(css_property: str, values: tuple[str, ...] = ()) -> bool:
    if mirror_property(css_property) != css_property:
        return True
    if css_property in VALUE_MIRRORED_PROPERTIES:
        return any(mirror_value(css_property, v) != v for v in values)
    return False


# ---------------------------------------------------------------------------
# Priority tiers
# ---------------------------------------------------------------------------

SHORTHANDS_OF_SHORTHANDS = frozenset({
    "all",
    "background",
    "border",
    "border-block",
    "border-inline",
    "font",
    "grid",
    "mask",
})

SHORTHANDS_OF_LONGHANDS = frozenset({
    "animation",
    "background-position",
    "border-block-end",
    "border-block-start",
    "border-bottom",
    "border-color",
    "border-image",
    "border-inline-end",
    "border-inline-start",
    "border-radius",
    "border-style",
    "border-top",
    "border-width",
    "column-rule",
    "columns",
    "contain-intrinsic-size",
    "container",
    "flex",
    "flex-flow",
    "font-variant",
    "gap",
    "grid-area",
    "grid-column",
    "grid-row",
    "grid-template",
    "inset",
    "inset-block",
    "inset-inline",
    "list-style",
    "margin",
    "margin-block",
    "margin-inline",
    "mask-border",
    "offset",
    "outline",
    "overflow",
    "overscroll-behavior",
    "padding",
    "padding-block",
    "padding-inline",
    "place-content",
    "place-items",
    "place-self",
    "scroll-margin",
    "scroll-padding",
    "text-decoration",
    "text-emphasis",
    "transition",
})

PHYSICAL_LONGHANDS = frozenset({
    "border-bottom-color",
    "border-bottom-style",
    "border-bottom-width",
    "border-top-color",
    "border-top-style",
    "border-top-width",
    "bottom",
    "height",
    "margin-bottom",
    "margin-top",
    "max-height",
    "max-width",
    "min-height",
    "min-width",
    "overflow-x",
    "overflow-y",
    "padding-bottom",
    "padding-top",
    "scroll-margin-bottom",
    "scroll-margin-top",
    "scroll-padding-bottom",
    "scroll-padding-top",
    "top",
    "width",
})


def property_priority(css_property: str) -> int:
    """Base priority tier for a dashed property name."""
    if css_property in SHORTHANDS_OF_SHORTHANDS:
        return 1000
    if css_property in SHORTHANDS_OF_LONGHANDS:
        return 2000
    if css_property in PHYSICAL_LONGHANDS:
        return 4000
    return 3000


# ---------------------------------------------------------------------------
# Known properties
# ---------------------------------------------------------------------------

_VENDOR_PREFIXES = ("-webkit-", "-moz-", "-ms-", "ms-", "-o-")

KNOWN_PROPERTIES = frozenset({
    "accent-color", "align-content", "align-items", "align-self", "alignment-baseline",
    "all", "anchor-name", "animation", "animation-composition", "animation-delay",
    "animation-direction", "animation-duration", "animation-fill-mode",
    "animation-iteration-count", "animation-name", "animation-play-state",
    "animation-timeline", "animation-timing-function", "appearance", "aspect-ratio",
    "backdrop-filter", "backface-visibility", "background", "background-attachment",
    "background-blend-mode", "background-clip", "background-color", "background-image",
    "background-origin", "background-position", "background-position-x",
    "background-position-y", "background-repeat", "background-size", "block-size",
    "border", "border-block", "border-block-color", "border-block-end",
    "border-block-end-color", "border-block-end-style", "border-block-end-width",
    "border-block-start", "border-block-start-color", "border-block-start-style",
    "border-block-start-width", "border-block-style", "border-block-width",
    "border-bottom", "border-bottom-color", "border-bottom-left-radius",
    "border-bottom-right-radius", "border-bottom-style", "border-bottom-width",
    "border-collapse", "border-color", "border-end-end-radius", "border-end-start-radius",
    "border-image", "border-image-outset", "border-image-repeat", "border-image-slice",
    "border-image-source", "border-image-width", "border-inline", "border-inline-color",
    "border-inline-end", "border-inline-end-color", "border-inline-end-style",
    "border-inline-end-width", "border-inline-start", "border-inline-start-color",
    "border-inline-start-style", "border-inline-start-width", "border-inline-style",
    "border-inline-width", "border-left", "border-left-color", "border-left-style",
    "border-left-width", "border-radius", "border-right", "border-right-color",
    "border-right-style", "border-right-width", "border-spacing", "border-start-end-radius",
    "border-start-start-radius", "border-style", "border-top", "border-top-color",
    "border-top-left-radius", "border-top-right-radius", "border-top-style",
    "border-top-width", "border-width", "bottom", "box-decoration-break", "box-shadow",
    "box-sizing", "break-after", "break-before", "break-inside", "caption-side",
    "caret-color", "clear", "clip", "clip-path", "clip-rule", "color", "color-scheme",
    "column-count", "column-fill", "column-gap", "column-rule", "column-rule-color",
    "column-rule-style", "column-rule-width", "column-span", "column-width", "columns",
    "contain", "contain-intrinsic-size", "container", "container-name", "container-type",
    "content", "content-visibility", "counter-increment", "counter-reset", "counter-set",
    "cursor", "cx", "cy", "d", "direction", "display", "dominant-baseline", "empty-cells",
    "field-sizing", "fill", "fill-opacity", "fill-rule", "filter", "flex", "flex-basis",
    "flex-direction", "flex-flow", "flex-grow", "flex-shrink", "flex-wrap", "float",
    "flood-color", "flood-opacity", "font", "font-display", "font-family",
    "font-feature-settings", "font-kerning", "font-optical-sizing", "font-palette",
    "font-size", "font-size-adjust", "font-stretch", "font-style", "font-synthesis",
    "font-variant", "font-variant-caps", "font-variant-east-asian",
    "font-variant-ligatures", "font-variant-numeric", "font-variation-settings",
    "font-weight", "forced-color-adjust", "gap", "grid", "grid-area", "grid-auto-columns",
    "grid-auto-flow", "grid-auto-rows", "grid-column", "grid-column-end",
    "grid-column-start", "grid-row", "grid-row-end", "grid-row-start", "grid-template",
    "grid-template-areas", "grid-template-columns", "grid-template-rows",
    "hanging-punctuation", "height", "hyphenate-character", "hyphens", "image-orientation",
    "image-rendering", "inline-size", "inset", "inset-block", "inset-block-end",
    "inset-block-start", "inset-inline", "inset-inline-end", "inset-inline-start",
    "isolation", "justify-content", "justify-items", "justify-self", "left",
    "letter-spacing", "line-break", "line-clamp", "line-height", "list-style",
    "list-style-image", "list-style-position", "list-style-type", "margin", "margin-block",
    "margin-block-end", "margin-block-start", "margin-bottom", "margin-inline",
    "margin-inline-end", "margin-inline-start", "margin-left", "margin-right",
    "margin-top", "marker", "marker-end", "marker-mid", "marker-start", "mask",
    "mask-border", "mask-clip", "mask-composite", "mask-image", "mask-mode",
    "mask-origin", "mask-position", "mask-repeat", "mask-size", "mask-type",
    "math-depth", "math-style", "max-block-size", "max-height", "max-inline-size",
    "max-width", "min-block-size", "min-height", "min-inline-size", "min-width",
    "mix-blend-mode", "object-fit", "object-position", "offset", "offset-anchor",
    "offset-distance", "offset-path", "offset-position", "offset-rotate", "opacity",
    "order", "orphans", "outline", "outline-color", "outline-offset", "outline-style",
    "outline-width", "overflow", "overflow-anchor", "overflow-block", "overflow-clip-margin",
    "overflow-inline", "overflow-wrap", "overflow-x", "overflow-y", "overscroll-behavior",
    "overscroll-behavior-block", "overscroll-behavior-inline", "overscroll-behavior-x",
    "overscroll-behavior-y", "padding", "padding-block", "padding-block-end",
    "padding-block-start", "padding-bottom", "padding-inline", "padding-inline-end",
    "padding-inline-start", "padding-left", "padding-right", "padding-top", "page",
    "page-break-after", "page-break-before", "page-break-inside", "paint-order",
    "perspective", "perspective-origin", "place-content", "place-items", "place-self",
    "pointer-events", "position", "position-anchor", "print-color-adjust", "quotes", "r",
    "resize", "right", "rotate", "row-gap", "ruby-align", "ruby-position", "rx", "ry",
    "scale", "scroll-behavior", "scroll-margin", "scroll-margin-block",
    "scroll-margin-block-end", "scroll-margin-block-start", "scroll-margin-bottom",
    "scroll-margin-inline", "scroll-margin-inline-end", "scroll-margin-inline-start",
    "scroll-margin-left", "scroll-margin-right", "scroll-margin-top", "scroll-padding",
    "scroll-padding-block", "scroll-padding-block-end", "scroll-padding-block-start",
    "scroll-padding-bottom", "scroll-padding-inline", "scroll-padding-inline-end",
    "scroll-padding-inline-start", "scroll-padding-left", "scroll-padding-right",
    "scroll-padding-top", "scroll-snap-align", "scroll-snap-stop", "scroll-snap-type",
    "scroll-timeline", "scroll-timeline-axis", "scroll-timeline-name", "scrollbar-color",
    "scrollbar-gutter", "scrollbar-width", "shape-image-threshold", "shape-margin",
    "shape-outside", "shape-rendering", "stop-color", "stop-opacity", "stroke",
    "stroke-dasharray", "stroke-dashoffset", "stroke-linecap", "stroke-linejoin",
    "stroke-miterlimit", "stroke-opacity", "stroke-width", "tab-size", "table-layout",
    "text-align", "text-align-last", "text-anchor", "text-combine-upright",
    "text-decoration", "text-decoration-color", "text-decoration-line",
    "text-decoration-skip-ink", "text-decoration-style", "text-decoration-thickness",
    "text-emphasis", "text-emphasis-color", "text-emphasis-position",
    "text-emphasis-style", "text-indent", "text-justify", "text-orientation",
    "text-overflow", "text-rendering", "text-shadow", "text-size-adjust",
    "text-transform", "text-underline-offset", "text-underline-position", "text-wrap",
    "timeline-scope", "top", "touch-action", "transform", "transform-box",
    "transform-origin", "transform-style", "transition", "transition-behavior",
    "transition-delay", "transition-duration", "transition-property",
    "transition-timing-function", "translate", "unicode-bidi", "user-select",
    "vector-effect", "vertical-align", "view-timeline", "view-timeline-axis",
    "view-timeline-inset", "view-timeline-name", "view-transition-name", "visibility",
    "white-space", "white-space-collapse", "widows", "width", "will-change",
    "word-break", "word-spacing", "word-wrap", "writing-mode", "x", "y", "z-index", "zoom",
})


def is_known_property(css_property: str) -> bool:
    if is_custom_property(css_property):
        return True
    if css_property.startswith(_VENDOR_PREFIXES):
        return True
    return css_property in KNOWN_PROPERTIES
