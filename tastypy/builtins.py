"""Built-in tables that are available regardless of project configuration."""

from typing import Final

STYLE_PROPERTIES: Final[dict[str, tuple[str, ...]]] = {
    "layout": (
        "display",
        "flow",
        "gap",
        "padding",
        "paddingInline",
        "paddingBlock",
        "margin",
        "width",
        "height",
        "flexBasis",
        "flexGrow",
        "flexShrink",
        "flex",
    ),
    "visual": (
        "fill",
        "color",
        "border",
        "radius",
        "shadow",
        "outline",
        "outlineOffset",
        "fade",
        "image",
        "opacity",
    ),
    "typography": (
        "preset",
        "font",
        "textAlign",
        "textTransform",
        "fontWeight",
        "fontStyle",
        "whiteSpace",
        "textDecoration",
        "textOverflow",
        "wordBreak",
        "letterSpacing",
        "lineHeight",
    ),
    "grid": (
        "gridColumns",
        "gridRows",
        "gridTemplate",
        "gridAreas",
        "gridColumn",
        "gridRow",
        "gridArea",
    ),
    "alignment": (
        "align",
        "justify",
        "place",
        "placeContent",
        "placeItems",
        "alignItems",
        "alignContent",
        "justifyItems",
        "justifyContent",
        "placeSelf",
        "alignSelf",
        "justifySelf",
    ),
    "position": ("position", "inset", "top", "right", "bottom", "left", "zIndex", "order"),
    "other": (
        "overflow",
        "scrollbar",
        "transition",
        "animation",
        "hide",
        "reset",
        "cursor",
        "pointerEvents",
        "userSelect",
        "visibility",
        "transform",
        "transformOrigin",
        "filter",
        "backdropFilter",
        "mixBlendMode",
        "isolation",
        "content",
        "listStyle",
        "appearance",
        "resize",
        "objectFit",
        "objectPosition",
        "aspectRatio",
        "boxSizing",
        "container",
        "containerName",
        "containerType",
        "clip",
        "clipPath",
        "mask",
        "maskImage",
        "willChange",
        "touchAction",
        "scrollBehavior",
        "scrollSnapType",
        "scrollSnapAlign",
        "caretColor",
        "accentColor",
    ),
    "special": ("@keyframes", "@properties", "$"),
}

ALL_STYLE_PROPERTIES: Final[tuple[str, ...]] = tuple(
    name for group in STYLE_PROPERTIES.values() for name in group
)

BUILT_IN_UNITS: Final[tuple[str, ...]] = ("x", "r", "cr", "bw", "ow", "fs", "lh", "sf")

CSS_UNITS: Final[frozenset[str]] = frozenset(
    {
        "px",
        "em",
        "rem",
        "%",
        "vw",
        "vh",
        "vmin",
        "vmax",
        "dvw",
        "dvh",
        "svw",
        "svh",
        "lvw",
        "lvh",
        "ch",
        "ex",
        "cap",
        "ic",
        "lh",
        "rlh",
        "cqw",
        "cqh",
        "cqi",
        "cqb",
        "cqmin",
        "cqmax",
        "deg",
        "rad",
        "grad",
        "turn",
        "s",
        "ms",
        "fr",
    }
)

# Combinable with any preset, e.g. `t1 strong`.
PRESET_MODIFIERS: Final[tuple[str, ...]] = ("strong", "italic", "icon", "tight")

DIRECTION_MODIFIERS: Final[tuple[str, ...]] = (
    "top",
    "right",
    "bottom",
    "left",
    "inline",
    "block",
    "inline-start",
    "inline-end",
    "block-start",
    "block-end",
)

CSS_FUNCTIONS: Final[tuple[str, ...]] = (
    # math
    "calc",
    "min",
    "max",
    "clamp",
    "abs",
    "sign",
    "round",
    "mod",
    "rem",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "pow",
    "sqrt",
    "hypot",
    "log",
    "exp",
    # color
    "rgb",
    "rgba",
    "hsl",
    "hsla",
    "hwb",
    "lab",
    "lch",
    "oklch",
    "oklab",
    "okhsl",
    "color",
    "color-mix",
    "light-dark",
    # gradients
    "linear-gradient",
    "radial-gradient",
    "conic-gradient",
    "repeating-linear-gradient",
    "repeating-radial-gradient",
    "repeating-conic-gradient",
    # transform
    "translate",
    "translateX",
    "translateY",
    "translateZ",
    "translate3d",
    "rotate",
    "rotateX",
    "rotateY",
    "rotateZ",
    "rotate3d",
    "scale",
    "scaleX",
    "scaleY",
    "scaleZ",
    "scale3d",
    "skew",
    "skewX",
    "skewY",
    "matrix",
    "matrix3d",
    "perspective",
    # filter
    "blur",
    "brightness",
    "contrast",
    "drop-shadow",
    "grayscale",
    "hue-rotate",
    "invert",
    "opacity",
    "saturate",
    "sepia",
    # other
    "url",
    "var",
    "env",
    "attr",
    "counter",
    "counters",
    "image",
    "image-set",
    "cross-fade",
    "element",
    "paint",
    "path",
    "polygon",
    "circle",
    "ellipse",
    "inset",
    "rect",
    "xywh",
    "fit-content",
    "minmax",
    "repeat",
)

PSEUDO_CLASSES: Final[tuple[str, ...]] = (
    "hover",
    "focus",
    "focus-visible",
    "focus-within",
    "active",
    "visited",
    "target",
    "first-child",
    "last-child",
    "first-of-type",
    "last-of-type",
    "only-child",
    "only-of-type",
    "nth-child",
    "nth-last-child",
    "nth-of-type",
    "nth-last-of-type",
    "empty",
    "enabled",
    "disabled",
    "checked",
    "indeterminate",
    "default",
    "valid",
    "invalid",
    "in-range",
    "out-of-range",
    "required",
    "optional",
    "read-only",
    "read-write",
    "placeholder-shown",
    "autofill",
    "root",
    "host",
    "host-context",
    "is",
    "where",
    "not",
    "has",
    "dir",
    "lang",
    "any-link",
    "link",
    "local-link",
    "scope",
    "current",
    "past",
    "future",
    "playing",
    "paused",
    "seeking",
    "buffering",
    "stalled",
    "muted",
    "volume-locked",
    "fullscreen",
    "picture-in-picture",
    "modal",
    "user-valid",
    "user-invalid",
    "defined",
    "popover-open",
    "open",
    "closed",
    "state",
)

PSEUDO_ELEMENTS: Final[tuple[str, ...]] = (
    "before",
    "after",
    "first-line",
    "first-letter",
    "selection",
    "placeholder",
    "marker",
    "backdrop",
    "file-selector-button",
    "cue",
    "cue-region",
    "part",
    "slotted",
)

# Pseudo-classes whose parenthesized body is a selector list rather than an opaque argument.
SELECTOR_PSEUDO_CLASSES: Final[frozenset[str]] = frozenset({"has", "is", "where", "not"})

CSS_GLOBAL_VALUES: Final[tuple[str, ...]] = ("inherit", "initial", "unset", "revert", "revert-layer")

# `#current` maps to CSS `currentcolor` and accepts an opacity suffix.
RESERVED_COLOR_TOKENS: Final[tuple[str, ...]] = ("#current",)

_UNIT_DESCRIPTIONS: Final[dict[str, str]] = {
    "x": "gap multiplier (e.g., 2x = 2 * $gap)",
    "r": "radius unit (e.g., 1r = $radius)",
    "cr": "card radius (e.g., 1cr = $card-radius)",
    "bw": "border width (e.g., 1bw = $border-width)",
    "ow": "outline width (e.g., 1ow = $outline-width)",
    "fs": "font size",
    "lh": "line height",
    "sf": "stable fraction (grid layout)",
}


def unit_description(unit: str) -> str:
    return _UNIT_DESCRIPTIONS.get(unit, "custom unit")
