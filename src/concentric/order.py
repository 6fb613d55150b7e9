"""Priority ordering of CSS property names.

The default table follows Concentric CSS
(https://github.com/brandon-rhodes/ConcentricCSS): properties are ranked from
the outside of the box (display, position, margin) inwards (padding, size,
typography, content).  Names are camelCase, matching how declarations are
written in CSS-in-JS style objects.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["DEFAULT_ORDER", "PriorityIndex"]

DEFAULT_ORDER: tuple[str, ...] = (
    # browser default styles
    "all",
    "appearance",
    # box model
    "boxSizing",
    # position
    "display",
    "position",
    "top",
    "right",
    "bottom",
    "left",
    "float",
    "clear",
    # flex
    "flex",
    "flexBasis",
    "flexDirection",
    "flexFlow",
    "flexGrow",
    "flexShrink",
    "flexWrap",
    # grid
    "grid",
    "gridArea",
    "gridTemplate",
    "gridTemplateAreas",
    "gridTemplateRows",
    "gridTemplateColumns",
    "gridRow",
    "gridRowStart",
    "gridRowEnd",
    "gridColumn",
    "gridColumnStart",
    "gridColumnEnd",
    "gridAutoRows",
    "gridAutoColumns",
    "gridAutoFlow",
    "gridGap",
    "gridRowGap",
    "gridColumnGap",
    # flex align
    "alignContent",
    "alignItems",
    "alignSelf",
    # flex justify
    "justifyContent",
    "justifyItems",
    "justifySelf",
    # order
    "order",
    # columns
    "columns",
    "columnGap",
    "columnFill",
    "columnRule",
    "columnRuleWidth",
    "columnRuleStyle",
    "columnRuleColor",
    "columnSpan",
    "columnCount",
    "columnWidth",
    # transform
    "backfaceVisibility",
    "perspective",
    "perspectiveOrigin",
    "transform",
    "transformOrigin",
    "transformStyle",
    # transitions
    "transition",
    "transitionDelay",
    "transitionDuration",
    "transitionProperty",
    "transitionTimingFunction",
    # visibility
    "visibility",
    "opacity",
    "mixBlendMode",
    "isolation",
    "zIndex",
    # margin
    "margin",
    "marginTop",
    "marginRight",
    "marginBottom",
    "marginLeft",
    # outline
    "outline",
    "outlineOffset",
    "outlineWidth",
    "outlineStyle",
    "outlineColor",
    # border
    "border",
    "borderTop",
    "borderRight",
    "borderBottom",
    "borderLeft",
    "borderWidth",
    "borderTopWidth",
    "borderRightWidth",
    "borderBottomWidth",
    "borderLeftWidth",
    # border style
    "borderStyle",
    "borderTopStyle",
    "borderRightStyle",
    "borderBottomStyle",
    "borderLeftStyle",
    # border radius
    "borderRadius",
    "borderTopLeftRadius",
    "borderTopRightRadius",
    "borderBottomLeftRadius",
    "borderBottomRightRadius",
    # border color
    "borderColor",
    "borderTopColor",
    "borderRightColor",
    "borderBottomColor",
    "borderLeftColor",
    # border image
    "borderImage",
    "borderImageSource",
    "borderImageWidth",
    "borderImageOutset",
    "borderImageRepeat",
    "borderImageSlice",
    # box shadow
    "boxShadow",
    # background
    "background",
    "backgroundAttachment",
    "backgroundClip",
    "backgroundColor",
    "backgroundImage",
    "backgroundOrigin",
    "backgroundPosition",
    "backgroundRepeat",
    "backgroundSize",
    "backgroundBlendMode",
    # cursor
    "cursor",
    # padding
    "padding",
    "paddingTop",
    "paddingRight",
    "paddingBottom",
    "paddingLeft",
    # width
    "width",
    "minWidth",
    "maxWidth",
    # height
    "height",
    "minHeight",
    "maxHeight",
    # overflow
    "overflow",
    "overflowX",
    "overflowY",
    "resize",
    # list style
    "listStyle",
    "listStyleType",
    "listStylePosition",
    "listStyleImage",
    "captionSide",
    # tables
    "tableLayout",
    "borderCollapse",
    "borderSpacing",
    "emptyCells",
    # animation
    "animation",
    "animationName",
    "animationDuration",
    "animationTimingFunction",
    "animationDelay",
    "animationIterationCount",
    "animationDirection",
    "animationFillMode",
    "animationPlayState",
    # vertical alignment
    "verticalAlign",
    # text alignment & decoration
    "direction",
    "tabSize",
    "textAlign",
    "textAlignLast",
    "textJustify",
    "textIndent",
    "textTransform",
    "textDecoration",
    "textDecorationColor",
    "textDecorationLine",
    "textDecorationStyle",
    "textRendering",
    "textShadow",
    "textOverflow",
    # text spacing
    "lineHeight",
    "wordSpacing",
    "letterSpacing",
    "whiteSpace",
    "wordBreak",
    "wordWrap",
    "color",
    # font
    "font",
    "fontFamily",
    "fontKerning",
    "fontSize",
    "fontSizeAdjust",
    "fontStretch",
    "fontWeight",
    "fontSmoothing",
    "osxFontSmoothing",
    "fontVariant",
    "fontStyle",
    # content
    "content",
    "quotes",
    # counters
    "counterReset",
    "counterIncrement",
    # breaks
    "pageBreakBefore",
    "pageBreakAfter",
    "pageBreakInside",
    # mouse
    "pointerEvents",
    # intent
    "willChange",
)


class PriorityIndex:
    """Rank lookup over an ordered list of property names.

    Lookup is exact and case-sensitive.  If a name appears more than once,
    its first position is its rank.
    """

    def __init__(self, names: Iterable[str]):
        self._names: tuple[str, ...] = tuple(names)
        self._ranks: dict[str, int] = {}
        for position, name in enumerate(self._names):
            self._ranks.setdefault(name, position)

    @classmethod
    def default(cls) -> PriorityIndex:
        return cls(DEFAULT_ORDER)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def rank_of(self, key: str) -> int | None:
        """Return the zero-based rank of *key*, or ``None`` if it is unknown."""
        return self._ranks.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._ranks

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PriorityIndex):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"PriorityIndex({len(self._names)} names)"
